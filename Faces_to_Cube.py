import json

from Cube_class import Cube, FACE_NAMES, InvalidCubeDefinition

# Short keys accepted alongside the full face names
FACE_ABBREV = {
    "F": "front",
    "R": "right",
    "B": "back",
    "L": "left",
    "D": "bottom",
    "U": "top"
}


def dict_to_faces(face_dict):
  faces = {}
  for key, label in face_dict.items():
    name = FACE_ABBREV.get(key, str(key).lower())
    if name not in FACE_NAMES:
      raise InvalidCubeDefinition(f"Unknown face '{key}'.")
    if name in faces:
      raise InvalidCubeDefinition(f"Face '{name}' given more than once.")
    faces[name] = label

  missing = [name for name in FACE_NAMES if name not in faces]
  if missing:
    raise InvalidCubeDefinition(f"Missing faces: {', '.join(missing)}.")
  return [faces[name] for name in FACE_NAMES]


def faces_to_cube(cube_obj):
    """
    Build a Cube from any of:
      "GWRRBW"                           one character per face
      ["G", "W", "R", "R", "B", "W"]     one label per face
      {"front": "G", "right": "W", ...}  keyed by face name (or F/R/B/L/D/U)
    Sequences are read in [front, right, back, left, bottom, top] order.
    """
    if isinstance(cube_obj, Cube):
        return cube_obj
    if isinstance(cube_obj, dict):
        return Cube(dict_to_faces(cube_obj))
    if isinstance(cube_obj, str):
        return Cube(cube_obj.strip())
    if isinstance(cube_obj, (list, tuple)):
        return Cube(cube_obj)
    raise InvalidCubeDefinition(f"Cannot read a cube from {cube_obj!r}.")


def puzzle_to_cubes(puzzle_obj):
    # Either {"cubes": [...]} or the bare list of cubes
    if isinstance(puzzle_obj, dict):
        if "cubes" not in puzzle_obj:
            raise ValueError("Puzzle must contain a 'cubes' entry.")
        puzzle_obj = puzzle_obj["cubes"]
    if not isinstance(puzzle_obj, (list, tuple)):
        raise ValueError(f"Puzzle 'cubes' must be a list of cubes, got {puzzle_obj!r}.")
    return [faces_to_cube(cube) for cube in puzzle_obj]


def load_puzzle(path):
    with open(path, 'r') as file:
        try:
            puzzle_obj = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Could not read puzzle file {path}: {e}")
    return puzzle_to_cubes(puzzle_obj)
