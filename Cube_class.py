import numpy as np

# Face positions, in the order the labels are stored
FRONT, RIGHT, BACK, LEFT, BOTTOM, TOP = range(6)
FACE_NAMES = ["front", "right", "back", "left", "bottom", "top"]

# Only these four are visible along the stack
LATERAL_FACES = (FRONT, RIGHT, BACK, LEFT)

MAX_ROTATIONS = 3
MAX_FLIPS = 3

# One flip to the back:
#   bottom -> front, right -> right, top -> back,
#   left -> left, back -> bottom, front -> top
FLIP_PERMUTATION = np.array([BOTTOM, RIGHT, TOP, LEFT, BACK, FRONT])

# ROTATION_PERMUTATIONS[n]: rotated to the left n times, side n ends up in front
ROTATION_PERMUTATIONS = [
    np.concatenate([np.roll(np.arange(4), -n), [BOTTOM, TOP]])
    for n in range(MAX_ROTATIONS + 1)
]


class InvalidCubeDefinition(ValueError):
    """Raised when a cube is not given exactly six face labels."""


class InvalidTransformParameter(ValueError):
    """Raised when rotate or flip steps fall outside [0, 3]."""


def _check_steps(name, steps, max_steps):
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)):
        raise InvalidTransformParameter(f"{name} must be an integer, got {steps!r}.")
    if not 0 <= steps <= max_steps:
        raise InvalidTransformParameter(
            f"{name} must be between 0 and {max_steps}, got {steps}.")


class Cube:
    def __init__(self, faces):
        # faces = [front, right, back, left, bottom, top]
        faces = list(faces)
        if len(faces) != 6:
            raise InvalidCubeDefinition(
                f"Cube must have exactly 6 faces. Got {len(faces)}.")

        self._faces = np.empty(6, dtype=object)
        for i, label in enumerate(faces):
            self._faces[i] = label
        self._faces.flags.writeable = False

    @property
    def faces(self):
        return tuple(self._faces)

    def transform(self, rotate_steps, flip_steps):
        """
        Return the faces after rotating the cube to the left rotate_steps times
        and then flipping it to the back flip_steps times.

        The cube itself is left untouched; a new list in
        [front, right, back, left, bottom, top] order is returned.
        """
        _check_steps("rotate_steps", rotate_steps, MAX_ROTATIONS)
        _check_steps("flip_steps", flip_steps, MAX_FLIPS)

        faces = self._rotate(self._faces, rotate_steps)
        for _ in range(flip_steps):
            faces = self._flip(faces)
        return faces.tolist()

    @staticmethod
    def _rotate(faces, steps):
        """Rotate about the vertical axis; the new front is side `steps`."""
        return faces[ROTATION_PERMUTATIONS[steps]]

    @staticmethod
    def _flip(faces):
        return faces[FLIP_PERMUTATION]

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return self.faces == other.faces

    def __hash__(self):
        return hash(self.faces)

    def __repr__(self):
        return f"Cube({list(self.faces)!r})"
