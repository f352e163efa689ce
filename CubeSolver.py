import Faces_to_Cube
from InsanitySolver import InsanitySolver


def format_solution(result):
    """Return the printable lines for a SearchResult."""
    if not result.found:
        if not result.exhausted:
            return [f"Search stopped after {result.combinations_checked:,} combinations.",
                    "Solution not found."]
        return ["Solution not found."]

    lines = ["Solution found:"]
    for i, (rotate_steps, flip_steps) in enumerate(result.orientations):
        lines.append(f"Cube #{i + 1}: {rotate_steps} rotations, {flip_steps} flips.")
    return lines


def write_solution(result, out_path):
    with open(out_path, 'w') as file:
        file.write("\n".join(format_solution(result)) + "\n")


class CubeSolver:

    def InstantInsanity(self, input_obj, progress=None, should_stop=None):
        cubes = Faces_to_Cube.puzzle_to_cubes(input_obj)
        solver = InsanitySolver(cubes)
        return solver.run(progress=progress, should_stop=should_stop)

    def InstantInsanityFile(self, in_path, out_path=None, progress=None, should_stop=None):
        cubes = Faces_to_Cube.load_puzzle(in_path)
        result = self.InstantInsanity(cubes, progress=progress, should_stop=should_stop)

        if out_path is not None:
            write_solution(result, out_path)
        return result
