"""
Tests for the exhaustive Instant Insanity search.

Run with pytest, or directly: python test_solver.py
"""

import pytest

from Cube_class import Cube, LATERAL_FACES
from InsanitySolver import (
    InsanitySolver, InvalidCubeCount, Orientation, SearchResult,
    columns_distinct, iter_orientations
)

PUZZLE = ["GWRRBW", "BWWGRB", "RRRBWG", "GWRGBB"]
COLORS = {"G", "W", "R", "B"}
TOTAL_COMBINATIONS = 16 ** 4


def make_cubes(definitions):
    return [Cube(faces) for faces in definitions]


def test_solves_example_puzzle():
    """The example puzzle has a solution and every lateral row is rainbow."""
    print("=" * 50)
    print("Test: Example Puzzle")
    print("=" * 50)

    cubes = make_cubes(PUZZLE)
    result = InsanitySolver(cubes).run()

    assert result.found, "Example puzzle should be solvable"
    assert result.exhausted
    assert len(result.orientations) == 4

    arrangements = [cube.transform(rotate_steps, flip_steps)
                    for cube, (rotate_steps, flip_steps) in zip(cubes, result.orientations)]
    for position in LATERAL_FACES:
        column = {faces[position] for faces in arrangements}
        assert column == COLORS, f"Row {position} should show all four colors, got {column}"

    print(f"Solution: {', '.join(str(o) for o in result.orientations)}")
    print(f"Checked {result.combinations_checked:,} combinations")
    print("PASSED: Example puzzle test")


def test_returns_first_solution_in_order():
    """The first solution in lexicographic order is the one returned."""
    print("\n" + "=" * 50)
    print("Test: First Solution")
    print("=" * 50)

    result = InsanitySolver(make_cubes(PUZZLE)).run()

    assert result.orientations == (
        Orientation(1, 1), Orientation(1, 1), Orientation(2, 1), Orientation(2, 2)
    )
    # (1,1,1,1,2,1,2,2) read as base-4 digits, plus one
    assert result.combinations_checked == 21915

    # Same answer every time
    assert InsanitySolver(make_cubes(PUZZLE)).run() == result

    print("PASSED: First solution test")


def test_unsolvable_puzzle_is_exhaustive():
    """All-X cubes check every combination and report not found."""
    print("\n" + "=" * 50)
    print("Test: Unsolvable Puzzle")
    print("=" * 50)

    tested = []
    result = InsanitySolver(make_cubes(["XXXXXX"] * 4)).run(progress=tested.append)

    assert not result.found, "All-X puzzle has no solution"
    assert result.orientations is None
    assert result.exhausted
    assert result.combinations_checked == TOTAL_COMBINATIONS
    assert len(tested) == TOTAL_COMBINATIONS
    assert len(set(tested)) == TOTAL_COMBINATIONS, "No combination is tested twice"

    print("PASSED: Unsolvable puzzle test")


def test_iteration_order():
    """Orientations come out as an odometer, last cube's flip fastest."""
    print("\n" + "=" * 50)
    print("Test: Iteration Order")
    print("=" * 50)

    combos = list(iter_orientations())
    assert len(combos) == TOTAL_COMBINATIONS
    assert combos[0] == (Orientation(0, 0),) * 4
    assert combos[1] == (Orientation(0, 0),) * 3 + (Orientation(0, 1),)
    assert combos[4] == (Orientation(0, 0),) * 3 + (Orientation(1, 0),)
    assert combos[16] == (Orientation(0, 0),) * 2 + (Orientation(0, 1), Orientation(0, 0))
    assert combos[-1] == (Orientation(3, 3),) * 4

    flat = [tuple(v for o in combo for v in o) for combo in combos]
    assert flat == sorted(flat), "Combinations should be lexicographic"

    print("PASSED: Iteration order test")


def test_should_stop_ends_search():
    """A stop signal ends the search early without a solution."""
    print("\n" + "=" * 50)
    print("Test: Early Stop")
    print("=" * 50)

    tested = []
    result = InsanitySolver(make_cubes(["XXXXXX"] * 4)).run(
        progress=tested.append,
        should_stop=lambda: len(tested) >= 100
    )

    assert not result.found
    assert not result.exhausted
    assert result.combinations_checked == 100

    # Stopping immediately checks nothing
    result = InsanitySolver(make_cubes(PUZZLE)).run(should_stop=lambda: True)
    assert result == SearchResult(None, 0, exhausted=False)

    print("PASSED: Early stop test")


def test_check_solution_is_repeatable():
    """Checking the same candidate again gives the same answer."""
    print("\n" + "=" * 50)
    print("Test: Repeatable Check")
    print("=" * 50)

    solver = InsanitySolver(make_cubes(PUZZLE))
    good = (Orientation(1, 1), Orientation(1, 1), Orientation(2, 1), Orientation(2, 2))
    bad = (Orientation(0, 0),) * 4

    for _ in range(3):
        assert solver.check_solution(good) is True
        assert solver.check_solution(bad) is False

    arrangements = solver.transform_all(good)
    snapshot = [list(faces) for faces in arrangements]
    for _ in range(3):
        assert columns_distinct(arrangements)
    assert arrangements == snapshot, "Checking must not change the arrangements"

    # Plain tuples work as orientations too
    assert solver.check_solution([(1, 1), (1, 1), (2, 1), (2, 2)])

    with pytest.raises(ValueError):
        solver.check_solution(good[:3])

    print("PASSED: Repeatable check test")


def test_columns_distinct_ignores_top_and_bottom():
    """Only the four lateral positions matter."""
    print("\n" + "=" * 50)
    print("Test: Lateral Faces Only")
    print("=" * 50)

    rainbow = [
        ["A", "B", "C", "D", "Z", "Z"],
        ["B", "C", "D", "A", "Z", "Z"],
        ["C", "D", "A", "B", "Z", "Z"],
        ["D", "A", "B", "C", "Z", "Z"],
    ]
    assert columns_distinct(rainbow)

    repeated = [list(faces) for faces in rainbow]
    repeated[3][LATERAL_FACES[-1]] = "A"
    assert not columns_distinct(repeated)

    print("PASSED: Lateral faces only test")


def test_invalid_cube_count():
    """The solver needs exactly four cubes."""
    print("\n" + "=" * 50)
    print("Test: Invalid Cube Count")
    print("=" * 50)

    for count in (0, 3, 5):
        with pytest.raises(InvalidCubeCount):
            InsanitySolver(make_cubes(["GWRRBW"] * count))

    with pytest.raises(TypeError):
        InsanitySolver(["GWRRBW"] * 4)

    print("PASSED: Invalid cube count test")


def main():
    """Run all tests."""
    print("Instant Insanity Solver - Test Suite")
    print("=" * 50)

    test_solves_example_puzzle()
    test_returns_first_solution_in_order()
    test_unsolvable_puzzle_is_exhaustive()
    test_iteration_order()
    test_should_stop_ends_search()
    test_check_solution_is_repeatable()
    test_columns_distinct_ignores_top_and_bottom()
    test_invalid_cube_count()

    print("\n" + "=" * 50)
    print("All tests PASSED!")
    print("=" * 50)


if __name__ == "__main__":
    main()
