"""
Instant Insanity Solver

Searches every orientation of four stacked cubes for one where each of the
four lateral rows (front, right, back, left) shows four different labels.

Each cube is oriented by an (rotate_steps, flip_steps) pair with both values
in [0, 3], giving 16 orientations per cube and 16^4 = 65,536 combinations.
Combinations are tried in lexicographic order:

    (cube1.rotate, cube1.flip, cube2.rotate, ..., cube4.flip)

and the first one that satisfies the constraint is returned.
"""

import itertools
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from Cube_class import Cube, LATERAL_FACES, MAX_FLIPS, MAX_ROTATIONS

CUBE_COUNT = 4


class InvalidCubeCount(ValueError):
    """Raised when the solver is not given exactly four cubes."""


@dataclass(frozen=True)
class Orientation:
    """How far one cube is rotated (vertical axis) and flipped (to the back)."""
    rotate_steps: int
    flip_steps: int

    def __iter__(self):
        return iter((self.rotate_steps, self.flip_steps))

    def __str__(self):
        return f"({self.rotate_steps}, {self.flip_steps})"


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a search.

    Attributes:
        orientations: One Orientation per cube in input order, or None when
            no combination satisfied the constraint.
        combinations_checked: Number of candidates tested.
        exhausted: False only when the search was stopped early by the
            caller before finding a solution.
    """
    orientations: Optional[Tuple[Orientation, ...]]
    combinations_checked: int
    exhausted: bool = True

    @property
    def found(self) -> bool:
        return self.orientations is not None


def columns_distinct(arrangements: Sequence[Sequence]) -> bool:
    """
    Check the lateral rows of already-transformed cubes.

    Args:
        arrangements: One 6-label arrangement per cube, in
            [front, right, back, left, bottom, top] order

    Returns:
        True if, for each lateral position, the labels across all cubes are
        pairwise different
    """
    for position in LATERAL_FACES:
        column = [faces[position] for faces in arrangements]
        for a, b in itertools.combinations(column, 2):
            if a == b:
                return False
    return True


def iter_orientations(cube_count: int = CUBE_COUNT):
    """
    Yield every orientation combination for `cube_count` cubes.

    Works as an odometer over 2 * cube_count digits; the last digit (flip of
    the last cube) turns fastest.
    """
    digits = []
    for _ in range(cube_count):
        digits.append(range(MAX_ROTATIONS + 1))
        digits.append(range(MAX_FLIPS + 1))

    for reading in itertools.product(*digits):
        yield tuple(Orientation(reading[i], reading[i + 1])
                    for i in range(0, len(reading), 2))


class InsanitySolver:
    """
    Exhaustive solver for the four-cube puzzle.

    Usage:
        solver = InsanitySolver([Cube("GWRRBW"), Cube("BWWGRB"),
                                 Cube("RRRBWG"), Cube("GWRGBB")])
        result = solver.run()
        if result.found:
            for rotate_steps, flip_steps in result.orientations:
                ...
    """

    def __init__(self, cubes: Sequence[Cube]):
        """
        Args:
            cubes: Exactly four cubes; their order is the stacking order
        """
        cubes = list(cubes)
        if len(cubes) != CUBE_COUNT:
            raise InvalidCubeCount(
                f"There should be {CUBE_COUNT} cubes to find a solution. Got {len(cubes)}.")
        for cube in cubes:
            if not isinstance(cube, Cube):
                raise TypeError(f"Expected a Cube, got {type(cube).__name__}.")
        self.cubes = tuple(cubes)

    def transform_all(self, orientations: Sequence[Orientation]) -> List[list]:
        """Transform each cube by its matching orientation."""
        return [cube.transform(rotate_steps, flip_steps)
                for cube, (rotate_steps, flip_steps) in zip(self.cubes, orientations)]

    def check_solution(self, orientations: Sequence[Orientation]) -> bool:
        """
        Test a single candidate.

        Args:
            orientations: One (rotate_steps, flip_steps) pair per cube

        Returns:
            True if every lateral row shows four different labels
        """
        if len(orientations) != len(self.cubes):
            raise ValueError(
                f"Expected {len(self.cubes)} orientations, got {len(orientations)}.")
        return columns_distinct(self.transform_all(orientations))

    def run(
        self,
        progress: Optional[Callable[[Tuple[Orientation, ...]], None]] = None,
        should_stop: Optional[Callable[[], bool]] = None
    ) -> SearchResult:
        """
        Search all orientation combinations and return the first solution.

        Args:
            progress: Called with each candidate before it is checked
            should_stop: Polled between candidates; returning True ends the
                search early with a not-found, non-exhausted result

        Returns:
            SearchResult; `found` is False when no combination works
        """
        checked = 0
        for candidate in iter_orientations(len(self.cubes)):
            if should_stop is not None and should_stop():
                return SearchResult(None, checked, exhausted=False)

            if progress is not None:
                progress(candidate)

            checked += 1
            if self.check_solution(candidate):
                return SearchResult(candidate, checked)

        return SearchResult(None, checked)
