"""
Instant Insanity Solver - Main Application

Finds an orientation for each of four stacked cubes so that the front,
right, back and left rows each show four different colors.

Usage:
    python insanity_main.py [CUBE CUBE CUBE CUBE] [--input PUZZLE.json] [--output OUT.txt]
                            [--verbose] [--timeout SECONDS]

Each CUBE is six labels in front, right, back, left, bottom, top order,
e.g. GWRRBW. Without cubes or --input the built-in puzzle is solved.

Exit status:
    0  solution found
    1  invalid input
    2  no solution (or search stopped by --timeout)
"""

import argparse
import sys
import time

from CubeSolver import CubeSolver, format_solution, write_solution
from Faces_to_Cube import puzzle_to_cubes

DEFAULT_CUBES = ["GWRRBW", "BWWGRB", "RRRBWG", "GWRGBB"]

EXIT_SOLVED = 0
EXIT_INPUT_ERROR = 1
EXIT_NOT_FOUND = 2


def print_candidate(orientations):
    print("Testing: " + ", ".join(str(o) for o in orientations))


def make_deadline(timeout):
    """Return a should_stop callable that fires after `timeout` seconds."""
    if timeout is None:
        return None
    deadline = time.perf_counter() + timeout
    return lambda: time.perf_counter() >= deadline


def print_cubes(cubes):
    print("\nCubes (front, right, back, left, bottom, top):")
    for i, cube in enumerate(cubes):
        print(f"  Cube #{i + 1}: {' '.join(str(label) for label in cube.faces)}")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Instant Insanity Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        'cubes',
        nargs='*',
        metavar='CUBE',
        help='Six face labels per cube in front, right, back, left, bottom, top order'
    )
    parser.add_argument(
        '--input',
        metavar='PATH',
        help='JSON puzzle file: {"cubes": ["GWRRBW", ...]}'
    )
    parser.add_argument(
        '--output',
        metavar='PATH',
        help='Also write the solution to this text file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print every combination as it is tested'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        metavar='SECONDS',
        help='Give up after this many seconds'
    )
    return parser


def main(argv=None):
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input and args.cubes:
        parser.error("give either CUBE arguments or --input, not both")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    print("=" * 50)
    print("  INSTANT INSANITY SOLVER")
    print("=" * 50)

    solver = CubeSolver()
    progress = print_candidate if args.verbose else None
    should_stop = make_deadline(args.timeout)

    try:
        start_time = time.perf_counter()
        if args.input:
            print(f"\nReading puzzle from {args.input}...")
            result = solver.InstantInsanityFile(
                args.input, args.output, progress=progress, should_stop=should_stop)
        else:
            cubes = puzzle_to_cubes(args.cubes or DEFAULT_CUBES)
            print_cubes(cubes)
            result = solver.InstantInsanity(cubes, progress=progress, should_stop=should_stop)
            if args.output:
                write_solution(result, args.output)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
    except (ValueError, OSError) as e:
        print(f"\nError: {e}")
        return EXIT_INPUT_ERROR

    print()
    for line in format_solution(result):
        print(line)
    print(f"Combinations checked: {result.combinations_checked:,}")
    print(f"Program execution time: {elapsed_ms:.0f} ms")
    if args.output:
        print(f"\nSolution written to {args.output}")

    return EXIT_SOLVED if result.found else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
