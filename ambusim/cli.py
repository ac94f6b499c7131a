"""Command line entry point for the simulation."""

from __future__ import annotations

import argparse
import sys

from .organizer import Organizer, load_input


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ambusim", description="Run the ambulance dispatch simulation."
    )
    parser.add_argument("input", nargs="?", help="input file (asked for if omitted)")
    parser.add_argument(
        "-o", "--output", default="simulation_output.txt", help="summary output file"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="do not print per-step status"
    )
    args = parser.parse_args(argv)

    filename = args.input if args.input is not None else input("Enter the file name: ")
    try:
        data = load_input(filename)
    except OSError:
        print("File Open Failure!!", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Invalid input: {error}", file=sys.stderr)
        return 1

    on_step = None if args.quiet else (lambda text: print(text, end=""))
    organizer = Organizer(data, on_step=on_step)
    try:
        organizer.run(args.output)
    except OSError:
        print("Error: Could not create output file", file=sys.stderr)
        return 1
    except RuntimeError as error:
        print(str(error), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())