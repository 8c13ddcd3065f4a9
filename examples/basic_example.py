#!/usr/bin/env python3
"""
Example script demonstrating the usage of SimpleCmdParser.

This script registers a few options, parses the command line and prints the
resolved options, positional arguments and any parse errors.
"""

import logging
import sys

from simplecmd import SimpleCmdParser


def main() -> None:
    """Main function demonstrating the parser."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    parser = (
        SimpleCmdParser()
        .add("verbose", "v")
        .add("dry-run", "n")
        .add("output", "o", requires_value=True)
        .add("temperature", requires_value=True)
    )

    # Try e.g.: -vn -o out.txt --temperature=27 input.txt -- --not-an-option
    results = parser.parse(sys.argv[1:])

    print("SimpleCmdParser Example")
    print("=" * 50)
    print()

    print("Options:")
    print("-" * 30)
    for name, value in results.option_values().items():
        print(f"{name}: {value}")
    print()

    print("Positional arguments:")
    print("-" * 30)
    for position, argument in enumerate(results.positional_arguments(), start=1):
        print(f"@{position}: {argument}")
    if results.stop_position():
        print(f"(options not parsed from @{results.stop_position()} onwards)")

    if results.has_errors():
        print()
        print("Errors:")
        print("-" * 30)
        for error in results.errors():
            print(error)


if __name__ == "__main__":
    main()
