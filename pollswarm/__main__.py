"""
pollswarm CLI

Command-line interface with subcommands for layout and charts.
"""

import argparse
import sys
from .cli import dodge, plot


def main():
    parser = argparse.ArgumentParser(
        prog='pollswarm',
        description='pollswarm: Beeswarm layout and charts for poll results'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    dodge.add_parser(subparsers)
    plot.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    commands = {
        'dodge': dodge.run,
        'plot': plot.run,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
