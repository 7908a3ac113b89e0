"""
Blissword CLI.
"""

import argparse
from blissword.cli.commands import buffer, symbol


def main():
    parser = argparse.ArgumentParser(prog="blissword", description="Blissword CLI")
    subparsers = parser.add_subparsers(dest="command")

    symbol.add_subparser(subparsers)
    buffer.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
