"""
Monkey CLI Entrypoint.

This module provides the command-line interface for the Monkey scanner and parser.

Features:
    - Greet the user and open the REPL when run without arguments.
    - Read source from `.monkey` files or inline strings.
    - Print the token stream, the canonical rendering of the parsed program,
      or the tree as JSON.
    - Report parser errors and exit with status 1.

Example usage:
    monkey
    monkey -s "let x = 1 + 2 * 3;"
    monkey program.monkey --json
    monkey -s "fn(x) { x }" --tokens
    monkey --repl --verbose

Functions:
    run_monkey(source: str, is_string: bool = False, tokens: bool = False,
               as_json: bool = False) -> None:
        Scans and parses the source and prints the result.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action.
"""

import argparse
import getpass
import json
import logging
import sys

from monkey.monkey_lexer import tokenize
from monkey.monkey_parser import ParseError, parse_or_raise

logger = logging.getLogger("monkey")


def greeting() -> str:
    return (
        f"Hello {getpass.getuser()}! This is the Monkey programming language!\n"
        "Feel free to type in commands"
    )


def run_monkey(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    as_json: bool = False,
) -> None:
    """
    Run the Monkey front end on a file or string and print the result.

    Args:
        source (str): The Monkey source code or path to a `.monkey` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        tokens (bool): If True, prints the token stream instead of parsing.
        as_json (bool): If True, prints the parsed tree as JSON instead of its rendering.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.monkey'.
        ParseError: If the parser recorded any errors.
    """
    if not is_string and not source.endswith(".monkey"):
        raise ValueError("Only .monkey files are supported.")
    if not is_string:
        logger.debug("reading %s", source)
        with open(source, encoding="utf-8") as f:
            source = f.read()

    if tokens:
        for tok in tokenize(source):
            print(repr(tok))
        return

    program = parse_or_raise(source)
    logger.debug("parsed %d top-level statements", len(program.statements))

    if as_json:
        print(json.dumps(program.to_dict(), indent=2))
    else:
        print(program)


def main() -> None:
    """
    Entry point for the Monkey CLI.

    - Prints the greeting and launches the REPL if no arguments are passed or
      `--repl` is specified.
    - Otherwise scans and parses the given file or string.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `--tokens`: Print the token stream (REPL starts in token mode).
        - `--json`: Print the parsed tree as JSON.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Debug logging, and JSON trees in the REPL.
    """
    if len(sys.argv) == 1:
        from monkey.monkey_repl import start_repl

        print(greeting())
        start_repl()
        return
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print tokens instead of the tree"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the tree as JSON"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of parsing a source",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(levelname)s %(message)s"
        )
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    if args.repl or args.source is None:
        from monkey.monkey_repl import start_repl

        print(greeting())
        start_repl(mode="tokens" if args.tokens else "parse", verbose=args.verbose)
        return

    try:
        run_monkey(
            source=args.source,
            is_string=args.string,
            tokens=args.tokens,
            as_json=args.as_json,
        )
    except ParseError as e:
        print("[error] >>>", file=sys.stderr)
        for msg in e.errors:
            print(f"\t{msg}", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
