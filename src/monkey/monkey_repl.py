"""
Interactive read-parse-print loop for the Monkey language.

Each line typed at the `>> ` prompt is scanned and parsed on its own. In
`parse` mode the canonical rendering of the resulting program is printed; in
`tokens` mode every token is printed instead. Parser errors are reported under
a banner and never end the session.

Meta-commands:
    :tokens        switch to token mode
    :parse         switch to parse mode
    verbose-mode   toggle printing the tree as JSON after each parse
    exit, quit     leave the loop (Ctrl-C and Ctrl-D work too)
"""

import io
import json
import traceback

from monkey.monkey_lexer import tokenize
from monkey.monkey_parser import parse

PROMPT = ">> "

MODES = ("parse", "tokens")

MONKEY_FACE = r"""            __,__
   .--.  .-"     "-.  .--.
  / .. \/  .-. .-.  \/ .. \
 | |  '|  /   Y   \  |'  | |
 | \   \  \ 0 | 0 /  /   / |
  \ '- ,\.-'''''''-./, -' /
   ''-' /_   ^ ^   _\ '-''
       |  \._   _./  |
       \   \ '~' /   /
        '._ '-=-' _.'
           '-----'
"""


def print_parser_errors(errors: list[str]) -> None:
    print(MONKEY_FACE, end="")
    print("Woops! We ran into some monkey business here!")
    print(" parser errors:")
    for msg in errors:
        print(f"\t{msg}")


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def handle_meta_command(src: str, state: dict[str, object]) -> bool:
    """Applies a REPL meta-command to `state`. Returns False for ordinary input."""
    if src in (":tokens", ":parse"):
        state["mode"] = src[1:]
        print(f"[mode] >>> {state['mode']}")
        return True
    if src.lower() == "verbose-mode":
        state["verbose"] = not state["verbose"]
        print(f"[mode] >>> Verbose mode {'ON' if state['verbose'] else 'OFF'}")
        return True
    return False


def evaluate_line(src: str, mode: str = "parse", verbose: bool = False) -> None:
    """Scans or parses one line of input and prints the result."""
    if mode == "tokens":
        for tok in tokenize(src):
            print(repr(tok))
        return

    program, errors = parse(src)
    if errors:
        print_parser_errors(errors)
        return

    print(program)
    if verbose:
        print(f"[ast] >>> {json.dumps(program.to_dict())}")


def start_repl(mode: str = "parse", verbose: bool = False) -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown REPL mode: {mode}")
    state: dict[str, object] = {"mode": mode, "verbose": verbose}

    while True:
        try:
            line = input(PROMPT)
            src = line.strip()
            if src in ("exit", "quit"):
                print("Exiting Monkey REPL.")
                return
            if not src:
                continue
            if handle_meta_command(src, state):
                continue
            try:
                evaluate_line(src, str(state["mode"]), bool(state["verbose"]))
            except Exception:
                print_traceback()
        except (KeyboardInterrupt, EOFError):
            print("\nExiting Monkey REPL.")
            break

