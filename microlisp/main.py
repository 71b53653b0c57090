"""microlisp: a tiny interpreter for a language that doesn't do much.

Basic program flow:
    1. Tokenizer: chops the source text up into lexical units (see pure/lexical.py)
    2. Parser: builds an expression tree by nesting Lists according to the parentheses (see pure/grammar.py)
    3. Evaluator: walks the tree against a single mutable environment (see evaluator.py)

Every form (if, while, do, ...) returns a value. Runs a .mlsp file, or starts a shell if no file is given. Also uses
the error handling context manager. Called from the mlsp console script and `python -m microlisp`.
"""

import argparse

from microlisp.evaluator import UNIT
from microlisp.lang.error import ErrorHandler
from microlisp.lang.shell import Shell
from microlisp.lang.session import Session


def build_parser():
    parser = argparse.ArgumentParser(prog="mlsp", description="microlisp interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--echo", action="store_true", help="print the value of every top-level form after the run")
    return parser


def main(argv=None):
    """Runs microlisp interpreter. Called from mlsp executable script."""
    args = build_parser().parse_args(argv)

    with ErrorHandler() as error_handler:
        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)
            sess.run()

            if args.echo:
                for value in sess.results:
                    if value is not UNIT:
                        print(value)

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()

    return 0
