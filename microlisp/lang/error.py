"""Error handling for the microlisp language. Only GenericExceptions should be encountered during running: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Every error is fatal to the form being evaluated: there is no in-language way of catching one.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a microlisp error. Subclasses only set kind."""
    kind = None

    def __init__(self, msg, exprs=None, internal=False):
        """Parses args for GenericException. exprs are the offending snippets substituted into msg."""
        if exprs is None:
            exprs = []
        if not isinstance(exprs, (list, tuple)):
            exprs = [exprs]

        exprs = [str(expr) for expr in exprs]
        super().__init__(msg.format(*exprs))

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0] if exprs else ""  # exprs[0] should be the offending expr that caused the error
        self.internal = internal


class LexError(GenericException):
    """Raised for characters that cannot start any token. Reserved: every run of text is currently a valid token."""
    kind = "lex"


class ParseError(GenericException):
    """Unbalanced or unterminated parentheses, malformed literals."""
    kind = "parse"


class EvalError(GenericException):
    """Unknown forms, arity mismatches, unbound variables and type mismatches."""
    kind = "eval"


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report custom microlisp errors."""
    ERROR = "red"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream
        self.path = None

    def register_file(self, path):
        """Registers path so that it prefixes error messages."""
        self.path = path

    def throw(self, error):
        """Reports error, which must be a GenericException. Exits with status 1 if self.fatal."""
        stream = self.stream if self.stream is not None else sys.stderr

        error_msg = ""
        if self.path:
            error_msg += colored(f"{self.path}: ", attrs=["bold"])

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        label = f"{error.kind} error: " if error.kind else "error: "
        error_msg += colored(label, ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=stream)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is None:
            return False

        if issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt"))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(GenericException("maximum recursion depth exceeded: expression is nested too deeply"))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
