"""Session control for microlisp. Ties tokenizing, parsing and evaluation together to run the interpreter, either in
command-line mode or file interpretation mode.
"""

from collections import deque

from microlisp.evaluator import UNIT, Environment, Evaluator
from microlisp.lang.error import GenericException
from microlisp.pure.grammar import balance, read


class Session:
    """Governs a microlisp session: one environment shared by every form added to it."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line, stdout=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.env = Environment()
        self.evaluator = Evaluator(self.env, stdout)

        self.to_exec = deque()  # top-level forms waiting for run
        self.results = []  # values of executed top-level forms

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8") as file:
                    source = file.read()
            except (OSError, UnicodeDecodeError):
                raise GenericException("'{}' could not be opened", path)

            self.add(source)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, add_to_prev):
        """Preprocesses a line from the command-line. add_to_prev is the text of previous lines still waiting for
        closing parentheses. Returns updated value of line and whether or not a line continuation is necessary.
        """
        if add_to_prev:
            line = add_to_prev + "\n" + line
        return line, balance(line) > 0

    def add(self, source):
        """Parses source and queues its top-level forms. Evaluation is delayed until run is called; if source cannot
        be parsed, nothing from it is queued.
        """
        program = read(source)
        self.to_exec.extend(program.nodes)
        return program

    def run(self):
        """Evaluates queued forms in order, appending each value to self.results, and returns the last value (UNIT if
        nothing was queued). The first error stops the run and is raised; in command-line mode the forms after it are
        dropped, otherwise they stay queued.
        """
        result = UNIT
        try:
            while self.to_exec:
                result = self.evaluator.evaluate(self.to_exec[0])
                self.results.append(result)
                self.to_exec.popleft()
        finally:
            if self.cmd_line:
                self.to_exec.clear()

        return result

    def pop(self):
        """Pops the value of the most recently executed form."""
        return self.results.pop()
