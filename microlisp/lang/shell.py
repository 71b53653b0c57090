"""Handles interactive/command-line mode for the microlisp interpreter. Uses cmd as backend."""

import cmd

from microlisp.evaluator import UNIT


class Shell(cmd.Cmd):
    """microlisp interpreter shell."""
    intro = "microlisp interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continutations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_line = ""

    def parseline(self, line):
        """Never treats input as a cmd command while a form is still open, so 'exit' can be a variable name there."""
        if self._tmp_line:
            return None, None, line
        return super().parseline(line)

    def default(self, line):
        """Executes arbitrary microlisp source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            tmp_line, self._tmp_line = self._tmp_line, ""
            self.prompt = self._tmp_prompt

            line, add_to_prev = self.sess.preprocess_line(line, tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self.sess.add(line)
            value = self.sess.run()

            if value is not UNIT:
                print(value, file=self.stdout)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the microlisp interpreter!\n\n"
              "microlisp is a tiny Lisp-like language over 32-bit integers. The forms are\n"
              "  (+ a b) (- a b) (* a b) (> a b) (< a b) (= a b)\n"
              "  (set name expr) (print expr) (do expr ...) (if cond then else) (while cond body)\n\n"
              "Try it out by typing '(set x 5)'. This will bind 5 to the name 'x'. Next, try\n"
              "typing '(* x x)', giving 25 as the result. Forms may span several lines.",
              file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
