import io
import unittest

from microlisp.lang.error import ErrorHandler
from microlisp.lang.session import Session
from microlisp.lang.shell import Shell


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        sess = Session(ErrorHandler(stream=self.stderr), Session.SH_FILE, cmd_line=True, stdout=self.stdout)
        self.shell = Shell(sess, stdout=self.stdout)

    def feed(self, *lines):
        for line in lines:
            if self.shell.onecmd(line):
                return True
        return False

    def test_echo(self):
        self.feed("(+ 2 3)", "(set x 4)", "(* x x)")
        self.assertEqual("5\n4\n16\n", self.stdout.getvalue())

    def test_unit_not_echoed(self):
        self.feed("(print 7)", "(while 0 0)")
        self.assertEqual("7\n", self.stdout.getvalue())

    def test_continuation(self):
        self.feed("(do", "(set i 0)")
        self.assertEqual(Shell.secondary_prompt, self.shell.prompt)
        self.assertEqual("", self.stdout.getvalue())

        self.feed("(while (> 2 i) (do (print i) (set i (+ i 1)))))")
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)
        self.assertEqual("0\n1\n", self.stdout.getvalue())

    def test_exit_inside_form_is_source(self):
        self.assertFalse(self.feed("(set", "exit", "1)"))
        self.assertEqual("1\n", self.stdout.getvalue())

    def test_errors_are_not_fatal(self):
        self.feed("(set a 1)", "(+ a y)", "(+ 1", ")", ")", "(foo)", "(+ a 1)")
        self.assertEqual("1\n3\n2\n", self.stdout.getvalue())

        errors = self.stderr.getvalue()
        self.assertIn("unbound variable", errors)
        self.assertIn("unbalanced parentheses", errors)
        self.assertIn("unknown form", errors)

    def test_overlong_int_is_not_fatal(self):
        self.assertFalse(self.feed("9" * 5000, "(+ 1 1)"))
        self.assertEqual("2\n", self.stdout.getvalue())
        self.assertIn("does not fit in 32 bits", self.stderr.getvalue())

        self.feed("(do", "(print " + "9" * 5000 + "))", "(* 2 3)")
        self.assertEqual(Shell._tmp_prompt, self.shell.prompt)
        self.assertEqual("2\n6\n", self.stdout.getvalue())

    def test_exit(self):
        self.assertTrue(self.feed("exit"))
        self.assertTrue(self.feed("EOF"))

    def test_help(self):
        self.feed("help")
        self.assertIn("microlisp", self.stdout.getvalue())

    def test_emptyline(self):
        self.feed("(+ 1 1)", "")
        self.assertEqual("2\n", self.stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
