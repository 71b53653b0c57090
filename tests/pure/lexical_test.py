import unittest

from microlisp.pure.lexical import CLOSE, INT, OPEN, SYMBOL, Token, tokenize


class TokenTestCase(unittest.TestCase):

    def test_classify(self):
        cases = {
            "(": Token(OPEN, "("),
            ")": Token(CLOSE, ")"),
            "0": Token(INT, 0),
            "42": Token(INT, 42),
            "-7": Token(INT, -7),
            "007": Token(INT, 7),
            "+": Token(SYMBOL, "+"),
            "-": Token(SYMBOL, "-"),
            "*": Token(SYMBOL, "*"),
            ">": Token(SYMBOL, ">"),
            "while": Token(SYMBOL, "while"),
            "x1": Token(SYMBOL, "x1"),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, Token.classify(case), case)

    def test_classify_symbols_that_look_numeric(self):
        should_be_symbols = ["+5", "1a", "--1", "-", "1-", "1_000", "٣", "1.5"]
        for case in should_be_symbols:
            self.assertEqual(SYMBOL, Token.classify(case).kind, case)

    def test_classify_overlong_ints(self):
        cases = {
            "9" * 5000: Token(INT, "9" * 5000),
            "-" + "1" * 11: Token(INT, "-" + "1" * 11),
            "0" * 20 + "42": Token(INT, 42),
            "-0000000000002147483648": Token(INT, -2147483648),
            "9999999999": Token(INT, 9999999999),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, Token.classify(case), case[:20])

    def test_immutable(self):
        token = Token(INT, 1)
        with self.assertRaises(AttributeError):
            token.value = 2


class TokenizeTestCase(unittest.TestCase):

    def test_tokenize(self):
        cases = {
            "": [],
            "  \t\n ": [],
            "5": [Token(INT, 5)],
            "(+ 2 3)": [Token(OPEN, "("), Token(SYMBOL, "+"), Token(INT, 2), Token(INT, 3), Token(CLOSE, ")")],
            "((x))": [Token(OPEN, "("), Token(OPEN, "("), Token(SYMBOL, "x"), Token(CLOSE, ")"), Token(CLOSE, ")")],
            "(print\n\t-1)": [Token(OPEN, "("), Token(SYMBOL, "print"), Token(INT, -1), Token(CLOSE, ")")],
            "a)b": [Token(SYMBOL, "a"), Token(CLOSE, ")"), Token(SYMBOL, "b")],
            "a\u00a0b": [Token(SYMBOL, "a\u00a0b")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(tokenize(case)), case)

    def test_lazy(self):
        tokens = tokenize("(set x 1)")
        self.assertEqual(Token(OPEN, "("), next(tokens))
        self.assertEqual(Token(SYMBOL, "set"), next(tokens))
        self.assertEqual(3, len(list(tokens)))
        self.assertEqual([], list(tokens))

    def test_whitespace(self):
        cases = {
            "a\r\nb": [Token(SYMBOL, "a"), Token(SYMBOL, "b")],
            "a b": [Token(SYMBOL, "a b")],
            "a\x0bb": [Token(SYMBOL, "a\x0bb")],
            "(x\x1c)": [Token(OPEN, "("), Token(SYMBOL, "x\x1c"), Token(CLOSE, ")")],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(tokenize(case)), repr(case))

    def test_overlong_int_does_not_fail(self):
        tokens = list(tokenize("(+ 1 " + "9" * 5000 + ")"))
        self.assertEqual(Token(INT, "9" * 5000), tokens[3])

    def test_never_fails(self):
        should_pass = [")))(((", "#$%^&", "λx.x", "'quote", "\"str\""]
        for case in should_pass:
            self.assertTrue(list(tokenize(case)), case)


if __name__ == '__main__':
    unittest.main()
