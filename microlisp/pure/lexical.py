"""Tokenizer for microlisp source text.

Formally, the lexical grammar is

```
<token>  ::= "("
           | ")"
           | <int>                  ; maximal run matching -?[0-9]+
           | <symbol>               ; any other maximal run of non-whitespace, non-parenthesis characters
```

Whitespace (space, tab, carriage return, newline) only separates tokens; other control or Unicode space characters
are part of symbols. There are no comments or string literals, so any input can be tokenized: operator names
(+ - * > < =), keywords (if while do set print) and variable names are all symbols. Deciding whether a symbol makes
sense is left to the evaluator.
"""

from dataclasses import dataclass
import re


OPEN = "open"
CLOSE = "close"
SYMBOL = "symbol"
INT = "int"

TOKEN_RE = re.compile(r"[()]|[^() \t\r\n]+")
INT_RE = re.compile(r"-?[0-9]+", re.ASCII)
MAX_DIGITS = 10  # digits of the widest 32-bit value, leading zeros aside


@dataclass(frozen=True)
class Token:
    """A single lexical unit. value is the parenthesis character, the symbol name, or the literal's int. An integer
    literal too long to fit in 32 bits keeps its text as value, for the parser to reject.
    """
    kind: str
    value: object

    @classmethod
    def classify(cls, text):
        """Returns the Token that text (a single maximal run from TOKEN_RE) represents."""
        if text == "(":
            return cls(OPEN, text)
        elif text == ")":
            return cls(CLOSE, text)
        elif INT_RE.fullmatch(text):
            if len(text.lstrip("-").lstrip("0")) > MAX_DIGITS:
                return cls(INT, text)
            return cls(INT, int(text))
        return cls(SYMBOL, text)

    def __str__(self):
        return str(self.value)


def tokenize(source):
    """Lazily yields the Tokens of source, in source order."""
    for match in TOKEN_RE.finditer(source):
        yield Token.classify(match.group())
