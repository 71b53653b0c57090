"""Expression trees for microlisp and the recursive-descent parser that builds them.

```
<program> ::= <expr>*
<expr>    ::= <atom>                ; integer literal or symbol
            | "(" <expr>* ")"       ; list, usually a form: (<symbol> <expr>*)
```

Parenthesis depth tracks List nesting exactly: every List corresponds to one matched (...) span in the token
stream, consumed left to right with no backtracking. Trees are built once and never mutated afterwards.
"""

from abc import ABC, abstractmethod

from microlisp.lang.error import ParseError
from microlisp.numerical import in_range
from microlisp.pure.lexical import CLOSE, INT, OPEN, tokenize


class Expression(ABC):
    """Superclass of every node in a microlisp expression tree."""

    def __init__(self, nodes=()):
        self.nodes = tuple(nodes)
        self._cls = type(self).__name__

    @property
    @abstractmethod
    def expr(self):
        """Source text of this node, normalized to single spaces."""

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <Expression>(expr='<expr>', nodes=[
            <Expression>(expr='<expr>', nodes=[
                ...
                <Expression>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{self._cls}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.expr

    def __eq__(self, other):
        return isinstance(other, type(self)) and self.nodes == other.nodes

    def __hash__(self):
        return hash((self._cls, self.nodes))


class Atom(Expression):
    """Leaf node: either an integer literal or a symbol name."""

    def __init__(self, value):
        super().__init__()
        self.value = value

    @property
    def is_int(self):
        return isinstance(self.value, int)

    @property
    def is_symbol(self):
        return isinstance(self.value, str)

    @property
    def expr(self):
        return str(self.value)

    def __eq__(self, other):
        return isinstance(other, Atom) and type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self):
        return hash((self._cls, self.value))


class List(Expression):
    """One parenthesized expression. The first node names the form, the rest are its operands."""

    @property
    def head(self):
        return self.nodes[0] if self.nodes else None

    @property
    def operands(self):
        return self.nodes[1:]

    @property
    def expr(self):
        return "(" + " ".join(node.expr for node in self.nodes) + ")"


class Program(Expression):
    """Root of every parse: the top-level forms of a source text, evaluated in order."""

    @property
    def expr(self):
        return " ".join(node.expr for node in self.nodes)


def parse_expr(token, tokens):
    """Parses the expression starting at token, consuming as many further tokens as it needs."""
    if token.kind == OPEN:
        nodes = []
        for sub_token in tokens:
            if sub_token.kind == CLOSE:
                return List(nodes)
            nodes.append(parse_expr(sub_token, tokens))

        partial = List(nodes).expr[:-1]
        raise ParseError("'{}' is unterminated: missing ')'", partial)

    elif token.kind == CLOSE:
        raise ParseError("unbalanced parentheses: unexpected '{}'", token)

    elif token.kind == INT and not (isinstance(token.value, int) and in_range(token.value)):
        raise ParseError("integer literal '{}' does not fit in 32 bits", token)

    return Atom(token.value)


def parse(tokens):
    """Returns the Program made of every top-level expression in tokens."""
    tokens = iter(tokens)
    return Program(parse_expr(token, tokens) for token in tokens)


def read(source):
    """Tokenizes and parses source text."""
    return parse(tokenize(source))


def balance(source):
    """Number of parentheses in source still waiting to be closed. Negative if there are stray ')'."""
    depth = 0
    for token in tokenize(source):
        if token.kind == OPEN:
            depth += 1
        elif token.kind == CLOSE:
            depth -= 1
    return depth
