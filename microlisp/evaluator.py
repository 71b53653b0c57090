"""Tree-walking evaluator for microlisp.

Every node evaluates to a value: an int, or UNIT for constructs that are only evaluated for their effect (print,
while, an empty do, an empty program). Lists are dispatched on their leading symbol, and each form decides how many
of its operands are evaluated and in which order, which is what lets if and while act as control flow.

Built-in forms:

```
(+ a b) (- a b) (* a b)     ; 32-bit signed wraparound arithmetic
(> a b) (< a b) (= a b)     ; 1 if true, 0 if false
(set name expr)             ; name is not evaluated; returns the assigned value
(print expr)                ; writes the value on its own line; returns UNIT
(do expr*)                  ; value of the last expr, UNIT if there are none
(if cond then else)         ; only the selected branch is evaluated
(while cond body)           ; re-evaluates cond before every iteration; returns UNIT
```
"""

import sys

from microlisp.lang.error import EvalError
from microlisp.numerical import is_truthy, truth, wrap
from microlisp.pure.grammar import Atom, List, Program


class Unit:
    """The "no meaningful value" result. Use the UNIT singleton rather than instantiating."""

    def __repr__(self):
        return "UNIT"

    def __str__(self):
        return "()"


UNIT = Unit()


class Environment:
    """The single mutable mapping of variable names to ints for a run."""

    def __init__(self, bindings=None):
        self.bindings = dict(bindings or {})

    def get(self, name):
        try:
            return self.bindings[name]
        except KeyError:
            raise EvalError("unbound variable '{}'", name) from None

    def set(self, name, value):
        self.bindings[name] = value
        return value

    def __contains__(self, name):
        return name in self.bindings

    def __len__(self):
        return len(self.bindings)

    def __repr__(self):
        return f"Environment({self.bindings!r})"


FORMS = {}


def form(name, arity=None):
    """Registers the decorated Evaluator method as the built-in form name. arity is the exact operand count, or None
    if any number of operands is accepted.
    """

    def register(method):
        FORMS[name] = (method, arity)
        return method

    return register


def binary(name, func):
    """Builds a form evaluating both operands left to right and applying func to them."""

    @form(name, arity=2)
    def _binary(self, node, left, right):
        return func(self.integer(left), self.integer(right))

    return _binary


class Evaluator:
    """Evaluates expression trees against env, writing print output to stdout (sys.stdout if None)."""

    def __init__(self, env=None, stdout=None):
        self.env = env if env is not None else Environment()
        self.stdout = stdout

    def evaluate(self, node):
        """Returns the value of node: an int or UNIT."""
        if isinstance(node, Atom):
            if node.is_int:
                return node.value
            return self.env.get(node.value)

        elif isinstance(node, List):
            return self.apply(node)

        elif isinstance(node, Program):
            result = UNIT
            for top_level in node.nodes:
                result = self.evaluate(top_level)
            return result

        raise EvalError("cannot evaluate '{}'", repr(node), internal=True)

    def apply(self, node):
        """Dispatches List node on its leading symbol."""
        if not node.nodes:
            raise EvalError("cannot evaluate empty form '{}'", node)

        head = node.head
        if not (isinstance(head, Atom) and head.is_symbol):
            raise EvalError("'{}' is not a form: first element must be a symbol", node)

        try:
            method, arity = FORMS[head.value]
        except KeyError:
            raise EvalError("unknown form '{}' in '{}'", (head, node)) from None

        if arity is not None and len(node.operands) != arity:
            msg = "'{}' expects {} operand(s), got {} in '{}'"
            raise EvalError(msg, (head, arity, len(node.operands), node))

        return method(self, node, *node.operands)

    def integer(self, node):
        """Evaluates node where an int is required."""
        value = self.evaluate(node)
        if value is UNIT:
            raise EvalError("'{}' has no value, but an integer is required", node)
        return value

    # Arithmetic and comparison

    form_add = binary("+", lambda left, right: wrap(left + right))
    form_sub = binary("-", lambda left, right: wrap(left - right))
    form_mul = binary("*", lambda left, right: wrap(left * right))

    form_gt = binary(">", lambda left, right: truth(left > right))
    form_lt = binary("<", lambda left, right: truth(left < right))
    form_eq = binary("=", lambda left, right: truth(left == right))

    # Variables and output

    @form("set", arity=2)
    def form_set(self, node, name, value):
        if not (isinstance(name, Atom) and name.is_symbol):
            raise EvalError("'{}' cannot be assigned to in '{}'", (name, node))
        return self.env.set(name.value, self.integer(value))

    @form("print", arity=1)
    def form_print(self, node, value):
        print(self.integer(value), file=self.stdout if self.stdout is not None else sys.stdout)
        return UNIT

    # Control flow

    @form("do")
    def form_do(self, node, *body):
        result = UNIT
        for sub_node in body:
            result = self.evaluate(sub_node)
        return result

    @form("if", arity=3)
    def form_if(self, node, condition, then, otherwise):
        if is_truthy(self.integer(condition)):
            return self.evaluate(then)
        return self.evaluate(otherwise)

    @form("while", arity=2)
    def form_while(self, node, condition, body):
        while is_truthy(self.integer(condition)):
            self.evaluate(body)
        return UNIT


def evaluate(node, env, stdout=None):
    """Evaluates node against env. Convenience wrapper around Evaluator."""
    return Evaluator(env, stdout).evaluate(node)
