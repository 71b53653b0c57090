"""32-bit signed integers, the only data type of microlisp. Python ints are unbounded, so every arithmetic result is
wrapped back into range here. Comparisons produce integers as well: 1 for true, 0 for false.
"""

INT_BITS = 32
INT_MIN = -2 ** (INT_BITS - 1)
INT_MAX = 2 ** (INT_BITS - 1) - 1


def in_range(num):
    """Whether or not num is representable as a 32-bit signed integer."""
    return INT_MIN <= num <= INT_MAX


def wrap(num):
    """Returns num reduced modulo 2**32 into [INT_MIN, INT_MAX] (two's complement wraparound)."""
    return (num - INT_MIN) % 2 ** INT_BITS + INT_MIN


def truth(condition):
    """Encodes a Python bool as a microlisp integer."""
    return 1 if condition else 0


def is_truthy(num):
    return num != 0
