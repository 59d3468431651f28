"""Operand stack and built-in words. Words never raise: calling one returns None on success or the Fault that stopped
it, in which case any values it already popped stay popped.

Binary words pop their right operand first, so "3 4 -" computes 3 - 4.
"""

import operator
from abc import abstractmethod, ABC
from ctypes import c_int32 as I32

from forth.lang.error import DivideByZero, Fault, StackUnderflow


def wrap(value):
    """Wraps value to a signed 32-bit integer, two's complement."""
    return I32(value).value


class Stack:
    """LIFO stack of int32 values. The only way to remove a value is the checked pop."""

    def __init__(self, values=None):
        self._values = []
        for value in values or []:
            self.push(value)

    def push(self, value):
        self._values.append(wrap(value))

    def pop(self, word):
        """Returns the top value, or StackUnderflow(word) if there is none."""
        if not self._values:
            return StackUnderflow(word)
        return self._values.pop()

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)  # bottom to top

    def __eq__(self, other):
        if isinstance(other, Stack):
            return other._values == self._values
        if isinstance(other, (list, tuple)):
            return list(other) == self._values
        return NotImplemented

    def __repr__(self):
        return f"Stack({self._values})"


class Word(ABC):
    """Built-in word: applies its effect to a stack."""

    def __init__(self, symbol):
        self.symbol = symbol

    @abstractmethod
    def __call__(self, stack):
        """Applies this word to stack. Returns None or a Fault."""

    def __repr__(self):
        return f"{type(self).__name__}('{self.symbol}')"


class BinaryWord(Word):
    """Pops b then a, and pushes func(a, b). func may return a Fault instead of a number."""

    def __init__(self, symbol, func):
        super().__init__(symbol)
        self.func = func

    def __call__(self, stack):
        b = stack.pop(self.symbol)
        if isinstance(b, Fault):
            return b

        a = stack.pop(self.symbol)
        if isinstance(a, Fault):
            return a

        result = self.func(a, b)
        if isinstance(result, Fault):
            return result

        stack.push(result)
        return None


class PrintWord(Word):
    """Pops a value and writes it to out in decimal, with no separator."""

    def __init__(self, symbol, out):
        super().__init__(symbol)
        self.out = out

    def __call__(self, stack):
        value = stack.pop(self.symbol)
        if isinstance(value, Fault):
            return value

        self.out.write(str(value))
        return None


def divide(a, b):
    """Integer division truncating toward zero."""
    if b == 0:
        return DivideByZero("/")

    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def builtin_words(out):
    """Returns a fresh word table; "." writes to out."""
    return {
        "+": BinaryWord("+", operator.add),
        "-": BinaryWord("-", operator.sub),
        "*": BinaryWord("*", operator.mul),
        "/": BinaryWord("/", divide),
        ".": PrintWord(".", out),
    }
