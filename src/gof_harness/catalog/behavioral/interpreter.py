"""
Interpreter.

Base: expressions are evaluated by splitting strings on the fly; the
grammar lives implicitly in string handling.
Improved: each grammar rule is a class and an expression is a tree that
interprets itself against a context.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

SUMMARY = "Represent a grammar as classes and interpret sentences in the language."

VARIABLES = {"x": 10, "y": 4, "z": 3}


def evaluate_string(expression: str, variables: dict[str, int]) -> int:
    tokens = expression.split()
    total = variables.get(tokens[0], 0) if tokens[0].isalpha() else int(tokens[0])
    for op, token in zip(tokens[1::2], tokens[2::2], strict=True):
        value = variables.get(token, 0) if token.isalpha() else int(token)
        total = total + value if op == "+" else total - value
    return total


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: dict[str, int]) -> int: ...


class Number(Expression):
    def __init__(self, value: int):
        self.value = value

    def interpret(self, context: dict[str, int]) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Variable(Expression):
    def __init__(self, name: str):
        self.name = name

    def interpret(self, context: dict[str, int]) -> int:
        if self.name not in context:
            raise KeyError(f"undefined variable {self.name!r}")
        return context[self.name]

    def __str__(self) -> str:
        return self.name


class Add(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: dict[str, int]) -> int:
        return self.left.interpret(context) + self.right.interpret(context)

    def __str__(self) -> str:
        return f"({self.left} + {self.right})"


class Subtract(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: dict[str, int]) -> int:
        return self.left.interpret(context) - self.right.interpret(context)

    def __str__(self) -> str:
        return f"({self.left} - {self.right})"


def base() -> Iterator[str]:
    for expression in ("x + y - z", "x - 2 + w"):
        yield f"{expression} = {evaluate_string(expression, VARIABLES)}"
    yield "undefined 'w' silently treated as 0"


def improved() -> Iterator[str]:
    tree = Subtract(Add(Variable("x"), Variable("y")), Variable("z"))
    yield f"{tree} = {tree.interpret(VARIABLES)}"

    nested = Add(Subtract(Variable("x"), Number(2)), Variable("w"))
    try:
        nested.interpret(VARIABLES)
    except KeyError as e:
        yield f"{nested} rejected: {e.args[0]}"
