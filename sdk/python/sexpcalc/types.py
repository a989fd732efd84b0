from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def lookup(cls, symbol: str) -> Optional["Operator"]:
        for op in cls:
            if op.value == symbol:
                return op
        return None


@dataclass(frozen=True)
class Leaf:
    """A bare token: a number or an operator symbol, not yet classified."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Form:
    """A parenthesized group: children[0] is the operator, the rest operands."""

    children: tuple["Node", ...]

    def __post_init__(self):
        if len(self.children) < 3:
            raise SyntaxError("invalid expression")

    @property
    def head(self) -> "Node":
        return self.children[0]

    @property
    def operands(self) -> tuple["Node", ...]:
        return self.children[1:]

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.children) + ")"


Node = Union[Leaf, Form]

# Returned by parse_expression in place of a tree when reading fails.
ERROR = Leaf("ERROR")

DEFAULT_MAX_DEPTH = 256


@dataclass
class Config:
    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False
