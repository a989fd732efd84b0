from .parser import tokenize, read_expression, parse_expression
from .evaluator import evaluate, EvaluationError
from .calc import calculate
from .types import Config, Form, Leaf, Operator, ERROR

__all__ = [
    "tokenize", "read_expression", "parse_expression", "evaluate", "calculate",
    "EvaluationError", "Config", "Form", "Leaf", "Operator", "ERROR",
]
