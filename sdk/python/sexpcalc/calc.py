"""Top-level calculate API: parse then evaluate one line of text."""

from typing import Any

from .evaluator import EvaluationError, evaluate
from .parser import parse_expression, read_expression
from .types import DEFAULT_MAX_DEPTH


def calculate(text: str, config: Any = None) -> dict:
    """Parse and evaluate an expression.

    Args:
        text: Expression source, e.g. "(+ 10 (* 5 2))"
        config: Either a Config dataclass or a dict with keys:
                max_depth, strict

    Returns:
        {"ok": True, "value": float32} or {"ok": False, "error": str}
    """
    if config is None:
        max_depth, strict = DEFAULT_MAX_DEPTH, False
    elif isinstance(config, dict):
        max_depth = config["max_depth"] if "max_depth" in config else DEFAULT_MAX_DEPTH
        strict = config.get("strict", False)
    else:
        max_depth = getattr(config, "max_depth", DEFAULT_MAX_DEPTH)
        strict = getattr(config, "strict", False)

    if strict:
        try:
            tree = read_expression(text, max_depth)
        except SyntaxError as exc:
            return {"ok": False, "error": exc.msg}
    else:
        tree = parse_expression(text, max_depth)

    try:
        value = evaluate(tree, max_depth)
    except EvaluationError as exc:
        return {"ok": False, "error": str(exc)}
    return {"ok": True, "value": value}
