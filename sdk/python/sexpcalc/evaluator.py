"""Tree-walk evaluator for prefix arithmetic trees. Single-precision, depth metered."""

import re

import numpy as np

from .types import DEFAULT_MAX_DEPTH, ERROR, Form, Leaf, Node, Operator


_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class EvaluationError(RuntimeError):
    pass


class DepthExceeded(EvaluationError):
    pass


class _EvalState:
    __slots__ = ("depth", "max_depth")

    def __init__(self, max_depth: int):
        self.depth = 0
        self.max_depth = max_depth


def evaluate(node: Node, max_depth: int = DEFAULT_MAX_DEPTH) -> np.float32:
    """Evaluate a tree built by the parser to a single-precision value.

    Division by zero and overflow produce inf/nan rather than errors.
    """
    if node == ERROR:
        raise EvaluationError(f"unknown operator {ERROR.text}")
    state = _EvalState(max_depth)
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return _eval(node, state)


def _eval(node: Node, st: _EvalState) -> np.float32:
    if isinstance(node, Leaf):
        return _number(node.text)
    st.depth += 1
    if st.depth > st.max_depth:
        st.depth -= 1
        raise DepthExceeded("max nesting depth exceeded")
    try:
        return _eval_form(node, st)
    finally:
        st.depth -= 1


def _eval_form(form: Form, st: _EvalState) -> np.float32:
    head = form.head
    op = Operator.lookup(head.text) if isinstance(head, Leaf) else None
    if op is None:
        raise EvaluationError(f"unknown operator {head}")

    args = []
    for child in form.operands:
        try:
            args.append(_eval(child, st))
        except EvaluationError:
            raise
        except RecursionError:
            raise DepthExceeded("max nesting depth exceeded") from None
        except Exception as exc:
            raise EvaluationError(str(exc)) from exc
    return _APPLY[op](args)


def _number(text: str) -> np.float32:
    # Plain decimal literals only: no underscores, nan or inf spellings.
    if not _DECIMAL.fullmatch(text):
        raise EvaluationError(f"invalid number {text}")
    return np.float32(text)


def _add(args: list[np.float32]) -> np.float32:
    res = np.float32(0)
    for a in args:
        res = res + a
    return res


def _multiply(args: list[np.float32]) -> np.float32:
    res = np.float32(1)
    for a in args:
        res = res * a
    return res


def _subtract(args: list[np.float32]) -> np.float32:
    return args[0] - _add(args[1:])


def _divide(args: list[np.float32]) -> np.float32:
    return args[0] / _multiply(args[1:])


_APPLY = {
    Operator.ADD: _add,
    Operator.SUBTRACT: _subtract,
    Operator.MULTIPLY: _multiply,
    Operator.DIVIDE: _divide,
}
