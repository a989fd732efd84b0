"""Tokenizer and recursive-descent reader for prefix arithmetic S-expressions."""

import logging
from typing import Optional

from .types import DEFAULT_MAX_DEPTH, ERROR, Form, Leaf, Node

logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    return text.replace("(", "( ").replace(")", " )").split()


def read_from_tokens(
    tokens: list[str],
    pos: Optional[list[int]] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Node:
    """Read the next complete expression from tokens, starting at pos[0].

    pos is a one-element list shared across the recursion; on return it
    points just past the tokens consumed.
    """
    if pos is None:
        pos = [0]

    def _read(depth: int) -> Node:
        if pos[0] >= len(tokens):
            raise SyntaxError("unexpected end of expression")
        tok = tokens[pos[0]]
        pos[0] += 1
        if tok == "(":
            if depth >= max_depth:
                raise SyntaxError("max nesting depth exceeded")
            children: list[Node] = []
            while pos[0] < len(tokens) and tokens[pos[0]] != ")":
                children.append(_read(depth + 1))
            if pos[0] >= len(tokens):
                raise SyntaxError("unexpected end of expression")
            form = Form(tuple(children))
            pos[0] += 1
            return form
        if tok == ")":
            raise SyntaxError("unexpected closing parenthesis")
        return Leaf(tok)

    try:
        return _read(0)
    except RecursionError:
        raise SyntaxError("max nesting depth exceeded") from None


def read_expression(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """Tokenize and read one expression, raising SyntaxError on bad input.

    Anything after the first complete expression is ignored.
    """
    tokens = tokenize(text)
    pos = [0]
    node = read_from_tokens(tokens, pos, max_depth)
    if pos[0] != len(tokens):
        logger.debug("ignoring %d trailing token(s) in %r", len(tokens) - pos[0], text)
    return node


def parse_expression(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """Like read_expression, but never raises: syntax errors yield ERROR."""
    try:
        return read_expression(text, max_depth)
    except SyntaxError as exc:
        logger.debug("syntax error in %r: %s", text, exc.msg)
        return ERROR
