import json
import math
from pathlib import Path

import pytest
from sexpcalc.calc import calculate
from sexpcalc.types import Config

EXAMPLES_DIR = Path(__file__).resolve().parent.parent.parent.parent / "examples"


@pytest.fixture
def expected():
    path = EXAMPLES_DIR / "expected" / "results.json"
    if not path.exists():
        pytest.skip("example files not found")
    return json.loads(path.read_text())


def load_expression(name):
    path = EXAMPLES_DIR / "expressions" / f"{name}.sxp"
    if not path.exists():
        pytest.skip("example files not found")
    return path.read_text()


@pytest.mark.parametrize("name", ["sum", "mixed", "divide_by_zero", "malformed"])
def test_example_expressions(name, expected):
    result = calculate(load_expression(name))
    want = expected[name]
    assert result["ok"] is want["ok"]
    if want["ok"]:
        assert result["value"] == float(want["value"])
    else:
        assert result["error"] == want["error"]


def test_multiline_source_is_one_expression():
    assert calculate(load_expression("mixed"))["value"] == 30.0


def test_strict_reports_syntax_message():
    result = calculate(load_expression("malformed"), Config(strict=True))
    assert result == {"ok": False, "error": "invalid expression"}


def test_strict_dict_config():
    result = calculate("(+ 1 2", {"strict": True})
    assert result["error"] == "unexpected end of expression"


def test_non_strict_default():
    assert calculate("(+ 1 2")["error"] == "unknown operator ERROR"


def test_max_depth_from_config():
    src = "(+ 1 (+ 1 (+ 1 1)))"
    assert calculate(src, {"max_depth": 3})["value"] == 4.0
    assert calculate(src, Config(max_depth=2, strict=True))["error"] == "max nesting depth exceeded"


def test_evaluation_errors_reported():
    assert calculate("(% 1 2)") == {"ok": False, "error": "unknown operator %"}


def test_divide_by_zero_not_an_error():
    result = calculate("(/ 1 (- 2 2))")
    assert result["ok"] is True
    assert math.isinf(result["value"])


def test_explicit_zero_max_depth_honoured():
    result = calculate("(+ 1 2)", {"max_depth": 0, "strict": True})
    assert result == {"ok": False, "error": "max nesting depth exceeded"}


def test_unknown_config_keys_ignored():
    assert calculate("(+ 1 (+ 1 1))", {"maxDepth": 1})["value"] == 3.0
