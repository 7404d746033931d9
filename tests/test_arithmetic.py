import math

import pytest

from exprcalc.parser import ParserError, parse
from exprcalc.runtime import evaluate
from exprcalc.tokenizer import TokenizerError, tokenize
from exprcalc.utils import format_number


@pytest.mark.parametrize(
    "code, expected_rendering, expected_ret_val",
    [
        pytest.param("3 + 4 * 5", "(3 + (4 * 5))", "23"),
        pytest.param("10 - 2 - 3", "((10 - 2) - 3)", "5"),
        pytest.param("-7 * 2", "((-7) * 2)", "-14"),
        pytest.param("4.5 / 2", "(4.5 / 2)", "2.25"),
        pytest.param("1 + 2 * 3 - 4 / 2", "((1 + (2 * 3)) - (4 / 2))", "5"),
        pytest.param("1 / 0", "(1 / 0)", "inf"),
        pytest.param("42", "42", "42"),
        pytest.param("-1", "(-1)", "-1"),
        pytest.param("1+2", "(1 + 2)", "3"),
        pytest.param("1 * 4 + 5", "((1 * 4) + 5)", "9"),
        pytest.param("10 / 5 / 2 / 2", "(((10 / 5) / 2) / 2)", "0.5"),
        pytest.param("1 - -2", "(1 - (-2))", "3"),
        pytest.param("  2 *   3\n", "(2 * 3)", "6"),
    ],
)
def test_eval_arithmetic(code: str, expected_rendering: str, expected_ret_val: str) -> None:
    expression = parse(tokenize(code))
    assert str(expression) == expected_rendering
    assert format_number(evaluate(expression)) == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_message",
    [
        pytest.param("1 + + 2", "[AST PARSE ERROR]: syntax error in <unary> expression"),
        pytest.param("1 + ", "[AST PARSE ERROR]: syntax error by uncomplete expression"),
        pytest.param("", "[AST PARSE ERROR]: syntax error by uncomplete expression"),
        pytest.param("--3", "[AST PARSE ERROR]: unexpected expression"),
        pytest.param("1 & 2", "[TOKENIZER ERROR]: unexpected token"),
        pytest.param("1.2.3", "[TOKENIZER ERROR]: cannot parse number"),
        pytest.param("1\t+ 2", "[TOKENIZER ERROR]: unexpected token"),
    ],
)
def test_eval_arithmetic_errors(code: str, expected_message: str) -> None:
    with pytest.raises((TokenizerError, ParserError)) as exc_info:
        evaluate(parse(tokenize(code)))
    assert str(exc_info.value) == expected_message


@pytest.mark.parametrize(
    "code",
    [
        "1 + 2 * 3 - 4 / 2",
        "2 * 3 / 4 * 5",
        "100 - 1 - 2 - 3 + 4",
        "-1.5 * 4 - -2 / 8",
        "0.1 + 0.2",
        "7 / 3 * 3",
    ],
)
def test_matches_python_arithmetic(code: str) -> None:
    assert math.isclose(evaluate(parse(tokenize(code))), eval(code))
