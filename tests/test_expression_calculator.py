import math

import pytest

from calculator import ExpressionCalculator, result_line
from config.config import DEMO_CONFIG
from core import MalformedExpression


def test_evaluate():
    calculator = ExpressionCalculator()
    assert calculator.evaluate("(50*2)-(25+5)/3") == pytest.approx(90.0)


def test_cache_hits_and_misses():
    calculator = ExpressionCalculator()
    calculator.to_postfix("1+2")
    calculator.to_postfix("1+2")
    assert calculator.cache_info == {'hits': 1, 'misses': 1, 'size': 1}
    calculator.clear_cache()
    assert calculator.cache_info == {'hits': 0, 'misses': 0, 'size': 0}


def test_cache_is_bounded():
    calculator = ExpressionCalculator(cache_size=2)
    for expression in ["1+1", "2+2", "3+3"]:
        calculator.to_postfix(expression)
    assert calculator.cache_info['size'] == 2
    calculator.to_postfix("1+1")
    assert calculator.cache_info['misses'] == 4


def test_cached_result_is_a_fresh_list():
    calculator = ExpressionCalculator()
    first = calculator.to_postfix("1+2")
    first.clear()
    assert len(calculator.to_postfix("1+2")) == 3


def test_right_associative_calculator():
    assert ExpressionCalculator(right_associative_power=True).evaluate("2^3^2") == pytest.approx(512.0)


def test_strict_calculator_raises():
    with pytest.raises(MalformedExpression):
        ExpressionCalculator().evaluate("(1+2")
    assert ExpressionCalculator(strict=False).evaluate("(1+2") == pytest.approx(3.0)


def test_format_result_line():
    line = ExpressionCalculator().format_result_line("(250+50)*(5-4)")
    assert line == "(250+50)*(5-4) ~ 250 50 + 5 4 - * == 300.0"


def test_evaluate_many_returns_frame():
    calculator = ExpressionCalculator()
    frame = calculator.evaluate_many(DEMO_CONFIG['sample_expressions'] + ["1+2)"])
    assert list(frame.columns) == ['expression', 'postfix', 'result', 'error']
    assert len(frame) == 6
    assert frame['result'].iloc[0] == pytest.approx(300.0)
    assert frame['result'].iloc[3] == pytest.approx(2.2)
    assert math.isnan(frame['result'].iloc[5])
    assert "Unbalanced" in frame['error'].iloc[5]

    failed = calculator.failed_rows(frame)
    assert list(failed['expression']) == ["1+2)"]


def test_failed_rows_none_when_all_succeed():
    calculator = ExpressionCalculator()
    assert calculator.failed_rows(calculator.evaluate_many(["1+1"])) is None


@pytest.mark.parametrize("cache_size", [0, -1])
def test_cache_size_must_be_positive(cache_size):
    with pytest.raises(ValueError):
        ExpressionCalculator(cache_size=cache_size)


def test_cache_size_one_keeps_latest():
    calculator = ExpressionCalculator(cache_size=1)
    calculator.to_postfix("1+2")
    calculator.to_postfix("3+4")
    assert calculator.cache_size == 1
    assert calculator.cache_info['size'] == 1


def test_result_line_has_single_space_before_equals():
    assert result_line("1+2", "1 2 + ", 3.0) == "1+2 ~ 1 2 + == 3.0"
