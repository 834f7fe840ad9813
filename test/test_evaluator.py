import pytest
from calc_errors import *
from calc_tokens import *
from evaluator import divide, evaluate_postfix


def test_empty_is_zero():
    assert evaluate_postfix([]) == 0


def test_single_number():
    assert evaluate_postfix([number(42)]) == 42


def test_operand_order():
    # 10 4 -  ->  10 - 4
    assert evaluate_postfix([number(10), number(4), operator("-")]) == 6
    assert evaluate_postfix([number(4), number(10), operator("-")]) == -6
    assert evaluate_postfix([number(9), number(2), operator("/")]) == 4


def test_truncating_division():
    assert divide(7, 2) == 3
    assert divide(-7, 2) == -3
    assert divide(7, -2) == -3
    assert divide(-7, -2) == 3
    assert divide(0, 5) == 0


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        evaluate_postfix([number(5), number(0), operator("/")])


def test_too_few_operands():
    with pytest.raises(MalformedExpression):
        evaluate_postfix([number(5), operator("+")])
    with pytest.raises(MalformedExpression):
        evaluate_postfix([operator("*")])


def test_too_many_operands():
    with pytest.raises(MalformedExpression):
        evaluate_postfix([number(1), number(2)])


def test_parenthesis_in_postfix():
    with pytest.raises(MalformedExpression):
        evaluate_postfix([number(1), LEFT_PAREN])


def test_results_do_not_wrap():
    big = 2**63 - 1
    assert evaluate_postfix([number(big), number(big), operator("*")]) == big * big
