import pytest
from calc_errors import *
from calc_tokens import *
from lexer import tokenize
from postfix import to_postfix


def postfix_of(text):
    return render(to_postfix(tokenize(text)))


def test_precedence():
    assert postfix_of("3 + 4 * 2") == "3 4 2 * +"
    assert postfix_of("3 * 4 + 2") == "3 4 * 2 +"


def test_left_associativity():
    assert postfix_of("10 - 3 - 2") == "10 3 - 2 -"
    assert postfix_of("8 / 4 * 2") == "8 4 / 2 *"


def test_parentheses():
    assert postfix_of("( 2 + 3 ) * 4") == "2 3 + 4 *"
    assert postfix_of("3 + 4 * ( 2 - 1 )") == "3 4 2 1 - * +"
    assert postfix_of("((7))") == "7"


def test_output_has_no_parentheses():
    for token in to_postfix(tokenize("(1 + (2 * 3)) - (4 / (5 - 6))")):
        assert token.kind in (TokenKind.NUMBER, TokenKind.OPERATOR)


def test_empty():
    assert to_postfix([]) == []


def test_mismatched_parenthesis():
    with pytest.raises(MismatchedParenthesis):
        to_postfix(tokenize("( 1 + 2"))
    with pytest.raises(MismatchedParenthesis):
        to_postfix(tokenize("1 + 2 )"))
    with pytest.raises(MismatchedParenthesis):
        to_postfix(tokenize(")("))


def test_end_marker_in_stream():
    with pytest.raises(MalformedExpression):
        to_postfix((number(1), END_OF_INPUT))
