import logging as log
from typing import List, Tuple

from calc_contract import c as contract
from calc_errors import NumberOutOfRange, UnrecognizedCharacter
from calc_tokens import (
    END_OF_INPUT,
    LEFT_PAREN,
    PRECEDENCE,
    RIGHT_PAREN,
    Token,
    TokenKind,
    number,
    operator,
)
from contract_util import enforce_contract

# largest literal accepted, a signed 64-bit word
MAX_NUMBER = 2**63 - 1

DIGITS = "0123456789"
WHITESPACE = " \t\r\n"

_MAX_DIGITS = len(str(MAX_NUMBER))


def next_token(text: str, pos: int = 0) -> Tuple[Token, int]:
    """
    Scans one token of `text` starting at `pos`.

    Returns the token and the position just past it. Once the text is
    exhausted the END_OF_INPUT sentinel is returned with `pos == len(text)`.
    """
    end = len(text)
    while pos < end and text[pos] in WHITESPACE:
        pos += 1

    if pos >= end:
        return END_OF_INPUT, end

    char = text[pos]
    if char in DIGITS:
        start = pos
        while pos < end and text[pos] in DIGITS:
            pos += 1
        literal = text[start:pos]
        # check the length first so huge runs never reach int()
        if len(literal.lstrip("0")) > _MAX_DIGITS or int(literal) > MAX_NUMBER:
            raise NumberOutOfRange(literal, start)
        return number(int(literal)), pos

    if char in PRECEDENCE:
        return operator(char), pos + 1
    if char == "(":
        return LEFT_PAREN, pos + 1
    if char == ")":
        return RIGHT_PAREN, pos + 1

    raise UnrecognizedCharacter(char, pos)


@enforce_contract(contract)
def tokenize(text: str) -> List[Token]:
    """
    Full tokenization of `text`, without the END_OF_INPUT sentinel.
    """
    tokens = []
    token, pos = next_token(text)
    while token.kind is not TokenKind.END:
        log.debug(f"Parsed `{token}`, next position {pos}")
        tokens.append(token)
        token, pos = next_token(text, pos)
    return tokens
