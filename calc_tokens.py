from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    END = "end"


# higher binds tighter; equal ranks group left to right
PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit. Only the fields relevant to `kind` are set:
    `value` for numbers, `symbol` and `precedence` for operators.
    """

    kind: TokenKind
    value: Optional[int] = None
    symbol: Optional[str] = None
    precedence: int = 0

    def __str__(self):
        if self.kind is TokenKind.NUMBER:
            return str(self.value)
        if self.kind is TokenKind.OPERATOR:
            return self.symbol
        if self.kind is TokenKind.END:
            return "<end>"
        return self.kind.value


def number(value: int) -> Token:
    return Token(TokenKind.NUMBER, value=value)


def operator(symbol: str) -> Token:
    if symbol not in PRECEDENCE:
        raise ValueError(f"Unknown operator `{symbol}`")
    return Token(TokenKind.OPERATOR, symbol=symbol, precedence=PRECEDENCE[symbol])


LEFT_PAREN = Token(TokenKind.LEFT_PAREN)
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN)
END_OF_INPUT = Token(TokenKind.END)


def is_stream_token(token) -> bool:
    return isinstance(token, Token) and token.kind is not TokenKind.END


def is_postfix_token(token) -> bool:
    return isinstance(token, Token) and token.kind in (
        TokenKind.NUMBER,
        TokenKind.OPERATOR,
    )


def render(tokens: Iterable[Token]) -> str:
    """
    Space separated text form of a token sequence, e.g. `3 4 2 * +`.
    """
    return " ".join(str(t) for t in tokens)
