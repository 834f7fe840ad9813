from typing import List, Sequence

from calc_contract import c as contract
from calc_errors import MalformedExpression, MismatchedParenthesis
from calc_tokens import Token, TokenKind
from contract_util import enforce_contract


@enforce_contract(contract)
def to_postfix(tokens: Sequence[Token]) -> List[Token]:
    """
    Reorders an infix token sequence into postfix order (shunting-yard).

    The operator stack only ever holds operators and open parentheses. An
    incoming operator first pops every stacked operator of greater or equal
    precedence, which makes equal precedence group left to right.

    Raises:
        MismatchedParenthesis: on a `)` with no open `(`, or an unclosed `(`.
        MalformedExpression: on a token that cannot appear in an expression.
    """
    postfix = []
    stack = []

    for token in tokens:
        if token.kind is TokenKind.NUMBER:
            postfix.append(token)
        elif token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)
        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                postfix.append(stack.pop())
            if not stack:
                raise MismatchedParenthesis("Closing `)` without matching `(`")
            stack.pop()
        elif token.kind is TokenKind.OPERATOR:
            while (
                stack
                and stack[-1].kind is TokenKind.OPERATOR
                and stack[-1].precedence >= token.precedence
            ):
                postfix.append(stack.pop())
            stack.append(token)
        else:
            raise MalformedExpression(f"Unexpected token `{token}`")

    while stack:
        token = stack.pop()
        if token.kind is TokenKind.LEFT_PAREN:
            raise MismatchedParenthesis("Unclosed `(`")
        postfix.append(token)

    return postfix
