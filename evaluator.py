import operator
from typing import Sequence

from calc_contract import c as contract
from calc_errors import DivisionByZero, MalformedExpression
from calc_tokens import Token, TokenKind
from contract_util import enforce_contract


def divide(left: int, right: int) -> int:
    """
    Integer division truncating toward zero, so `-7 / 2 == -3`.
    """
    if right == 0:
        raise DivisionByZero(f"Division by zero in `{left} / {right}`")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_BIN_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
}


@enforce_contract(contract)
def evaluate_postfix(postfix: Sequence[Token]) -> int:
    if not postfix:
        return 0

    stack = []
    for token in postfix:
        if token.kind is TokenKind.NUMBER:
            stack.append(token.value)
        elif token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise MalformedExpression(
                    f"Operator `{token}` is missing an operand"
                )
            # right operand was pushed last
            right = stack.pop()
            left = stack.pop()
            stack.append(_BIN_OPS[token.symbol](left, right))
        else:
            raise MalformedExpression(f"Unexpected token `{token}` in postfix")

    if len(stack) != 1:
        raise MalformedExpression(
            f"Expression leaves {len(stack)} values, expected 1 (missing operator?)"
        )
    return stack[0]
