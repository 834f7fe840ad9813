import argparse
import logging as log
import os
import sys

from calc_contract import c as contract
from calc_errors import CalculatorException
from calc_tokens import render
from contract_util import enforce_contract
from evaluator import evaluate_postfix
from lexer import tokenize
from postfix import to_postfix


class Return:
    """
    Outcome of a `calculate` call.

    If the `ok` property is True the computed value may be found in the
    `returns` property. Otherwise the `exception` property holds the
    classified failure.
    """

    def __init__(self, exception=None, ret_val=None):
        self.ce = exception
        self.ret = ret_val

    @property
    def exception(self):
        return self.ce

    @property
    def ok(self):
        return self.ce is None

    @property
    def returns(self):
        return self.ret


@enforce_contract(contract)
def evaluate(expression: str) -> int:
    """
    Computes the integer value of an arithmetic expression.

    Raises:
        CalculatorException: one of its subclasses, from whichever stage
            first noticed the problem.
    """
    log.debug(f'Calculating "{expression}"')
    tokens = tokenize(expression)
    log.debug(f"Infix: {render(tokens)}")
    postfix = to_postfix(tokens)
    log.debug(f"Postfix: {render(postfix)}")
    result = evaluate_postfix(postfix)
    log.debug(f"Result: {result}")
    return result


def calculate(expression: str) -> Return:
    try:
        return Return(None, evaluate(expression))
    except CalculatorException as e:
        return Return(e, None)


def debug_from_env(environ=None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get("DEBUG", "").upper() == "TRUE"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Evaluate an integer arithmetic expression"
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate, e.g. '3 + 4 * ( 2 - 1 )'",
    )
    parser.add_argument(
        "-d",
        "--debug",
        help="Trace every stage of the evaluation to stderr",
        action="store_true",
        required=False,
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    debug = args.debug or debug_from_env()
    log.basicConfig(
        format="[%(levelname)s] %(module)s: %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once handlers exist, the level must still follow
    log.getLogger().setLevel(log.DEBUG if debug else log.WARNING)

    # nothing to compute
    if not args.expression:
        return 0

    val = calculate(" ".join(args.expression))
    if not val.ok:
        print(f"Error: {val.exception}", file=sys.stderr)
        return 1
    print(val.returns)
    return 0


if __name__ == "__main__":
    sys.exit(main())
