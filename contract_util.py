import inspect
import logging as log
from functools import wraps
from typing import Callable


class ContractException(Exception):
    pass


class ContractValidationException(ContractException):
    pass


schema_globals = {
    "raise_on_contract_exception": bool,
    "functions": list,
}

schema_functions = {
    "params": dict,
    "returns": Callable,
}


def verify_contract_schema(contract: dict, function_name: str = None):
    """
    Raises ContractValidationException unless the contract carries every
    global key and, for each declared function, every per-function key.

    Args:
        contract (dict): Contract to be checked
        function_name (str): Only check this function's entry
    """
    for k, v in schema_globals.items():
        if k not in contract or not isinstance(contract[k], v):
            raise ContractValidationException(
                f"Either `{k}` not in contract or not instance of `{v}`."
            )

    functions = [function_name] if function_name else contract["functions"]
    for f in functions:
        if f not in contract:
            raise ContractValidationException(
                f"The function `{f}` declared in functions but not defined."
            )
        for fkwn, fkwv in schema_functions.items():
            if fkwn not in contract[f] or not isinstance(contract[f][fkwn], fkwv):
                raise ContractValidationException(
                    f"Either `{fkwn}` not in contract['{f}'] or not instance of `{fkwv}`"
                )


def _violation(contract: dict, message: str):
    if contract.get("raise_on_contract_exception", True):
        raise ContractException(message)
    log.warning(f"Contract violation: {message}")


def enforce_contract(contract: dict):
    """
    This decorator checks a function's arguments and return value against
    the validators the contract declares for it.

    Exceptions raised by the function itself are not contract violations
    and propagate to the caller untouched.

    Args:
        contract (dict): Contract to be enforced
    """

    def dec(fn):
        function_name = fn.__name__
        if function_name in contract.get("functions", []):
            verify_contract_schema(contract, function_name)
        signature = inspect.signature(fn)

        @wraps(fn)
        def wrapped(*args, **kwargs):
            if function_name not in contract.get("functions", []):
                _violation(
                    contract, f"Function `{function_name}` not specified in contract."
                )
                return fn(*args, **kwargs)

            terms = contract[function_name]

            # dict of args and kwargs bound to names
            try:
                arguments = signature.bind(*args, **kwargs).arguments
            except TypeError as e:
                raise ContractException(
                    f"Unable to bind passed-in parameters for `{function_name}`: {e}"
                )

            for arg, val in arguments.items():
                validator_func = terms["params"].get(arg)
                if validator_func is None:
                    _violation(
                        contract,
                        f"Parameter `{arg}` used but not defined in contract.",
                    )
                elif not validator_func(val):
                    _violation(
                        contract,
                        f"Parameter `{arg}` of `{function_name}` out of contract specification.",
                    )

            ret = fn(*args, **kwargs)

            if not terms["returns"](ret):
                _violation(
                    contract,
                    f"Return value `{ret}` of `{function_name}` does not match contract.",
                )
            return ret

        return wrapped

    return dec
