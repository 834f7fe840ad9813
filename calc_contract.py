from calc_tokens import is_postfix_token, is_stream_token


def is_expression(x):
    return isinstance(x, str)


def is_integer(x):
    return isinstance(x, int) and not isinstance(x, bool)


def is_token_list(x):
    return isinstance(x, list) and all(is_stream_token(t) for t in x)


def is_postfix(x):
    return isinstance(x, list) and all(is_postfix_token(t) for t in x)


c = {
    "raise_on_contract_exception": True,
    "functions": ["tokenize", "to_postfix", "evaluate_postfix", "evaluate"],
    "tokenize": {
        "params": {"text": is_expression},
        "returns": is_token_list,
    },
    "to_postfix": {
        "params": {"tokens": lambda x: isinstance(x, (list, tuple))},
        "returns": is_postfix,
    },
    "evaluate_postfix": {
        "params": {"postfix": lambda x: isinstance(x, (list, tuple))},
        "returns": is_integer,
    },
    "evaluate": {
        "params": {"expression": is_expression},
        "returns": is_integer,
    },
}
