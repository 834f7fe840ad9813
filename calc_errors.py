class CalculatorException(Exception):
    """
    Base class for every classified failure of an evaluation.
    """

    pass


class UnrecognizedCharacter(CalculatorException):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unrecognized character `{char}` at position {position}")


class NumberOutOfRange(CalculatorException):
    def __init__(self, literal: str, position: int):
        self.literal = literal
        self.position = position
        super().__init__(f"Number `{literal}` at position {position} is out of range")


class MismatchedParenthesis(CalculatorException):
    pass


class MalformedExpression(CalculatorException):
    pass


class DivisionByZero(CalculatorException):
    pass
