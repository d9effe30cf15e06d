"""notation/errors.py - 表达式转换和求值的错误类型"""
from enum import Enum


class ErrorKind(Enum):
    BRACKET_MISMATCH = "bracket_mismatch"
    INVALID_TOKEN = "invalid_token"
    UNKNOWN_OPERATOR = "unknown_operator"
    STACK_UNDERFLOW = "stack_underflow"
    DIVISION_BY_ZERO = "division_by_zero"


class NotationError(Exception):
    """所有转换/求值错误的基类，kind 用于区分错误种类"""
    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class BracketMismatchError(NotationError):
    """括号不匹配：多余的 ')' 或未闭合的 '('"""
    kind = ErrorKind.BRACKET_MISMATCH

    def __init__(self, bracket, position=None):
        super().__init__("Brackets mismatch. Check your expression.")
        self.bracket = bracket
        self.position = position


class InvalidTokenError(NotationError):
    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token, position=None):
        if position is None:
            message = f"Invalid token {token!r}. Check your expression."
        else:
            message = f"Invalid token {token!r} at position {position}. Check your expression."
        super().__init__(message)
        self.token = token
        self.position = position


class UnknownOperatorError(NotationError):
    kind = ErrorKind.UNKNOWN_OPERATOR

    def __init__(self, symbol):
        super().__init__(
            f"Got unknown Operator {symbol} instead of valid operator. Check your expression."
        )
        self.symbol = symbol


class StackUnderflowError(NotationError):
    kind = ErrorKind.STACK_UNDERFLOW


class DivisionByZeroError(NotationError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, dividend):
        super().__init__(f"Division of {dividend} by zero. Check your expression.")
        self.dividend = dividend
