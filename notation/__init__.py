"""表达式模块 - Token系统、中缀转后缀、RPN求值器和操作符"""
from .errors import (
    ErrorKind, NotationError, BracketMismatchError, InvalidTokenError,
    UnknownOperatorError, StackUnderflowError, DivisionByZeroError
)
from .token_system import TokenType, Operator, Token, Expression, parse
from .converter import operator_priority, validate_infix, infix_to_postfix, convert
from .operators import Operators
from .rpn_evaluator import RPNEvaluator, get_operand_from_stack
from .postfix_notation import PostfixNotation
from .outcome import Outcome, evaluate_infix

__all__ = [
    'ErrorKind', 'NotationError', 'BracketMismatchError', 'InvalidTokenError',
    'UnknownOperatorError', 'StackUnderflowError', 'DivisionByZeroError',
    'TokenType', 'Operator', 'Token', 'Expression', 'parse',
    'operator_priority', 'validate_infix', 'infix_to_postfix', 'convert',
    'Operators', 'RPNEvaluator', 'get_operand_from_stack',
    'PostfixNotation', 'Outcome', 'evaluate_infix'
]
