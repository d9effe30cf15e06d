"""中缀 -> 后缀转换器（调度场算法）"""
import logging

from config.config import NOTATION_CONFIG
from notation.errors import BracketMismatchError, InvalidTokenError
from notation.token_system import OPERATOR_PRECEDENCE, OPERATOR_SYMBOLS, SEPARATOR, Operator

logger = logging.getLogger(__name__)

OPEN_BRACKET = '('
CLOSE_BRACKET = ')'


def operator_priority(operator):
    """操作符优先级；括号及其他字符为 -1"""
    if operator in OPERATOR_SYMBOLS:
        return OPERATOR_PRECEDENCE[Operator(operator)]
    return -1


def validate_infix(infix, allowed_characters=None):
    """检查中缀串只包含数字、四个操作符和括号"""
    if allowed_characters is None:
        allowed_characters = NOTATION_CONFIG["allowed_characters"]
    for position, char in enumerate(infix):
        if char not in allowed_characters:
            raise InvalidTokenError(char, position)


def infix_to_postfix(infix, strict=None):
    """
    把中缀表达式转换为空格分隔的后缀表达式
    Args:
        infix: 中缀表达式，例如 "(13+5)*2"，不含空白字符
        strict: 是否先校验字符集；None 时取 NOTATION_CONFIG["strict_input"]
    Returns:
        后缀表达式字符串，例如 "13 5 + 2 *"
    """
    if strict is None:
        strict = NOTATION_CONFIG["strict_input"]
    if strict:
        validate_infix(infix)

    result = []
    stack = []

    for position, char in enumerate(infix):
        if char.isdigit() and char.isascii():
            # 连续数字不加分隔符，多位数保持为一个 token
            result.append(char)
        elif char == OPEN_BRACKET:
            stack.append((char, position))
        elif char == CLOSE_BRACKET:
            while stack and stack[-1][0] != OPEN_BRACKET:
                result.append(SEPARATOR)
                result.append(stack.pop()[0])

            if not stack:
                raise BracketMismatchError(CLOSE_BRACKET, position)
            stack.pop()
        else:
            result.append(SEPARATOR)
            while stack and operator_priority(stack[-1][0]) >= operator_priority(char):
                result.append(stack.pop()[0])
                result.append(SEPARATOR)
            stack.append((char, position))

    while stack:
        operator, position = stack.pop()
        if operator == OPEN_BRACKET:
            raise BracketMismatchError(OPEN_BRACKET, position)
        result.append(SEPARATOR)
        result.append(operator)

    postfix = ''.join(result)
    logger.debug(f"Converted infix {infix!r} to postfix {postfix!r}")
    return postfix


convert = infix_to_postfix
