"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from notation.errors import StackUnderflowError, UnknownOperatorError
from notation.operators import OPERATOR_METHODS
from notation.token_system import Expression, Token, TokenType

logger = logging.getLogger(__name__)


def get_operand_from_stack(stack):
    """弹出栈顶操作数；栈空或栈顶是操作符都视为表达式错误"""
    if not stack:
        raise StackUnderflowError("Got None instead of valid operand. Check your expression.")
    entry = stack.pop()
    if entry.type != TokenType.OPERAND:
        raise StackUnderflowError("Got Operator instead of valid operand. Check your expression.")
    return entry.value


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(expression):
        """
        评估RPN表达式
        Args:
            expression: Expression（Token序列）
        Returns:
            整数结果
        """
        if not isinstance(expression, Expression):
            expression = Expression(expression)
        stack = []

        for token in expression:
            if token.type == TokenType.OPERAND:
                stack.append(token)
                continue

            op_method = OPERATOR_METHODS.get(token.value)
            if op_method is None:
                raise UnknownOperatorError(token.value)

            # 先弹出的是右操作数
            operand1 = get_operand_from_stack(stack)
            operand2 = get_operand_from_stack(stack)
            stack.append(Token.operand(op_method(operand2, operand1)))

        result = get_operand_from_stack(stack)
        if stack:
            raise StackUnderflowError(
                f"Stack has {len(stack) + 1} elements after evaluation, expected 1. Check your expression."
            )

        logger.debug(f"Evaluated {expression.to_postfix()!r} -> {result}")
        return result
