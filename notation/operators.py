"""notation/operators.py"""
from notation.errors import DivisionByZeroError
from notation.token_system import Operator


class Operators:
    """所有二元操作符的静态方法集合，参数顺序为 (左操作数, 右操作数)"""

    @staticmethod
    def add(operand1, operand2):
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """整数除法，向零截断（-7 / 2 == -3）"""
        if operand2 == 0:
            raise DivisionByZeroError(operand1)
        quotient = abs(operand1) // abs(operand2)
        if (operand1 < 0) != (operand2 < 0):
            return -quotient
        return quotient


OPERATOR_METHODS = {
    Operator.ADD: Operators.add,
    Operator.SUB: Operators.sub,
    Operator.MUL: Operators.mul,
    Operator.DIV: Operators.div,
}

# 新增操作符时必须同时补上对应方法
if set(OPERATOR_METHODS) != set(Operator):
    raise RuntimeError("Every Operator needs an Operators method")
