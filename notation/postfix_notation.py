"""notation/postfix_notation.py - 对外的表达式对象"""
from notation.converter import infix_to_postfix
from notation.rpn_evaluator import RPNEvaluator
from notation.token_system import Expression, parse


class PostfixNotation:
    """
    一个已转换为后缀形式的表达式
    通过 from_infix_string 构造；from_expression 只供测试直接注入 Token 序列
    """

    def __init__(self, postfix, expression):
        self.postfix = postfix
        self.expression = expression

    @classmethod
    def from_infix_string(cls, infix, strict=None):
        postfix = infix_to_postfix(infix, strict=strict)
        return cls(postfix, parse(postfix))

    @classmethod
    def from_expression(cls, expression):
        if not isinstance(expression, Expression):
            expression = Expression(expression)
        return cls(expression.to_postfix(), expression)

    def calculate(self):
        return RPNEvaluator.evaluate(self.expression)

    def __str__(self):
        return f"Postfix notation: {self.postfix}"

    def __repr__(self):
        return f"PostfixNotation({self.postfix!r})"
