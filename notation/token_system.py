"""notation/token_system.py"""
import logging
import re
from enum import Enum

from config.config import NOTATION_CONFIG
from notation.errors import InvalidTokenError, UnknownOperatorError

logger = logging.getLogger(__name__)

SEPARATOR = NOTATION_CONFIG["separator"]
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def precedence(self):
        return OPERATOR_PRECEDENCE[self]

    @classmethod
    def from_symbol(cls, symbol):
        """按符号查找操作符，未知符号直接报错而不是放行"""
        if isinstance(symbol, cls):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorError(symbol) from None


# 优先级表：乘除高于加减
OPERATOR_PRECEDENCE = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}

OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)


class Token:
    """后缀表达式中的一个元素：操作数(int) 或 操作符(Operator)"""
    __slots__ = ('type', 'value')

    def __init__(self, token_type, value):
        if token_type == TokenType.OPERATOR:
            value = Operator.from_symbol(value)
        elif token_type == TokenType.OPERAND:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidTokenError(value)
        else:
            raise ValueError(f"Unknown token type: {token_type}")
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'value', value)

    @classmethod
    def operand(cls, value):
        return cls(TokenType.OPERAND, value)

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def name(self):
        """token 的文本形式，即后缀串中的写法"""
        if self.is_operator:
            return self.value.value
        return str(self.value)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.is_operator:
            return f"Token.operator({self.value.value!r})"
        return f"Token.operand({self.value})"


class Expression:
    """完整的后缀表达式（有序、不可变）"""

    def __init__(self, tokens=()):
        tokens = tuple(tokens)
        for token in tokens:
            if not isinstance(token, Token):
                raise TypeError(f"Expression entries must be Token, got {type(token).__name__}")
        self._tokens = tokens

    def __iter__(self):
        return iter(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self):
        return hash(self._tokens)

    def __repr__(self):
        return f"Expression({list(self._tokens)!r})"

    def to_postfix(self):
        return SEPARATOR.join(token.name for token in self._tokens)


def parse_token(text):
    """把单个后缀 token 文本映射为 Token"""
    if text in OPERATOR_SYMBOLS:
        return Token.operator(text)
    if INTEGER_PATTERN.fullmatch(text):
        return Token.operand(int(text))
    raise InvalidTokenError(text)


def parse(postfix):
    """
    把空格分隔的后缀串解析为 Expression
    Args:
        postfix: 后缀表达式字符串，例如 "13 5 2 * +"
    Returns:
        Expression；空串得到空表达式
    """
    if postfix == '':
        return Expression()

    tokens = [parse_token(text) for text in postfix.split(SEPARATOR)]
    logger.debug(f"Parsed {len(tokens)} tokens from postfix {postfix!r}")
    return Expression(tokens)
