"""notation/outcome.py - 成功/失败的标记结果，供批量求值和命令行使用"""
import logging
from collections import namedtuple

from notation.converter import infix_to_postfix
from notation.errors import NotationError
from notation.postfix_notation import PostfixNotation
from notation.token_system import parse

logger = logging.getLogger(__name__)


class Outcome(namedtuple('Outcome', ['infix', 'postfix', 'value', 'error'])):
    """一次求值的结果：value 与 error 恰有一个非空（postfix 在转换失败时为 None）"""
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    @property
    def kind(self):
        return None if self.error is None else self.error.kind

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value


def evaluate_infix(infix, strict=None):
    """转换并求值，只捕获 NotationError，其余异常照常抛出"""
    postfix = None
    try:
        postfix = infix_to_postfix(infix, strict=strict)
        notation = PostfixNotation(postfix, parse(postfix))
        value = notation.calculate()
    except NotationError as e:
        logger.debug(f"Evaluation of {infix!r} failed: {e.kind.value}: {e}")
        return Outcome(infix, postfix, None, e)
    return Outcome(infix, postfix, value, None)
