"""批量求值模块 - 逐行求值并汇总为DataFrame"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from notation.outcome import evaluate_infix

logger = logging.getLogger(__name__)


def load_expressions(file_path):
    """
    加载表达式文件，每行一个中缀表达式。

    Parameters:
    - file_path: 文本文件路径；空行和以 '#' 开头的行被跳过

    Returns:
    - 表达式字符串列表（保持文件顺序）
    """
    logger.info(f"Loading expressions from {file_path}")

    prefix = BATCH_CONFIG["comment_prefix"]
    with open(file_path, 'r', encoding='utf-8') as f:
        # 每行整体作为一个表达式，不做分列
        lines = pd.Series(f.read().splitlines(), dtype=object)

    expressions = lines.str.strip()
    expressions = expressions[(expressions != '') & ~expressions.str.startswith(prefix)].tolist()
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, strict=None):
    """
    对多个中缀表达式逐个求值，单个失败不影响其他表达式

    Parameters:
    - expressions: 中缀表达式序列
    - strict: 是否严格校验字符集；None 时使用配置

    Returns:
    - DataFrame，列为 BATCH_CONFIG["output_columns"]
    """
    outcomes = [evaluate_infix(infix, strict=strict) for infix in expressions]
    for outcome in outcomes:
        if not outcome.ok:
            logger.debug(f"Expression {outcome.infix!r} failed: {outcome.error}")

    frame = pd.DataFrame({
        'infix': pd.Series([o.infix for o in outcomes], dtype=object),
        'postfix': pd.Series([o.postfix for o in outcomes], dtype=object),
        'result': _result_column([o.value for o in outcomes]),
        'error_kind': pd.Series([None if o.ok else o.kind.value for o in outcomes], dtype=object),
        'error': pd.Series([None if o.ok else str(o.error) for o in outcomes], dtype=object),
    })
    frame['status'] = np.where(frame['error_kind'].isna(), 'ok', 'failed')
    return frame[BATCH_CONFIG["output_columns"]]


def _result_column(values):
    """结果列优先用可空 Int64；超出 int64 范围时保留 Python 整数"""
    bounds = np.iinfo(np.int64)
    if all(v is None or bounds.min <= v <= bounds.max for v in values):
        return pd.Series(pd.array(values, dtype='Int64'))
    logger.warning("Results exceed int64 range, keeping Python integers")
    return pd.Series(values, dtype=object)


def summarize_results(frame):
    """统计成功/失败数量以及各错误种类的数量"""
    failed = frame[frame['status'] == 'failed']
    summary = {
        'total': int(len(frame)),
        'ok': int((frame['status'] == 'ok').sum()),
        'failed': int(len(failed)),
        'error_kinds': {kind: int(count) for kind, count in failed['error_kind'].value_counts().items()},
    }
    logger.info(f"Evaluated {summary['total']} expressions: {summary['ok']} ok, {summary['failed']} failed")
    return summary
