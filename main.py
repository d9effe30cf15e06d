"""主程序入口 - 中缀表达式计算器（单个表达式或批量文件）"""
import argparse
import logging
import sys

from config.config import *
from notation import NotationError, PostfixNotation
from batch.runner import load_expressions, evaluate_expressions, summarize_results

logger = logging.getLogger(__name__)

USAGE_ERROR = "Provide valid math expression using numbers and operator +-/* without space characters"


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"]
    )


def run_single(infix, strict):
    """求值单个表达式并打印结果，返回退出码"""
    try:
        notation = PostfixNotation.from_infix_string(infix, strict=strict)
        result = notation.calculate()
    except NotationError as e:
        logger.debug(f"Expression {infix!r} rejected: {e.kind.value}")
        print(f"Error ({e.kind.value}): {e}", file=sys.stderr)
        return 1

    print(f"You provided following expression: {infix}")
    print(notation)
    print(f"Result: {result}")
    return 0


def run_batch(file_path, strict, output_path=None):
    """批量求值文件中的表达式，返回退出码（有任何失败即为1）"""
    try:
        expressions = load_expressions(file_path)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    results = evaluate_expressions(expressions, strict=strict)
    summary = summarize_results(results)

    if len(results):
        print(results.to_string(index=False))

    for kind, count in summary['error_kinds'].items():
        logger.warning(f"  - {kind}: {count}")

    if output_path:
        logger.info(f"Saving results to {output_path}")
        results.to_csv(output_path, index=False)

    return 1 if summary['failed'] else 0


def main(args):
    validate_config()
    strict = False if args.permissive else NOTATION_CONFIG["strict_input"]

    if args.file:
        if args.expression is not None:
            print(f"Problem parsing arguments: {USAGE_ERROR}", file=sys.stderr)
            return 1
        return run_batch(args.file, strict, args.output_path)

    if args.expression is None:
        print(f"Problem parsing arguments: {USAGE_ERROR}", file=sys.stderr)
        return 1
    return run_single(args.expression, strict)


def build_parser():
    parser = argparse.ArgumentParser(description="Infix expression calculator (shunting-yard + RPN)")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Infix expression, e.g. \"(13+5)*2\" (no spaces)"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Evaluate every expression in a text file, one per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save the batch results as CSV"
    )
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Do not reject characters outside digits, +-*/ and brackets"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
