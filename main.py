"""主程序入口 - 中缀表达式转后缀并求值"""
import argparse
import logging
import sys

import pandas as pd

from config.config import *
from calculator import ExpressionCalculator, result_line

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Infix to postfix expression calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Infix expressions to evaluate (defaults to the built-in samples)"
    )
    parser.add_argument(
        "--right_associative_power",
        action="store_true",
        default=None,
        help="Treat '^' as right-associative (2^3^2 == 512); defaults to the config value"
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip unsupported characters and unclosed '(' instead of failing"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument(
        "--csv_path",
        type=str,
        default=None,
        help="Optional path to save the results table as CSV"
    )
    return parser


def main(args):
    validate_config()

    calculator = ExpressionCalculator(
        strict=not args.lenient,
        right_associative_power=args.right_associative_power
    )
    expressions = args.expressions or DEMO_CONFIG['sample_expressions']
    logger.info(f"Evaluating {len(expressions)} expressions")

    results = calculator.evaluate_many(expressions)
    for row in results.itertuples(index=False):
        if pd.isna(row.error):
            print(result_line(row.expression, row.postfix, row.result))
        else:
            print(f"{row.expression} !! {row.error}")

    if args.csv_path:
        logger.info(f"Saving results to {args.csv_path}")
        results.to_csv(args.csv_path, index=False)

    failed = calculator.failed_rows(results)
    if failed is not None:
        logger.error(f"{len(failed)} expressions could not be evaluated")
        return 1
    return 0


if __name__ == "__main__":
    args = build_parser().parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOGGING_CONFIG['format'])
    sys.exit(main(args))
