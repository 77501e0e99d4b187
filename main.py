"""主程序入口 - 后缀/中缀表达式计算器"""
import argparse
import logging
import sys

from config.config import *
from calc import Calc, CalcError, CalculatorSession, Format, infix_to_postfix
from utils.formatting import format_values
from utils.serialization import dumps

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG["level"]).upper()),
        format=LOGGING_CONFIG["format"]
    )


def run_once(expression, fmt, as_json=False):
    """计算一次，返回要打印的文本；CalcError 交给调用方"""
    calc = Calc.empty()
    calc.input(expression, fmt)
    if as_json:
        return dumps(calc)
    return format_values(calc.evaluate_all())


def run_interactive(infix=False, stdin=None, stdout=None):
    """读入-求值循环，每行输入在副本上试算，出错时保留上一个状态"""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    session = CalculatorSession()

    while True:
        stdout.write(CALC_CONFIG["prompt"])
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.strip()
        if not line:
            continue
        if line == "quit":
            break
        if line == "clear":
            session.clear()
            continue

        if session.submit(line, infix=infix):
            print(session.output, file=stdout)
        else:
            print(f"error: {session.error}", file=stdout)

    return session


def main(args):
    fmt = Format.INFIX if args.infix else Format.parse(CALC_CONFIG["default_format"])

    if args.interactive:
        run_interactive(infix=fmt == Format.INFIX)
        return 0

    if args.expression is None:
        logger.error("No expression given (use --interactive for a session)")
        return 2

    if args.to_postfix:
        print(infix_to_postfix(args.expression))
        return 0

    try:
        print(run_once(args.expression, fmt, as_json=args.json))
    except CalcError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="RPN / infix calculator")
    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="Expression to evaluate (postfix unless --infix is given)"
    )
    parser.add_argument(
        "--infix",
        action="store_true",
        help="Read the expression in infix notation"
    )
    parser.add_argument(
        "--to_postfix",
        action="store_true",
        help="Only convert the infix expression to postfix and print it"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the serialized calculator memory instead of the values"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start an interactive session ('clear' resets, 'quit' exits)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        help="Logging level (default: from LOGGING_CONFIG)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    validate_config()
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
