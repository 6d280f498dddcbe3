from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from intset._algebra import BINARY_OPERATORS, cardinality, member
from intset._buffer import INT32_MAX
from intset._errors import IntSetError, IntSetSyntaxError
from intset._intset import INT32_MIN, IntSet
from intset._parser import parse
from intset._term import bold, dim, force_color, green, red

logger = logging.getLogger(__name__)

UNARY_OPERATORS = ("#",)
MEMBER_OPERATOR = "?"
ALL_OPERATORS = [MEMBER_OPERATOR, *UNARY_OPERATORS, *BINARY_OPERATORS]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return green("true") if value else red("false")
    if isinstance(value, IntSet):
        return bold(str(value))
    return str(value)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, IntSet):
        return list(obj.elements)
    raise TypeError(f"cannot serialize {type(obj).__name__}")


def _report(err: IntSetError) -> None:
    print(f"{red('error')}: {err}", file=sys.stderr)
    if isinstance(err, IntSetSyntaxError):
        for line in err.illustration().splitlines():
            print(f"  {dim(line)}", file=sys.stderr)


def _scalar(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise IntSetError(f"left operand of '?' must be an integer, got {text!r}") from None
    if not INT32_MIN <= value <= INT32_MAX:
        raise IntSetError(f"{value} is outside the 32-bit signed range")
    return value


def _cmd_parse(args: argparse.Namespace) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for literal in args.literals:
        s = parse(literal)
        out.append({"input": literal, "result": s})
        if not args.json and not args.quiet:
            print(_render(s))
    return out


def _cmd_eval(args: argparse.Namespace, p: argparse.ArgumentParser) -> list[dict[str, Any]]:
    op = args.op
    if op in UNARY_OPERATORS:
        if args.right is not None:
            p.error(f"operator '{op}' takes a single operand")
        result: Any = cardinality(parse(args.left))
    else:
        if args.right is None:
            p.error(f"operator '{op}' needs a right operand")
        if op == MEMBER_OPERATOR:
            result = member(_scalar(args.left), parse(args.right))
        else:
            result = BINARY_OPERATORS[op](parse(args.left), parse(args.right))
    logger.debug("%s %s %s -> %r", args.left, op, args.right, result)
    if not args.json and not args.quiet:
        print(_render(result))
    return [{"left": args.left, "operator": op, "right": args.right, "result": result}]


def main(argv: list[str] | None = None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print results as a JSON array")
    common.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    common.add_argument("-v", "--verbose", action="store_true", help="Log parser activity to stderr")
    common.add_argument("-q", "--quiet", action="store_true", help="Print nothing; report via exit code")

    p = argparse.ArgumentParser(prog="intset", description="Parse and combine integer-set literals.")
    sub = p.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", parents=[common], help="Print the canonical form of each literal")
    p_parse.add_argument("literals", nargs="+", metavar="LITERAL", help="e.g. '{3, 1,2}'")

    p_eval = sub.add_parser("eval", parents=[common], help="Apply a set operator")
    p_eval.add_argument("left", metavar="LEFT", help="Literal, or an integer for '?'")
    p_eval.add_argument("op", metavar="OP", choices=ALL_OPERATORS, help=" ".join(ALL_OPERATORS))
    p_eval.add_argument("right", metavar="RIGHT", nargs="?", help="Literal (omit for '#')")

    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)

    package_logger = logging.getLogger("intset")
    previous_level = package_logger.level
    if args.verbose:
        if not logging.getLogger().handlers:
            logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
        package_logger.setLevel(logging.DEBUG)

    try:
        if args.command == "parse":
            results = _cmd_parse(args)
        else:
            results = _cmd_eval(args, p_eval)
    except IntSetError as e:
        if not args.quiet:
            _report(e)
        return 1
    finally:
        package_logger.setLevel(previous_level)

    if args.json:
        print(json.dumps(results, indent=2, default=_json_default))
    return 0
