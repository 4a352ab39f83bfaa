import argparse
import sys

from .runtime.core import RuntimeContext
from .runtime.interpreter import run_for_cli
from .writer import DEBUG, IndentingWriter


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate one integer arithmetic expression per line.",
    )
    parser.add_argument("input", nargs="?", help="input file (default: stdin)")
    parser.add_argument("output", nargs="?", help="output file (default: stdout)")
    parser.add_argument(
        "--parser",
        choices=["descent", "grammar"],
        default="descent",
        help="parser implementation to use",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=DEBUG,
        help="trace parsing and evaluation to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    context = RuntimeContext(
        writer=IndentingWriter(debug=args.debug),
        parser=args.parser,
    )
    return run_for_cli(args.input, args.output, context)


if __name__ == "__main__":
    sys.exit(main())
