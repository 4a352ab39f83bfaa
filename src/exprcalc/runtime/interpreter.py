import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from ..frontend.ast_expressions import Expression
from ..frontend.errors import CalculatorError
from ..frontend.grammar_parser import parse_with_grammar
from ..frontend.parser import parse
from .core import RuntimeContext
from .evaluator import evaluate


@dataclass(frozen=True, slots=True)
class LineResult:
    value: int | None = None
    error: CalculatorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error}"
        return str(self.value)


def parse_line(line: str, context: RuntimeContext) -> Expression:
    if context.parser == "grammar":
        return parse_with_grammar(line)
    return parse(line, context)


def calculate(line: str, context: RuntimeContext | None = None) -> LineResult:
    context = context or RuntimeContext()
    try:
        expr = parse_line(line, context)
        return LineResult(value=evaluate(expr, context))
    except CalculatorError as error:
        return LineResult(error=error)


def calculate_line(
    line: str, context: RuntimeContext | None = None
) -> LineResult | None:
    """Like ``calculate`` but returns None for blank lines."""
    line = line.rstrip("\r\n")
    if not line.strip():
        return None
    return calculate(line, context)


def process_line(line: str, context: RuntimeContext | None = None) -> str:
    result = calculate_line(line, context)
    return "" if result is None else result.render()


def run_lines(
    lines: Iterable[str],
    output: TextIO,
    context: RuntimeContext | None = None,
) -> int:
    """Writes one output line per input line and returns how many failed."""
    context = context or RuntimeContext()
    failures = 0
    for line in lines:
        result = calculate_line(line, context)
        if result is None:
            print(file=output)
            continue

        if not result.ok:
            failures += 1
        print(result.render(), file=output)
    return failures


def run_for_cli(
    input_path: str | None = None,
    output_path: str | None = None,
    context: RuntimeContext | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    error_stream = stderr if stderr is not None else sys.stderr

    try:
        source = (
            open(input_path, encoding="utf-8")
            if input_path is not None
            else stdin or sys.stdin
        )
    except FileNotFoundError as error:
        print(f"File not found: {error}", file=error_stream)
        return 1
    except OSError as error:
        print(f"Cannot open file: {error}", file=error_stream)
        return 1

    try:
        try:
            sink = (
                open(output_path, "w", encoding="utf-8")
                if output_path is not None
                else stdout or sys.stdout
            )
        except OSError as error:
            print(f"Cannot open file: {error}", file=error_stream)
            return 1

        try:
            run_lines(source, sink, context)
        finally:
            if output_path is not None:
                sink.close()
    finally:
        if input_path is not None:
            source.close()

    return 0
