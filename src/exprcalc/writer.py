from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = os.environ.get("EXPRCALC_DEBUG", "") == "1"


class IndentingWriter:
    def __init__(
        self,
        indent_size: int = 3,
        debug: bool | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._debug = DEBUG if debug is None else debug
        self._stream = stream

    @property
    def debug_enabled(self) -> bool:
        return self._debug

    @property
    def stream(self) -> TextIO:
        # Looked up on each write; sys.stderr may be swapped at runtime.
        return self._stream if self._stream is not None else sys.stderr

    def debug(self, message: str) -> None:
        if self._debug:
            self._print_indentation()
            print(message, end="", file=self.stream)

    def debugln(self, message: str) -> None:
        if self._debug:
            self.debug(message)
            print(file=self.stream)

    def indent(self) -> None:
        if self._debug:
            self._indents += 1

    def dedent(self) -> None:
        if self._debug:
            self._indents -= 1

    def _print_indentation(self) -> None:
        print(" " * self._indent_size * self._indents, end="", file=self.stream)


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()
