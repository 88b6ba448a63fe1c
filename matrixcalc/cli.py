"""Command-line calculator reading matrix operations from standard input."""

from __future__ import annotations

import argparse
import operator
import re
import sys
from typing import TextIO

from matrixcalc.matrix import MAX_MATRIX_SIZE, Matrix, MatrixError

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_BINARY = {"+": operator.add, "-": operator.sub, "*": operator.matmul}
_UNARY = {
    ".": lambda m: m.scale(2.0),
    "t": lambda m: m.transpose(),
    "i": lambda m: m.inverse(),
}
_SCALAR = {
    "d": (lambda m: m.determinant(), "{:.2f}"),
    "j": (lambda m: m.trace(), "{:.2f}"),
    "r": (lambda m: m.rank(), "{:d}"),
}


class TokenReader:
    """Reads operators, numbers and matrices from a block of text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _token(self, pattern: re.Pattern[str], what: str) -> str:
        self._skip_whitespace()
        if self._pos >= len(self._text):
            raise ValueError(f"unexpected end of input while reading {what}")
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected {what} at position {self._pos}")
        self._pos = match.end()
        return match.group()

    def next_op(self) -> str | None:
        """Return the next non-blank character, or None at the end of input."""
        self._skip_whitespace()
        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def next_int(self) -> int:
        return int(self._token(_INT_RE, "an integer"))

    def next_float(self) -> float:
        return float(self._token(_FLOAT_RE, "a number"))

    def read_matrix(self) -> Matrix:
        """Read 'rows cols' followed by the elements in row order."""
        rows = self.next_int()
        cols = self.next_int()
        if not (0 <= rows <= MAX_MATRIX_SIZE and 0 <= cols <= MAX_MATRIX_SIZE):
            raise MatrixError(
                f"Matrix dimensions must be between 0 and {MAX_MATRIX_SIZE}."
            )
        return Matrix(
            rows,
            cols,
            tuple(tuple(self.next_float() for _ in range(cols)) for _ in range(rows)),
        )


def run(text: str, out: TextIO) -> None:
    """Execute every operation in text, writing results to out, until 'q' or the end."""
    reader = TokenReader(text)
    while (op := reader.next_op()) is not None:
        if op == "q":
            return
        if op in _BINARY:
            a = reader.read_matrix()
            b = reader.read_matrix()
            try:
                out.write(_BINARY[op](a, b).format())
            except MatrixError as exc:
                out.write(f"Error: {exc}\n")
        elif op in _UNARY:
            a = reader.read_matrix()
            try:
                out.write(_UNARY[op](a).format())
            except MatrixError as exc:
                out.write(f"Error: {exc}\n")
        elif op in _SCALAR:
            func, template = _SCALAR[op]
            a = reader.read_matrix()
            try:
                value = func(a)
            except MatrixError as exc:
                out.write(f"Error: {exc}\n")
                value = 0
            out.write(template.format(value) + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="matrixcalc",
        description=(
            "Read matrix operations from standard input: + - * . t d i r j, q to quit."
        ),
    )
    parser.parse_args(argv)
    try:
        run(sys.stdin.read(), sys.stdout)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())