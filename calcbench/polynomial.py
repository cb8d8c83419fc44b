"""Integer polynomials in ``x``: parsing, addition, multiplication and formatting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Mapping

MAX_DEGREE = 100

_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"

Polynomial = dict[int, int]

PAIR_HEADER = "▶ [{number}번째 다항식 쌍]"
FIRST_LABEL = "정리된 첫 번째 다항식: "
SECOND_LABEL = "정리된 두 번째 다항식: "
SUM_LABEL = "두 다항식의 합: "
PRODUCT_LABEL = "두 다항식의 곱: "
OPEN_FAILED = "파일을 열 수 없습니다."


class PolynomialError(ValueError):
    """Raised when a polynomial cannot be parsed."""


def normalize(text: str) -> str:
    """Turn ``**`` into ``^`` and drop every space."""
    return text.replace("**", "^").replace(" ", "")


def _read_digits(text: str, pos: int) -> tuple[int | None, int]:
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    if pos == start:
        return None, pos
    return int(text[start:pos]), pos


def _drop_zeros(coefficients: Mapping[int, int]) -> Polynomial:
    return {degree: value for degree, value in coefficients.items() if value}


def parse_polynomial(text: str) -> Polynomial:
    """Parse a normalized polynomial into a ``{degree: coefficient}`` mapping.

    A term without its own sign keeps the sign of the previous term, and
    terms of degree above ``MAX_DEGREE`` are ignored.
    """
    coefficients: dict[int, int] = {}
    sign = 1
    pos = 0
    while pos < len(text):
        start = pos
        if text[pos] == "+":
            sign = 1
            pos += 1
        elif text[pos] == "-":
            sign = -1
            pos += 1

        value, pos = _read_digits(text, pos)
        coefficient = value if value is not None else 0

        if pos < len(text) and text[pos] == "x":
            pos += 1
            if value is None:
                coefficient = 1
            if pos < len(text) and text[pos] == "^":
                exponent, pos = _read_digits(text, pos + 1)
                degree = exponent if exponent is not None else 0
            else:
                degree = 1
        else:
            degree = 0

        if pos == start:
            raise PolynomialError(
                f"unexpected character {text[pos]!r} at position {pos} in {text!r}"
            )
        if degree <= MAX_DEGREE:
            coefficients[degree] = coefficients.get(degree, 0) + sign * coefficient
    return _drop_zeros(coefficients)


def format_polynomial(coefficients: Mapping[int, int]) -> str:
    """Render a polynomial from the highest degree down.

    Only degrees up to ``MAX_DEGREE`` are shown; a zero polynomial is ``"0"``.
    """
    parts: list[str] = []
    first = True
    for degree in sorted(coefficients, reverse=True):
        value = coefficients[degree]
        if value == 0 or degree > MAX_DEGREE or degree < 0:
            continue
        if not first and value > 0:
            parts.append(" + ")
        if value < 0:
            parts.append(" - ")
        if abs(value) != 1 or degree == 0:
            parts.append(str(abs(value)))
        if degree >= 1:
            parts.append("x")
            if degree > 1:
                parts.append(f"^{degree}")
        first = False
    return "".join(parts) if parts else "0"


def add_polynomials(a: Mapping[int, int], b: Mapping[int, int]) -> Polynomial:
    """Return the sum of two polynomials."""
    result = dict(a)
    for degree, value in b.items():
        result[degree] = result.get(degree, 0) + value
    return _drop_zeros(result)


def multiply_polynomials(a: Mapping[int, int], b: Mapping[int, int]) -> Polynomial:
    """Return the product of two polynomials."""
    result: dict[int, int] = {}
    for degree_a, value_a in a.items():
        for degree_b, value_b in b.items():
            degree = degree_a + degree_b
            result[degree] = result.get(degree, 0) + value_a * value_b
    return _drop_zeros(result)


def _strip_line_end(line: str) -> str:
    return line.split("\r", 1)[0].split("\n", 1)[0]


def iter_line_pairs(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield consecutive pairs of non-blank lines; a trailing odd line is dropped."""
    pending: str | None = None
    for raw in lines:
        line = _strip_line_end(raw)
        if not line.strip(_WHITESPACE):
            continue
        if pending is None:
            pending = line
        else:
            yield pending, line
            pending = None


def report_pairs(lines: Iterable[str]) -> Iterator[str]:
    """Yield the report lines for every pair of polynomials in ``lines``."""
    for number, (first_text, second_text) in enumerate(iter_line_pairs(lines), start=1):
        first = parse_polynomial(normalize(first_text))
        second = parse_polynomial(normalize(second_text))
        yield ""
        yield PAIR_HEADER.format(number=number)
        yield FIRST_LABEL + format_polynomial(first)
        yield SECOND_LABEL + format_polynomial(second)
        yield SUM_LABEL + format_polynomial(add_polynomials(first, second))
        yield PRODUCT_LABEL + format_polynomial(multiply_polynomials(first, second))


def main(argv: list[str] | None = None) -> int:
    """Print the sum and product of every pair of polynomials in a file."""
    parser = argparse.ArgumentParser(
        description="Normalize, add and multiply pairs of polynomials."
    )
    parser.add_argument("path", nargs="?", default="input.txt",
                        help="file with one polynomial per line")
    args = parser.parse_args(argv)

    try:
        handle = open(args.path, encoding="utf-8", errors="replace", newline="\n")
    except OSError:
        print(OPEN_FAILED)
        return 1
    with handle:
        try:
            for line in report_pairs(handle):
                print(line)
        except PolynomialError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())