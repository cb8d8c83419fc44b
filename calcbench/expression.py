"""Infix arithmetic expressions: preprocessing, tokenizing, postfix conversion and evaluation."""

from __future__ import annotations

import argparse
import math
import re
import sys

_MAX_TOKEN_LEN = 64
_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"
_NUMBER_CHARS = frozenset("0123456789.eE-+")
_SINGLE_CHAR_TOKENS = "()+-*/^"
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DASHES = ("\u2013", "\u2014")
_E_VALUE = "2.7182818"

INVALID = "Invalid Expression"


class ExpressionError(ValueError):
    """Raised when an expression cannot be tokenized, converted or evaluated."""


def _at(text: str, pos: int) -> str:
    return text[pos] if 0 <= pos < len(text) else ""


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in _DIGITS


def _is_alnum(ch: str) -> bool:
    return ch != "" and ch.isascii() and ch.isalnum()


def _is_number(token: str) -> bool:
    return _NUMBER_RE.fullmatch(token) is not None


def is_invalid_line(line: str) -> bool:
    """True for lines holding braces or brackets, and for blank lines."""
    if any(ch in "{}[]" for ch in line):
        return True
    return line.strip(" \t\r\n") == ""


def preprocess(line: str) -> str:
    """Rewrite dashes, ``**``, the constant ``e``, float suffixes and ``-(``."""
    out: list[str] = []
    pos = 0
    while pos < len(line):
        ch = line[pos]
        nxt = _at(line, pos + 1)
        if ch in _DASHES:
            out.append("-")
            pos += 1
        elif ch == "*" and nxt == "*":
            out.append("^")
            pos += 2
        elif ch == "e" and (pos == 0 or not _is_alnum(line[pos - 1])) and not _is_alnum(nxt):
            out.append(_E_VALUE)
            pos += 1
        elif ch == "f":
            pos += 1
        elif ch == "-" and nxt == "(":
            out.append("-1*(")
            pos += 2
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


def _scan_number_run(line: str, pos: int, chars: list[str]) -> tuple[str, int]:
    while pos < len(line) and line[pos] in _NUMBER_CHARS:
        chars.append(line[pos])
        pos += 1
        if len(chars) >= _MAX_TOKEN_LEN - 1:
            break
    return "".join(chars), pos


def tokenize(line: str) -> list[str]:
    """Split a preprocessed line into number, operator and parenthesis tokens."""
    tokens: list[str] = []
    pos = 0
    while pos < len(line):
        while pos < len(line) and line[pos] in _WHITESPACE:
            pos += 1
        if pos >= len(line):
            break
        ch = line[pos]

        sign = _at(line, pos + 1)
        after_sign = _at(line, pos + 2)
        if ch == "(" and sign in ("-", "+") and (_is_digit(after_sign) or after_sign == "."):
            token, pos = _scan_number_run(line, pos + 2, [sign])
            tokens.append(token)
            if _at(line, pos) == ")":
                pos += 1
            continue

        if ch in ("+", "-") and (not tokens or tokens[-1] in _PRECEDENCE or tokens[-1] == "("):
            chars = [ch]
            pos += 1
            while _is_digit(_at(line, pos)) or _at(line, pos) == ".":
                chars.append(line[pos])
                pos += 1
            if _at(line, pos) in ("e", "E"):
                chars.append(line[pos])
                pos += 1
                if _at(line, pos) in ("-", "+"):
                    chars.append(line[pos])
                    pos += 1
                while _is_digit(_at(line, pos)):
                    chars.append(line[pos])
                    pos += 1
            tokens.append("".join(chars))
            continue

        if ch in _SINGLE_CHAR_TOKENS:
            tokens.append(ch)
            pos += 1
        elif _is_digit(ch) or ch == ".":
            token, pos = _scan_number_run(line, pos, [])
            tokens.append(token)
        else:
            raise ExpressionError(f"unexpected character {ch!r} at position {pos}")
    return tokens


def to_postfix(tokens: list[str]) -> list[str]:
    """Convert infix tokens to postfix order; all operators are left-associative."""
    output: list[str] = []
    stack: list[str] = []
    for token in tokens:
        if _is_number(token):
            output.append(token)
        elif token == "(":
            stack.append(token)
        elif token == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
        elif token in _PRECEDENCE:
            while (
                stack
                and stack[-1] in _PRECEDENCE
                and _PRECEDENCE[stack[-1]] >= _PRECEDENCE[token]
            ):
                output.append(stack.pop())
            stack.append(token)
        else:
            raise ExpressionError(f"unexpected token {token!r}")
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ExpressionError("unmatched '('")
        output.append(operator)
    return output


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


def evaluate_postfix(tokens: list[str]) -> float:
    """Evaluate postfix tokens; division by zero and malformed input raise."""
    stack: list[float] = []
    for token in tokens:
        if _is_number(token):
            stack.append(float(token))
        elif token in _PRECEDENCE:
            if len(stack) < 2:
                raise ExpressionError(f"operator {token!r} needs two operands")
            b = stack.pop()
            a = stack.pop()
            if token == "+":
                result = a + b
            elif token == "-":
                result = a - b
            elif token == "*":
                result = a * b
            elif token == "/":
                if b == 0:
                    raise ExpressionError("division by zero")
                result = a / b
            else:
                result = _power(a, b)
            stack.append(result)
        else:
            raise ExpressionError(f"unexpected token {token!r}")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]


def process_line(line: str) -> list[str]:
    """Return the report lines for one input line."""
    if is_invalid_line(line):
        return [INVALID]
    try:
        tokens = tokenize(preprocess(line))
        if not tokens:
            raise ExpressionError("empty expression")
        postfix = to_postfix(tokens)
        if not postfix:
            raise ExpressionError("empty expression")
    except ExpressionError:
        return [INVALID]

    report = ["Postfix: " + "".join(f"{token} " for token in postfix)]
    try:
        result = evaluate_postfix(postfix)
    except ExpressionError:
        report.append(f"Result: {INVALID}")
    else:
        report.append(f"Result: {result:.2f}")
    return report


def main(argv: list[str] | None = None) -> int:
    """Print the postfix form and value of every expression in a file."""
    parser = argparse.ArgumentParser(
        description="Convert infix expressions to postfix and evaluate them."
    )
    parser.add_argument("path", nargs="?", default="input.txt",
                        help="file with one expression per line")
    args = parser.parse_args(argv)

    try:
        handle = open(args.path, encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        print(f"{args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    with handle:
        for raw in handle:
            line = raw.split("\r", 1)[0].split("\n", 1)[0]
            for output in process_line(line):
                print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())