# calcbench

Three small command-line tools and the library functions behind them. The
tools need nothing beyond the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Polynomials (`calcbench.polynomial`)

`calcbench-poly` reads a text file of polynomials in the variable `x`. It
defaults to `input.txt`. Non-blank lines are taken two at a time, and a
leftover odd line is ignored. For each pair it prints both polynomials in
simplified form, then their sum and their product. The report labels are in
Korean.

    calcbench-poly input.txt

Example input:

    3x^2 + 2x - 5
    x - 1

`**` is accepted as `^`, and spaces are ignored (`normalize`). A term with no
sign of its own keeps the sign of the term before it.

From Python:

    from calcbench.polynomial import (
        normalize, parse_polynomial, add_polynomials,
        multiply_polynomials, format_polynomial,
    )

    p = parse_polynomial(normalize("x + 1"))
    print(format_polynomial(multiply_polynomials(p, p)))   # x^2 + 2x + 1

Polynomials are plain `{degree: coefficient}` dicts with integer coefficients.
Zero terms are left out.

- `parse_polynomial` drops terms of degree above 100.
- `format_polynomial` shows only degrees up to 100, and gives `"0"` for the
  zero polynomial.
- A character that cannot start a term raises `PolynomialError`. The command
  reports it on standard error and exits with status 1.

`iter_line_pairs(lines)` yields the pairs of non-blank lines, and
`report_pairs(lines)` yields the report lines that the command prints.

## Expressions (`calcbench.expression`)

`calcbench-expr` reads a file of infix arithmetic expressions, one per line. It
defaults to `input.txt`. For each line it prints the postfix form and then the
value rounded to two decimal places. Where a line cannot be read, it prints
`Invalid Expression`.

    calcbench-expr input.txt

It supports the following:

- the operators `+ - * / ^`, with `**` as `^`;
- parentheses;
- unary signs, including a signed number in parentheses such as `(-1.5)`;
- scientific notation;
- the constant `e`, as 2.7182818.

Before tokenizing, `preprocess` does the following:

- it turns en and em dashes into `-`;
- it drops every `f`, so float suffixes such as `1.5f` work;
- it rewrites `-(` as `-1*(`.

Lines that contain `{ } [ ]`, and blank lines, are invalid.

From Python:

    from calcbench.expression import process_line, tokenize, preprocess, to_postfix, evaluate_postfix

    for out in process_line("2 ** 3 + (-1.5)"):
        print(out)
    # Postfix: 2 3 ^ -1.5 +
    # Result: 6.50

`tokenize`, `to_postfix` and `evaluate_postfix` raise `ExpressionError` in
these cases:

- an unexpected character;
- unbalanced parentheses;
- a missing operand;
- division by zero.

`process_line` turns these errors into `Invalid Expression` output lines.

## Social graph (`calcbench.social_graph`)

`calcbench-graph` loads a directed graph from a file. It defaults to `kb.txt`.

- The first number in the file is the count of people, numbered from 1.
- Each following non-blank line gives a person and then the people that person
  links to.

The tool reports four things:

1. the distance from `--src` to `--dest` (defaults 67 and 26), or `-1` if
   `--dest` cannot be reached;
2. the number of components, counted as the searches needed, in vertex order,
   until every vertex has been visited;
3. the lowest-numbered person who reaches the most people within `--steps`
   steps (default 3);
4. a greedy selection of people who together reach everyone within `--steps`
   steps.

Run it like this:

    calcbench-graph kb.txt --src 67 --dest 26 --steps 3

From Python:

    from calcbench.social_graph import Graph

    graph = Graph.parse("3\n1 2\n2 1 3\n3 2\n")
    print(graph.distance(1, 3))        # 2
    print(graph.count_components())    # 1
    print(graph.greedy_cover(3))       # [1]

`Graph` provides these members:

- `add_edge`
- `neighbours`
- `from_file`
- `format`
- `distances`
- `count_reachable`
- `best_reach`

A vertex outside `1..num_vertices` raises `ValueError`.

## Limitations

- Polynomials have a single variable `x` and integer coefficients only.
  Division is not supported.
- Expression operators are all left-associative, so `2^3^2` evaluates as
  `(2^3)^2`. Numbers are the only operands: there are no variables or
  functions.
- The graph analysis treats edges as one-way exactly as they are listed. The
  greedy cover is not guaranteed to be the smallest possible one.