import pytest

from calcbench.expression import (
    ExpressionError,
    evaluate_postfix,
    is_invalid_line,
    main,
    preprocess,
    process_line,
    to_postfix,
    tokenize,
)


@pytest.mark.parametrize("line", ["", "   \t", "{1 + 2}", "[3]", "1 + }"])
def test_invalid_lines(line):
    assert is_invalid_line(line) is True


def test_valid_line():
    assert is_invalid_line("1 + 2") is False


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2**3", "2^3"),
        ("e", "2.7182818"),
        ("2 * e", "2 * 2.7182818"),
        ("1e5", "1e5"),
        ("3.5f", "3.5"),
        ("-(1)", "-1*(1)"),
        ("4 \u2013 2", "4 - 2"),
        ("4 \u2014 2", "4 - 2"),
    ],
)
def test_preprocess(raw, expected):
    assert preprocess(raw) == expected


def test_tokenize_spaced_operators():
    assert tokenize("3 + 4 * 2") == ["3", "+", "4", "*", "2"]


def test_tokenize_parenthesised_negative_number():
    assert tokenize("(-1.5) * 2") == ["-1.5", "*", "2"]


def test_tokenize_unary_number_with_exponent():
    assert tokenize("-3.5e0 * 2") == ["-3.5e0", "*", "2"]


def test_tokenize_unary_after_operator():
    assert tokenize("2 * -3") == ["2", "*", "-3"]


def test_tokenize_unspaced_run_is_one_token():
    assert tokenize("3-2") == ["3-2"]


def test_tokenize_long_run_is_split():
    tokens = tokenize("1" * 100)
    assert "".join(tokens) == "1" * 100
    assert all(len(token) <= 63 for token in tokens)


def test_tokenize_rejects_letters():
    with pytest.raises(ExpressionError):
        tokenize("3 + a")


def test_to_postfix_precedence():
    assert to_postfix(["3", "+", "4", "*", "2"]) == ["3", "4", "2", "*", "+"]


def test_to_postfix_power_is_left_associative():
    assert to_postfix(["2", "^", "3", "^", "2"]) == ["2", "3", "^", "2", "^"]


def test_to_postfix_parentheses():
    assert to_postfix(["(", "3", "+", "4", ")", "*", "2"]) == ["3", "4", "+", "2", "*"]


@pytest.mark.parametrize(
    "tokens",
    [["(", "3"], ["3", ")"], ["3-2"], ["3", "+", "x"]],
)
def test_to_postfix_errors(tokens):
    with pytest.raises(ExpressionError):
        to_postfix(tokens)


def test_evaluate_postfix_addition():
    assert evaluate_postfix(["3", "4", "+"]) == 7.0


def test_evaluate_postfix_constant_e():
    value = evaluate_postfix(to_postfix(tokenize(preprocess("e"))))
    assert value == pytest.approx(2.7182818)


def test_evaluate_postfix_matches_subtraction_order():
    assert evaluate_postfix(["2", "5", "-"]) == -3.0
    assert evaluate_postfix(["5", "2", "-"]) == 3.0


def test_evaluate_postfix_negative_base_fractional_power_is_nan():
    value = evaluate_postfix(["-8", "0.5", "^"])
    assert repr(value) == "nan"


@pytest.mark.parametrize(
    "tokens",
    [["1", "0", "/"], ["1", "+"], ["1", "2"], []],
)
def test_evaluate_postfix_errors(tokens):
    with pytest.raises(ExpressionError):
        evaluate_postfix(tokens)


def test_process_line_success():
    assert process_line("3 + 4 * 2") == ["Postfix: 3 4 2 * + ", "Result: 11.00"]


def test_process_line_division_by_zero():
    assert process_line("1 / 0") == ["Postfix: 1 0 / ", "Result: Invalid Expression"]


@pytest.mark.parametrize("line", ["{1}", "", "3 + a", "(3 + 4", "()"])
def test_process_line_invalid(line):
    assert process_line(line) == ["Invalid Expression"]


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("3 + 4 * 2\r\n[1]\n1 / 0\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Postfix: 3 4 2 * + ",
        "Result: 11.00",
        "Invalid Expression",
        "Postfix: 1 0 / ",
        "Result: Invalid Expression",
    ]


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err