"""Tests for the textual execution simulator."""

from ebpl.runtime import evaluate_expression, render_value, simulate


def test_assignment_and_print():
    result = simulate("x = 10\nprint(x)")

    assert result.ok
    assert result.output == "10"
    assert result.variables == {"x": 10.0}


def test_header_and_blank_lines_are_ignored():
    code = "#!/usr/bin/env python3\n# Generated from EBPL\n\nprint(\"hi\")\n\n"

    assert simulate(code).output_lines == ["hi"]


def test_single_addition():
    result = simulate("a = 10\nb = 5\nc = (a + b)\nprint(c)")

    assert result.output == "15"


def test_print_expression_evaluates_one_operator():
    assert simulate("a = 10\nb = 5\nprint((a + b))").output == "15"
    assert simulate("a = 10\nb = 5\nprint((a / b))").output == "2"


def test_division_by_zero_variable_yields_zero():
    assert simulate("a = 10\nb = 0\nc = (a / b)\nprint(c)").output == "0"


def test_division_by_zero_literal_yields_zero():
    assert simulate("c = (10 / 0)\nprint(c)").output == "0"


def test_missing_operands_use_operator_defaults():
    variables = {}

    assert evaluate_expression("(y * 3)", variables) == 3.0
    assert evaluate_expression("(y / 2)", variables) == 0.0
    assert evaluate_expression("(10 / y)", variables) == 10.0
    assert evaluate_expression("(y - 4)", variables) == -4.0


def test_only_first_operator_is_resolved():
    code = "a = 2\nb = 3\nc = 4\nd = ((a + b) * c)\nprint(d)"

    # "+" wins, and "b * c" is neither a number nor a variable
    assert simulate(code).output == "2"


def test_negative_literal():
    assert simulate("t = -5\nprint(t)").output == "-5"


def test_string_values():
    result = simulate('name = "Alice"\nprint(name)\nprint("Bob")')

    assert result.output_lines == ["Alice", "Bob"]


def test_string_concatenation_with_plus():
    code = 'a = "Hello"\nb = "World"\nc = (a + b)\nprint(c)'

    assert simulate(code).output == "HelloWorld"


def test_non_numeric_string_in_arithmetic_is_nan():
    assert simulate('a = "x"\nb = (a * 2)\nprint(b)').output == "NaN"


def test_unknown_print_content_is_printed_raw():
    assert simulate("print(mystery)").output == "mystery"


def test_unquoted_raw_assignment_is_kept_as_text():
    result = simulate("v = something\nprint(v)")

    assert result.output == "something"


def test_redeclaration_overwrites():
    result = simulate("x = 1\nprint(x)\nx = 2\nprint(x)")

    assert result.output_lines == ["1", "2"]
    assert result.variables["x"] == 2.0


def test_decimal_results():
    assert simulate("x = (7 / 2)\nprint(x)").output == "3.5"


def test_failure_is_reported_not_raised():
    result = simulate("= 5\nprint(1)")

    assert not result.ok
    assert result.output == ""
    assert result.error == "Simulation error: Assignment without a target name (line 1)"


def test_render_value():
    assert render_value(15.0) == "15"
    assert render_value("text") == "text"


def test_each_run_starts_with_fresh_environment():
    simulate("x = 1")

    assert simulate("print(x)").output == "x"
