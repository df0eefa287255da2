"""End-to-end tests for compile_source."""

import pytest

from ebpl import compile_source
from ebpl.config import CompilerConfig
from ebpl.examples import EXAMPLES, get_example
from ebpl.lang import Token, TokenType
from ebpl.pipeline import format_token


def test_hello_world():
    result = compile_source('print "Hello, EBPL World!"')

    assert result.success
    assert result.output_trace == "Hello, EBPL World!"
    assert result.simulation_error == ""


@pytest.mark.parametrize(
    "number",
    ["10", "0", "42", "3.5", "-7", "0.0000001", "0.000015", "100000000000000000000000"],
)
def test_declared_number_prints_its_decimal_text(number):
    result = compile_source(f"create variable x with value {number}\nprint x")

    assert result.output_trace == number


def test_tiny_number_is_emitted_without_exponent():
    result = compile_source("print 0.0000001")

    assert result.emitted_text.endswith("print(0.0000001)")
    assert result.output_trace == "0.0000001"


def test_sum_of_two_variables(basic_math_source):
    result = compile_source(basic_math_source)

    assert result.success
    assert result.output_trace == "15"


def test_redeclaration_prints_latest_value():
    source = (
        "create variable x with value 1\n"
        "create variable x with value 2\n"
        "print x\n"
    )

    assert compile_source(source).output_trace == "2"


def test_division_by_zero_previews_as_zero():
    source = (
        "create variable a with value 10\n"
        "create variable b with value 0\n"
        "create variable c with value a / b\n"
        "print c\n"
    )

    assert compile_source(source).output_trace == "0"


def test_emitted_text():
    result = compile_source("create variable a with value 1 + 2 * 3\nprint a")

    assert result.emitted_text == (
        "#!/usr/bin/env python3\n"
        "# Generated from EBPL\n"
        "\n"
        "a = ((1 + 2) * 3)\n"
        "print(a)"
    )


def test_multi_operator_preview_diverges_from_emitted_code():
    result = compile_source("create variable a with value 1 + 2 * 3\nprint a")

    # only "1 + 2" is combined by the preview
    assert result.output_trace == "1"


def test_tokens_display_format():
    result = compile_source("print x")

    assert result.tokens_display == [
        "PRINT" + " " * 15 + " -> 'print' (line 1)",
        "IDENTIFIER" + " " * 10 + " -> 'x' (line 1)",
    ]


def test_tokens_display_hides_newline_and_end():
    result = compile_source("print 1\nprint 2\n")

    assert all("NEWLINE" not in line and "END" not in line for line in result.tokens_display)
    assert len(result.tokens_display) == 4


def test_format_token_pad_width():
    token = Token(TokenType.NUMBER, "5", 2, 1)

    assert format_token(token, pad_width=8) == "NUMBER   -> '5' (line 2)"


def test_syntax_error_result():
    result = compile_source("create variable x\nprint x")

    assert not result.success
    assert result.error_message == "Expected WITH, got NEWLINE at line 1"
    assert result.errors == [result.error_message]
    assert result.emitted_text == ""
    assert result.to_dict() == {
        "success": False,
        "error": result.error_message,
        "errors": [result.error_message],
    }


def test_success_to_dict_shape():
    result = compile_source('print "hi"')

    assert result.to_dict() == {
        "success": True,
        "tokens": result.tokens_display,
        "generatedCode": result.emitted_text,
        "executionOutput": "hi",
        "executionError": "",
    }


def test_unknown_words_compile_to_empty_program():
    result = compile_source("hello world")

    assert result.success
    assert result.tokens_display == []
    assert result.output_trace == ""


def test_simulation_can_be_disabled():
    result = compile_source('print "hi"', CompilerConfig(simulate=False))

    assert result.success
    assert result.output_trace == ""
    assert 'print("hi")' in result.emitted_text


def test_compile_is_deterministic(basic_math_source):
    first = compile_source(basic_math_source)
    second = compile_source(basic_math_source)

    assert first == second


@pytest.mark.parametrize("example", EXAMPLES, ids=lambda example: example.slug)
def test_examples_compile(example):
    assert compile_source(example.source).success


def test_calculator_example_output():
    result = compile_source(get_example("calculator").source)

    assert result.output_trace.splitlines() == ["Calculator Results:", "18", "12", "45", "5"]


def test_basic_math_example_output():
    result = compile_source(get_example("Basic Math").source)

    assert result.output_trace.splitlines() == ["15", "5", "50", "2"]


def test_unknown_example():
    with pytest.raises(KeyError):
        get_example("nope")
