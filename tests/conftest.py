"""Shared pytest fixtures for the EBPL test suite."""

import logging

import pytest

from ebpl.config import CompilerConfig


@pytest.fixture(autouse=True)
def reset_ebpl_logger():
    """Drop handlers the CLI attaches so captured streams are not reused."""
    yield
    logger = logging.getLogger("ebpl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def compiler_config():
    return CompilerConfig()


@pytest.fixture
def basic_math_source():
    return (
        "create variable a with value 10\n"
        "create variable b with value 5\n"
        "print a + b\n"
    )


@pytest.fixture
def source_file(tmp_path, basic_math_source):
    """Write the basic math program to a temporary .ebpl file."""
    path = tmp_path / "basic_math.ebpl"
    path.write_text(basic_math_source, encoding="utf-8")
    return path
