"""Test configuration and shared fixtures."""

import sys

import pytest

from exprlang.core.ast import BoolLit, IntLit


@pytest.fixture
def t() -> BoolLit:
    return BoolLit(True)


@pytest.fixture
def f() -> BoolLit:
    return BoolLit(False)


@pytest.fixture
def two() -> IntLit:
    return IntLit(2)


@pytest.fixture
def three() -> IntLit:
    return IntLit(3)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user settings and history out of the tests."""
    for name in ("EXPRLANG_OUTPUT_FORMAT", "EXPRLANG_SHOW_TYPE", "EXPRLANG_HOME", "EXPRLANG_LOG_FILTER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("EXPRLANG_HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def digit_limit():
    """Pin CPython's int/str conversion limit to its default for the test."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
