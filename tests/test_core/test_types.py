"""Tests for the type registry."""

import dataclasses

import pytest

from exprlang.core.types import BOOL, INT, PrimitiveType, bool_type, int_type, type_equals


def test_canonical_singletons():
    assert bool_type() is BOOL
    assert int_type() is INT
    assert bool_type() is bool_type()


def test_str():
    assert str(BOOL) == "Bool"
    assert str(INT) == "Int"


def test_type_equals_by_tag():
    assert type_equals(BOOL, bool_type())
    assert type_equals(INT, PrimitiveType("Int"))
    assert not type_equals(BOOL, INT)


def test_types_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        BOOL.name = "Int"  # type: ignore[misc]
