"""Type representations for the expression language."""

from __future__ import annotations

from dataclasses import dataclass


class Type:
    """Base class for types."""


@dataclass(frozen=True)
class PrimitiveType(Type):
    """Primitive type: Bool or Int.

    The set of primitive types is closed. Both instances are created once at
    import time and compared by their tag name, never by identity of the
    Python object.
    """

    name: str

    def __str__(self) -> str:
        return self.name


BOOL = PrimitiveType("Bool")
INT = PrimitiveType("Int")


def bool_type() -> PrimitiveType:
    """Return the canonical Bool type."""
    return BOOL


def int_type() -> PrimitiveType:
    """Return the canonical Int type."""
    return INT


def type_equals(a: Type, b: Type) -> bool:
    """Two types are equal iff they carry the same tag."""
    match a, b:
        case PrimitiveType(left), PrimitiveType(right):
            return left == right
        case _:
            return False
