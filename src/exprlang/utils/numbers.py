"""Integer text conversions that respect the interpreter's digit limit."""


def int_text(value: int) -> str:
    """Decimal text of ``value``, or hex when decimal would exceed the limit.

    CPython refuses decimal conversion of very large integers; hex has no
    such limit and reads back as the same literal.
    """
    try:
        return str(value)
    except ValueError:
        return format(value, "#x")
