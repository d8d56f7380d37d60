"""Tests for Partime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_partime() -> None:
    """Import partime package succeeds."""
    import partime

    assert hasattr(partime, "__version__")
    assert partime.__version__ == "0.1.0"


def test_import_submodules() -> None:
    """Every subpackage exposes __all__."""
    from partime import _internal, arithmetic, convert, core, units
    from partime import format  # noqa: A004

    for module in (_internal, arithmetic, convert, core, format, units):
        assert hasattr(module, "__all__")


def test_import_errors() -> None:
    """Import partime.errors succeeds with all exception classes."""
    from partime.errors import (
        IncomparablePrecision,
        InvalidField,
        MalformedText,
        OutOfRange,
        PartimeError,
    )

    assert issubclass(MalformedText, PartimeError)
    assert issubclass(InvalidField, PartimeError)
    assert issubclass(OutOfRange, PartimeError)
    assert issubclass(IncomparablePrecision, PartimeError)
    assert issubclass(PartimeError, Exception)


def test_import_constants() -> None:
    """Import partime._internal.constants succeeds."""
    from partime._internal.constants import (
        DAYS_IN_MONTH,
        MAX_OFFSET_MINUTES,
        MAX_YEAR,
        MIN_YEAR,
        NANOS_PER_DAY,
    )

    assert NANOS_PER_DAY == 86_400_000_000_000
    assert MIN_YEAR == 1
    assert MAX_YEAR == 9999
    assert MAX_OFFSET_MINUTES == 1080
    assert len(DAYS_IN_MONTH) == 13


def test_public_names_resolve() -> None:
    """Everything in partime.__all__ is an attribute of the package."""
    import partime

    for name in partime.__all__:
        assert hasattr(partime, name), name
