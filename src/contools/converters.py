"""String-to-value converters used by ``read_valid``.

A registry maps a type to a function that parses text into an instance of
that type. The default registry comes with converters for the common
primitive types; applications register their own for anything else.

Example:
    >>> from contools.converters import get_converter, register_converter
    >>> get_converter(int)(" 42 ")
    42
    >>> register_converter(Point, Point.from_string)
"""

from __future__ import annotations

import datetime
import decimal
import re
import uuid
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from contools.exceptions import FormatError
from contools.logging import get_logger

LOG = get_logger(__name__)

T = TypeVar("T")
Converter = Callable[[str], Any]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    """Parse a signed decimal integer, ignoring surrounding whitespace.

    Raises:
        FormatError: If the text is not an integer literal.
    """
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        raise FormatError(f"'{text}' is not a valid integer", value=text)
    return int(stripped)


def parse_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError as exc:
        raise FormatError(f"'{text}' is not a valid number", value=text) from exc


def parse_bool(text: str) -> bool:
    """Parse "true" or "false" in any case."""
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise FormatError(f"'{text}' is not a valid boolean", value=text)


def parse_decimal(text: str) -> decimal.Decimal:
    try:
        return decimal.Decimal(text.strip())
    except decimal.InvalidOperation as exc:
        raise FormatError(f"'{text}' is not a valid decimal", value=text) from exc


def _from_iso(type_: Any, label: str) -> Converter:
    def convert(text: str) -> Any:
        try:
            return type_.fromisoformat(text.strip())
        except ValueError as exc:
            raise FormatError(f"'{text}' is not a valid ISO 8601 {label}", value=text) from exc

    return convert


def parse_uuid(text: str) -> uuid.UUID:
    try:
        return uuid.UUID(text.strip())
    except ValueError as exc:
        raise FormatError(f"'{text}' is not a valid UUID", value=text) from exc


def enum_converter(enum_type: type[Enum]) -> Converter:
    """Build a converter for an Enum subclass.

    Member names match case-insensitively; failing that, the raw text is
    tried as a member value.
    """
    by_name = {name.lower(): member for name, member in enum_type.__members__.items()}

    def convert(text: str) -> Enum:
        member = by_name.get(text.strip().lower())
        if member is not None:
            return member
        try:
            return enum_type(text)
        except ValueError as exc:
            raise FormatError(
                f"'{text}' is not a valid {enum_type.__name__}", value=text
            ) from exc

    return convert


class ConverterRegistry:
    """Maps result types to string converters."""

    def __init__(self, converters: dict[type, Converter] | None = None) -> None:
        self._converters: dict[type, Converter] = dict(converters or {})

    def __contains__(self, type_: object) -> bool:
        return type_ in self._converters

    def register(self, type_: type[T], converter: Callable[[str], T], *, replace: bool = False) -> None:
        """Register a converter for a type.

        Args:
            type_: Result type the converter produces.
            converter: Callable turning a line of text into a ``type_`` value.
                It signals bad input by raising any exception.
            replace: Overwrite an existing registration instead of failing.

        Raises:
            ValueError: If the type is already registered and replace is False.
        """
        if type_ in self._converters and not replace:
            raise ValueError(f"Converter for '{type_.__name__}' is already registered")
        self._converters[type_] = converter
        LOG.debug("converter_registered", type=type_.__name__, replace=replace)

    def unregister(self, type_: type) -> None:
        """Remove the converter for a type.

        Raises:
            KeyError: If the type has no converter.
        """
        del self._converters[type_]

    def get(self, type_: type[T]) -> Callable[[str], T]:
        """Resolve the converter for a type.

        Exact registrations win. Enum subclasses without one get a
        member-name converter.

        Raises:
            FormatError: If no converter is available for the type.
        """
        converter = self._converters.get(type_)
        if converter is not None:
            return converter
        if isinstance(type_, type) and issubclass(type_, Enum):
            return enum_converter(type_)
        name = getattr(type_, "__name__", repr(type_))
        raise FormatError(f"No converter available for '{name}'")

    def list_types(self) -> list[str]:
        """List registered type names, sorted."""
        return sorted(t.__name__ for t in self._converters)


def default_converters() -> dict[type, Converter]:
    """Converters for the common primitive types."""
    return {
        str: str,
        int: parse_int,
        float: parse_float,
        bool: parse_bool,
        decimal.Decimal: parse_decimal,
        uuid.UUID: parse_uuid,
        datetime.datetime: _from_iso(datetime.datetime, "datetime"),
        datetime.date: _from_iso(datetime.date, "date"),
        datetime.time: _from_iso(datetime.time, "time"),
    }


_default_registry = ConverterRegistry(default_converters())


def get_registry() -> ConverterRegistry:
    """Get the default registry used when none is passed explicitly."""
    return _default_registry


def register_converter(type_: type[T], converter: Callable[[str], T], *, replace: bool = False) -> None:
    """Register a converter on the default registry."""
    _default_registry.register(type_, converter, replace=replace)


def get_converter(type_: type[T]) -> Callable[[str], T]:
    """Resolve a converter from the default registry."""
    return _default_registry.get(type_)


def list_converters() -> list[str]:
    """List type names with a converter on the default registry."""
    return _default_registry.list_types()


__all__ = [
    "Converter",
    "ConverterRegistry",
    "enum_converter",
    "get_converter",
    "get_registry",
    "list_converters",
    "parse_bool",
    "parse_int",
    "register_converter",
]
