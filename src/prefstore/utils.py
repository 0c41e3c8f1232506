"""Utility functions for prefstore."""

import copy
import dataclasses
import typing
from collections.abc import Mapping
from typing import Any

from .exceptions import DecodingError
from .exceptions import EncodingError

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def to_data(record: Any) -> dict[str, Any]:
    """Convert a settings record into plain data.

    Args:
        record: Mapping or dataclass instance

    Returns:
        New plain dictionary (the record is not modified)

    Raises:
        EncodingError: If the record is neither a mapping nor a dataclass instance

    Examples:
        >>> @dataclasses.dataclass
        ... class Window:
        ...     width: int = 800
        >>> to_data(Window())
        {'width': 800}

        >>> to_data({"theme": "dark"})
        {'theme': 'dark'}
    """
    if isinstance(record, Mapping):
        return dict(record)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        try:
            return dataclasses.asdict(record)
        except (TypeError, copy.Error) as e:
            raise EncodingError(f"Cannot store settings of type {type(record).__name__}: {e}") from e
    raise EncodingError(f"Cannot store settings of type {type(record).__name__}; use a mapping or a dataclass")


def from_data(data: Any, record_type: type = dict) -> Any:
    """Build a settings record of the requested type from plain data.

    Nested dataclass fields are built recursively. String values are coerced
    into int, float and bool fields, since some formats (INI) only store text.

    Args:
        data: Decoded plain data
        record_type: dict (or another mapping type) or a dataclass type

    Returns:
        Instance of record_type

    Raises:
        DecodingError: If data does not match the shape of record_type
    """
    if not isinstance(data, Mapping):
        raise DecodingError(f"Expected a mapping of settings, got {type(data).__name__}")

    if dataclasses.is_dataclass(record_type):
        return _build_dataclass(data, record_type)

    try:
        return record_type(data)
    except (TypeError, ValueError) as e:
        raise DecodingError(f"Cannot build {record_type.__name__} from settings: {e}") from e


def _build_dataclass(data: Mapping[str, Any], cls: type) -> Any:
    try:
        hints = typing.get_type_hints(cls)
    except NameError as e:
        raise DecodingError(f"Cannot resolve field types of {cls.__name__}: {e}") from e

    # init=False fields are saved but rebuilt by the dataclass itself on load
    fields = {f.name: f for f in dataclasses.fields(cls)}
    derived = {name for name, f in fields.items() if not f.init}

    unexpected = set(data) - set(fields)
    if unexpected:
        raise DecodingError(f"Unexpected settings for {cls.__name__}: {', '.join(sorted(map(str, unexpected)))}")

    kwargs = {}
    for name, value in data.items():
        if name in derived:
            continue
        kwargs[name] = _coerce(value, hints.get(name, Any), f"{cls.__name__}.{name}")

    try:
        return cls(**kwargs)
    except TypeError as e:
        raise DecodingError(f"Settings do not match {cls.__name__}: {e}") from e


def _coerce(value: Any, hint: Any, where: str) -> Any:
    # Optional[X] and X | None
    args = typing.get_args(hint)
    if value is not None and type(None) in args:
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1:
            hint = non_none[0]

    if dataclasses.is_dataclass(hint) and isinstance(hint, type):
        if not isinstance(value, Mapping):
            raise DecodingError(f"Expected a mapping for {where}, got {type(value).__name__}")
        return _build_dataclass(value, hint)

    if not isinstance(value, str):
        return value

    try:
        if hint is bool:
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
            raise ValueError(f"not a boolean: {value!r}")
        if hint is int:
            return int(value)
        if hint is float:
            return float(value)
    except ValueError as e:
        raise DecodingError(f"Invalid value for {where}: {e}") from e

    return value
