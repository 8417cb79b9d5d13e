"""Utility helpers shared by the configuration loader and store."""

from __future__ import annotations

import collections.abc as cabc
import types
import typing as typ

from .models import Section


def _freeze(value: typ.Any) -> typ.Any:  # noqa: ANN401 - config values are heterogeneous
    """Return a read-only copy of a parsed TOML value."""
    match value:
        case cabc.Mapping():
            return types.MappingProxyType(
                {str(key): _freeze(item) for key, item in value.items()}
            )
        case list() | tuple():
            return tuple(_freeze(item) for item in value)
        case _:
            return value


def _freeze_section(payload: cabc.Mapping[str, typ.Any]) -> Section:
    """Freeze a single configuration section."""
    return typ.cast("Section", _freeze(payload))


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_tuple(value: object | None, *, unique: bool = False) -> tuple[str, ...]:
    """Normalize a string or list of values into a tuple of non-empty strings."""
    match value:
        case str():
            candidates: list[object] = [value]
        case list() | tuple():
            candidates = list(value)
        case _:
            return ()
    result: list[str] = []
    for candidate in candidates:
        text = _optional_str(candidate)
        if text is None or (unique and text in result):
            continue
        result.append(text)
    return tuple(result)


__all__ = ["_freeze", "_freeze_section", "_optional_str", "_string_tuple"]
