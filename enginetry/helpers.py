"""Small shared helpers: size units, element swapping and array printing."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

_UNIT = 1024


def kilobytes(value: int) -> int:
    """Return *value* kilobytes expressed in bytes."""
    return value * _UNIT


def megabytes(value: int) -> int:
    """Return *value* megabytes expressed in bytes."""
    return kilobytes(value) * _UNIT


def gigabytes(value: int) -> int:
    """Return *value* gigabytes expressed in bytes."""
    return megabytes(value) * _UNIT


def terabytes(value: int) -> int:
    """Return *value* terabytes expressed in bytes."""
    return gigabytes(value) * _UNIT


def swap(items: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange the elements at positions *i* and *j* in place."""
    items[i], items[j] = items[j], items[i]


def _format_value(value: Any) -> str:
    """Render a value the way a stream would: floats without a trailing '.0'."""
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def print_array(items: Sequence[Any], start: int, end: int, label: str) -> None:
    """Print ``label: [ ... ]`` for the elements from *start* to *end* inclusive."""
    body = "".join(f"{_format_value(item)} " for item in items[start:end + 1])
    print(f"{label}: [ {body}]")