# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Shared helpers for sorton: input normalization, field paths, legacy text and number coercion."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Iterable, Mapping, MutableSequence, Sequence, Sized
from typing import Any

PATH_SEGMENT_RE = re.compile(r"[^.]+")
FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


class FieldNotFoundError(LookupError):
    """Raised when a field path cannot be resolved on a record."""

    def __init__(self, path: str, segment: str, record: Any = None) -> None:
        self.path = path
        self.segment = segment
        self.record = record
        super().__init__(f"Field '{path}' not found: no value for segment '{segment}'")


def as_list(value: Any) -> list[Any]:
    """Normalize a single value or a sequence of values into a list.

    Text and mappings count as single values. A list is returned as-is,
    other sized iterables are copied, ``None`` becomes an empty list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, (str, bytes, Mapping)):
        return [value]
    if isinstance(value, Sized) and isinstance(value, Iterable):
        return list(value)
    return [value]


def as_records(value: Any) -> MutableSequence[Any]:
    """Like :func:`as_list` but keep any mutable sequence so it can be sorted in place."""
    if isinstance(value, MutableSequence) and not isinstance(value, (str, bytes)):
        return value
    return as_list(value)


def parse_field_path(path: str) -> list[str]:
    """Split a dot path into segments, ignoring empty ones."""
    segments = PATH_SEGMENT_RE.findall(path or "")
    if not segments:
        raise ValueError(f"Invalid field path: {path!r}")
    return segments


def lookup(value: Any, segment: str) -> Any:
    """Look up one path segment; raise KeyError when it is absent."""
    if isinstance(value, Mapping):
        return value[segment]
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if not segment.isdigit():
            raise KeyError(segment)
        try:
            return value[int(segment)]
        except IndexError as err:
            raise KeyError(segment) from err
    if value is None:
        raise KeyError(segment)
    try:
        return getattr(value, segment)
    except AttributeError as err:
        raise KeyError(segment) from err


def resolve_field(record: Any, path: str, segments: list[str] | None = None) -> Any:
    """Resolve a dot path on a record by successive lookups."""
    if segments is None:
        segments = parse_field_path(path)
    value = record
    for segment in segments:
        try:
            value = lookup(value, segment)
        except KeyError:
            raise FieldNotFoundError(path, segment, record) from None
    return value


def format_number(value: float) -> str:
    """Render a float with the shortest round-trip digits in ECMAScript Number layout."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    mantissa, _, exponent = repr(abs(value)).partition("e")
    whole, _, fraction = mantissa.partition(".")
    digits = whole + fraction
    # value == 0.digits * 10**point
    point = len(whole) + int(exponent or 0)
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    count = len(digits)

    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    power = point - 1
    head = digits[0] if count == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{head}e{'+' if power >= 0 else '-'}{abs(power)}"


def to_text(value: Any) -> str:
    """Stringify a field value the way the legacy sort compares it."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, sort_keys=True, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def parse_float(text: str) -> float:
    """Parse the leading numeric prefix of text; NaN when there is none."""
    match = FLOAT_PREFIX_RE.match(text.lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))
