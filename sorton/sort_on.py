# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Sort sequences of records by one or more field paths with ActionScript ``Array.sortOn`` rules.

Options are bitmasks, one per field::

    sort_on(rows, ["team.name", "score"], [CASEINSENSITIVE, NUMERIC | DESCENDING])

The first field's options decide the call mode: ``UNIQUESORT`` aborts with
``0`` when any field has duplicate values, ``RETURNINDEXEDARRAY`` returns a
sorted copy instead of sorting in place.
"""

from __future__ import annotations

import logging
import math
from functools import cmp_to_key
from typing import Any, Callable

from .common import as_list, as_records, parse_field_path, parse_float, resolve_field, to_text

logger = logging.getLogger(__name__)

CASEINSENSITIVE = 1
DESCENDING = 2
UNIQUESORT = 4
RETURNINDEXEDARRAY = 8
NUMERIC = 16

FLAGS: dict[str, int] = {
    "CASEINSENSITIVE": CASEINSENSITIVE,
    "DESCENDING": DESCENDING,
    "UNIQUESORT": UNIQUESORT,
    "RETURNINDEXEDARRAY": RETURNINDEXEDARRAY,
    "NUMERIC": NUMERIC,
}


def flag_value(value: Any) -> int:
    """Coerce one option entry to an int bitmask."""
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Invalid sort option {value!r}; expected an int bitmask") from err


def align_options(fields: list[str], options: list[Any]) -> list[int]:
    """Return one bitmask per field, or all zeros when the counts differ."""
    if len(options) != len(fields):
        if options:
            logger.debug(
                "Discarding %d sort option(s): %d field(s) given", len(options), len(fields)
            )
        return [0] * len(fields)
    return [flag_value(opts) for opts in options]


def strict_key(value: Any) -> Any:
    """Hashable key that matches only values the legacy ``===`` check treats as equal.

    Scalars match by kind and value; containers and other objects only by identity.
    """
    if value is None:
        return ("null",)
    if isinstance(value, bool):
        return ("boolean", value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return value
        return ("number", value)
    if isinstance(value, str):
        return ("string", value)
    return ("object", id(value))


def project(value: Any, opts: int) -> Any:
    """Value used by the uniqueness check for one field."""
    if opts & NUMERIC:
        return parse_float(to_text(value))
    if opts & CASEINSENSITIVE:
        return to_text(value).lower()
    return strict_key(value)


def has_duplicates(values: list[Any]) -> bool:
    """True when two projected values are equal. NaN never matches anything."""
    seen: set[Any] = set()
    for value in values:
        if isinstance(value, float) and math.isnan(value):
            continue
        if value in seen:
            return True
        seen.add(value)
    return False


def compare_text(a: str, b: str) -> int:
    """Order strings by UTF-16 code units, as the legacy string comparison does."""
    if a == b:
        return 0
    units_a = a.encode("utf-16-be", "surrogatepass")
    units_b = b.encode("utf-16-be", "surrogatepass")
    return 1 if units_a > units_b else -1


def make_comparator(fields: list[str], options: list[int]) -> Callable[[Any, Any], int]:
    """Build a cmp-style function comparing two records field by field."""
    keys = [(field, parse_field_path(field), opts) for field, opts in zip(fields, options)]

    def compare(item_a: Any, item_b: Any) -> int:
        for field, segments, opts in keys:
            a = to_text(resolve_field(item_a, field, segments))
            b = to_text(resolve_field(item_b, field, segments))
            if opts & NUMERIC:
                diff = parse_float(a) - parse_float(b)
                # Unordered pairs stay put and skip the remaining fields.
                if math.isnan(diff):
                    return 0
                ret = (diff > 0) - (diff < 0)
            else:
                if opts & CASEINSENSITIVE:
                    a = a.lower()
                    b = b.lower()
                ret = compare_text(a, b)
            if ret == 0:
                continue
            return -ret if opts & DESCENDING else ret
        return 0

    return compare


def sort_on(sequence: Any, fields: Any = None, options: Any = None) -> list[Any] | int | None:
    """Sort records by field paths.

    Returns ``None`` after sorting in place, a new sorted list when the
    first field's options include ``RETURNINDEXEDARRAY``, or ``0`` when
    ``UNIQUESORT`` finds a duplicate (the sequence is left untouched).
    Raises :class:`~sorton.common.FieldNotFoundError` when a path does not
    resolve on a record.
    """
    records = as_records(sequence)
    fields = [str(field) for field in as_list(fields)]
    opts = align_options(fields, as_list(options))
    mode = opts[0] if opts else 0

    if mode & UNIQUESORT:
        for field, field_opts in zip(fields, opts):
            segments = parse_field_path(field)
            values = [project(resolve_field(record, field, segments), field_opts) for record in records]
            if has_duplicates(values):
                logger.debug("Unique sort aborted: duplicate values for field '%s'", field)
                return 0

    key = cmp_to_key(make_comparator(fields, opts))

    if mode & RETURNINDEXEDARRAY:
        return sorted(records, key=key)
    if isinstance(records, list):
        records.sort(key=key)
    else:
        records[:] = sorted(records, key=key)
    return None


for _name, _value in FLAGS.items():
    setattr(sort_on, _name, _value)
del _name, _value
