# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Sort sequences of records by field paths with ActionScript ``Array.sortOn`` semantics."""

from .common import FieldNotFoundError
from .install import SortOnList, install, uninstall
from .sort_on import (
    CASEINSENSITIVE,
    DESCENDING,
    NUMERIC,
    RETURNINDEXEDARRAY,
    UNIQUESORT,
    sort_on,
)

# ActionScript spelling.
sortOn = sort_on

__all__ = [
    "CASEINSENSITIVE",
    "DESCENDING",
    "NUMERIC",
    "RETURNINDEXEDARRAY",
    "UNIQUESORT",
    "FieldNotFoundError",
    "SortOnList",
    "install",
    "sortOn",
    "sort_on",
    "uninstall",
]
