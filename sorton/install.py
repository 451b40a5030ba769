# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Opt-in registration of ``sort_on`` and its flag constants on a list type.

Nothing here runs on import. Builtin ``list`` cannot take new attributes,
so the default target is :class:`SortOnList`; any other mutable list
subclass works too.
"""

from __future__ import annotations

import logging
from typing import Any

from .sort_on import FLAGS, sort_on

logger = logging.getLogger(__name__)


class SortOnList(list):
    """List subclass that gains ``sort_on`` once :func:`install` is called."""


def _sort_on_method(self: list, fields: Any = None, options: Any = None) -> list[Any] | int | None:
    return sort_on(self, fields, options)


_sort_on_method.__name__ = "sort_on"
_sort_on_method.__doc__ = sort_on.__doc__


def install(target: type = SortOnList) -> type:
    """Attach the flag constants and a ``sort_on`` method to ``target``."""
    for name, value in FLAGS.items():
        setattr(target, name, value)
    setattr(target, "sort_on", _sort_on_method)
    logger.debug("Installed sort_on on %s", target.__name__)
    return target


def uninstall(target: type = SortOnList) -> type:
    """Remove what :func:`install` added to ``target``."""
    for name in (*FLAGS, "sort_on"):
        if name in vars(target):
            delattr(target, name)
    return target
