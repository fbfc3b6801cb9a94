"""Collision-free destination naming."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from orderly.classification import split_name
from orderly.system.filesystem import path_exists

LOGGER = logging.getLogger(__name__)

MAX_SUFFIX = 999


def resolve_unique_destination(
    desired: Path,
    exists: Callable[[Path], bool] = path_exists,
    *,
    limit: int = MAX_SUFFIX,
) -> Path:
    """Return a destination path that does not collide with an existing entry.

    Candidates take the form ``"<base> (<n>)<ext>"`` for ``n`` counting up from 1.
    When every candidate up to ``limit`` is taken the desired path is returned
    unchanged, so the caller's move attempt fails and is reported. The check is
    not atomic; a concurrent writer can still claim the returned path.

    Args:
        desired: Preferred destination path.
        exists: Predicate reporting whether a path is occupied.
        limit: Highest numeric suffix to try.

    Returns:
        Path: First free candidate, or ``desired`` when none is free.
    """

    if not exists(desired):
        return desired

    base, extension = split_name(desired.name)
    for counter in range(1, limit + 1):
        candidate = desired.with_name(f"{base} ({counter}){extension}")
        if not exists(candidate):
            return candidate

    LOGGER.debug("No free name found for %s after %d attempts.", desired, limit)
    return desired


__all__ = ["MAX_SUFFIX", "resolve_unique_destination"]
