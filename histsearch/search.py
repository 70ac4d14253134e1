"""Post-filtering of history search results."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .listing import HistoryEntry


def filter_entries(
    entries: Iterable[HistoryEntry],
    exit: int | None = None,
    exclude_exit: int | None = None,
    exclude_cwd: str | None = None,
    cwd: str | None = None,
) -> list[HistoryEntry]:
    """Keep entries matching the exit code and directory constraints.

    A ``cwd`` of ``"."`` means the current working directory.
    """
    if cwd == ".":
        cwd = os.getcwd()

    def keep(entry: HistoryEntry) -> bool:
        if exit is not None and entry.exit != exit:
            return False
        if exclude_exit is not None and entry.exit == exclude_exit:
            return False
        if exclude_cwd is not None and entry.cwd == exclude_cwd:
            return False
        if cwd is not None and entry.cwd != cwd:
            return False
        return True

    return [entry for entry in entries if keep(entry)]