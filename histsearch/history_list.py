"""Layout of the scrolling result list in the interactive search view."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .duration import format_duration
from .listing import HistoryEntry

# longest line prefix: " > 123ms 59s ago"
PREFIX_LENGTH = len(" > 123ms 59s ago")

_INDEX_SLICES = " > 1 2 3 4 5 6 7 8 9   "


@dataclass
class ListState:
    """Scroll position and selection of the result list."""

    offset: int = 0
    selected: int = 0
    max_entries: int = 0

    def select(self, index: int) -> None:
        self.selected = index


def items_bounds(history_len: int, selected: int, offset: int, height: int) -> tuple[int, int]:
    """The half-open range of entries visible for a list of ``height`` rows."""
    offset = min(offset, max(history_len - 1, 0))
    max_scroll_space = min(height, 10)
    if offset + height < selected + max_scroll_space:
        end = selected + max_scroll_space
        return end - height, end
    if selected < offset:
        return selected, selected + height
    return offset, offset + height


def index_marker(row: int, offset: int, selected: int) -> str:
    """The three-character marker: ``" > "`` on the selection, its distance above it up to 9."""
    distance = row + offset - selected
    if distance < 0:
        distance = 10
    i = min(distance, 10) * 2
    return _INDEX_SLICES[i : i + 3]


class _Row:
    def __init__(self, width: int) -> None:
        self.width = width
        self.cells = [" "] * width
        self.x = 0

    def draw(self, text: str) -> None:
        room = max(self.width - self.x, 0)
        written = text[:room]
        for offset, ch in enumerate(written):
            self.cells[self.x + offset] = ch
        self.x += len(written)

    def text(self) -> str:
        return "".join(self.cells).rstrip()


def _render_row(entry: HistoryEntry, row: int, state: ListState, width: int, now: datetime) -> str:
    line = _Row(width)
    line.draw(index_marker(row, state.offset, state.selected))

    nanos = max(entry.duration, 0)
    line.draw(format_duration(timedelta(microseconds=nanos // 1_000)))

    since = max(now - entry.timestamp, timedelta(0))
    time = format_duration(since)
    line.x = max(PREFIX_LENGTH - 4 - len(time), 0)
    line.draw(time)
    line.draw(" ago")

    for section in entry.command.split():
        line.x += 1
        if line.x > width:
            break
        line.draw(section)
    return line.text()


def render_rows(
    entries: Sequence[HistoryEntry],
    state: ListState,
    width: int,
    height: int,
    now: datetime | None = None,
) -> list[str]:
    """Render the visible entries, bottom row first, updating ``state``.

    Each row holds the index marker, the duration, the age and the command,
    cut to ``width`` characters.
    """
    if width < 1 or height < 1 or not entries:
        return []
    now = now if now is not None else datetime.now(timezone.utc)

    start, end = items_bounds(len(entries), state.selected, state.offset, height)
    state.offset = start
    state.max_entries = end - start

    visible = entries[start:end]
    return [_render_row(entry, row, state, width, now) for row, entry in enumerate(visible)]