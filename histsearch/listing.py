"""History entries and their rendering as text lines."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Union

from .duration import format_duration

HUMAN_TEMPLATE = "{time} · {duration}\t{command}"
REGULAR_TEMPLATE = "{time}\t{command}\t{duration}"

_BRACE_PATTERN = re.compile(r"(\{\{|\}\})|\{([^{}]*)\}|([{}])")


class FormatError(ValueError):
    """A list template is malformed or names an unknown variable."""


@dataclass
class HistoryEntry:
    """One command run in a shell, with where, when and how it ended."""

    command: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cwd: str = ""
    duration: int = 0
    exit: int = 0
    hostname: str = ""
    session: str = ""
    id: str = ""

    def success(self) -> bool:
        """Whether the command succeeded or is still running."""
        return self.exit == 0 or self.duration == -1


class ListMode(Enum):
    """How a list of history entries is printed."""

    HUMAN = "human"
    CMD_ONLY = "cmd_only"
    REGULAR = "regular"

    @classmethod
    def from_flags(cls, human: bool, cmd_only: bool) -> "ListMode":
        if human:
            return cls.HUMAN
        if cmd_only:
            return cls.CMD_ONLY
        return cls.REGULAR


_Segment = Union[str, "tuple[str]"]


def _parse(template: str) -> list[tuple[bool, str]]:
    """Split a template into (is_key, text) segments."""
    segments: list[tuple[bool, str]] = []
    literal: list[str] = []
    pos = 0
    for match in _BRACE_PATTERN.finditer(template):
        literal.append(template[pos : match.start()])
        pos = match.end()
        escaped, key, stray = match.groups()
        if escaped is not None:
            literal.append(escaped[0])
        elif stray is not None:
            raise FormatError(
                f"unmatched {stray!r} at position {match.start()}; "
                "escape literal braces by doubling them: {{var}}"
            )
        else:
            if literal:
                segments.append((False, "".join(literal)))
                literal = []
            segments.append((True, key))
    literal.append(template[pos:])
    text = "".join(literal)
    if text:
        segments.append((False, text))
    return segments


def _value(entry: HistoryEntry, key: str) -> str:
    if key == "command":
        return entry.command.strip()
    if key == "directory":
        return entry.cwd.strip()
    if key == "duration":
        nanos = max(entry.duration, 0)
        return format_duration(timedelta(microseconds=nanos // 1_000))
    if key == "time":
        return entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
    host, sep, user = entry.hostname.partition(":")
    if key == "host":
        return host
    if key == "user":
        return user if sep else ""
    raise FormatError(f"unknown variable {key!r}")


def _apply(entry: HistoryEntry, segments: Sequence[tuple[bool, str]]) -> str:
    return "".join(_value(entry, text) if is_key else text for is_key, text in segments)


def format_entry(entry: HistoryEntry, template: str) -> str:
    """Fill ``template`` with the entry's {command}, {directory}, {duration}, {user}, {host} and {time}."""
    return _apply(entry, _parse(template))


def render_list(
    entries: Iterable[HistoryEntry],
    list_mode: ListMode,
    template: str | None = None,
) -> str:
    """Render entries newest-last (input order reversed), one per line."""
    ordered = list(entries)[::-1]
    if list_mode is ListMode.CMD_ONLY:
        return "".join(f"{e.command.strip()}\n" for e in ordered)
    default = HUMAN_TEMPLATE if list_mode is ListMode.HUMAN else REGULAR_TEMPLATE
    segments = _parse((template if template is not None else default).replace("\\t", "\t"))
    return "".join(f"{_apply(e, segments)}\n" for e in ordered)


def should_record(command: str, history_filter: Iterable[str | re.Pattern[str]] = ()) -> bool:
    """Whether a command line should be stored in history.

    Lines starting with a space, or matching any filter pattern, are skipped.
    """
    if command.startswith(" "):
        return False
    return not any(re.search(pattern, command) for pattern in history_filter)