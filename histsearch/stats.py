"""Statistics over command history: most used commands and totals."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

COMMON_COMMAND_PREFIX = ("sudo",)
COMMON_SUBCOMMAND_PREFIX = ("cargo", "go", "git", "npm", "yarn", "pnpm")

_ASCII_WHITESPACE = frozenset(" \t\n\x0c\r")

_ESC = "\x1b["
_RED = f"{_ESC}38;5;9m"
_YELLOW = f"{_ESC}38;5;11m"
_GREEN = f"{_ESC}38;5;10m"
_GREY = f"{_ESC}38;5;7m"
_BOLD = f"{_ESC}1m"
_RESET = f"{_ESC}0m"


@dataclass(frozen=True)
class Stats:
    """The most frequent commands, with total and unique command counts."""

    top: list[tuple[str, int]]
    total: int
    unique: int


def _first_whitespace(s: str) -> int:
    return next((i for i, c in enumerate(s) if c in _ASCII_WHITESPACE), len(s))


def _first_non_whitespace(s: str) -> int | None:
    return next((i for i, c in enumerate(s) if c not in _ASCII_WHITESPACE), None)


def interesting_command(command: str) -> str:
    """Reduce a command line to the part worth counting.

    Leading ``sudo`` is dropped, and for tools such as git or cargo the
    subcommand is kept (``git commit -m x`` counts as ``git commit``).
    """
    while True:
        i = _first_whitespace(command)
        prefix = command[:i]
        if prefix not in COMMON_COMMAND_PREFIX:
            break
        command = command[i:].lstrip()
        if not command:
            return prefix

    j = _first_non_whitespace(command[i:])
    if j is not None and prefix in COMMON_SUBCOMMAND_PREFIX:
        start = i + j
        return command[: start + _first_whitespace(command[start:])]
    return prefix


def compute_stats(commands: Iterable[str], count: int) -> Stats:
    """Count commands and keep the ``count`` most frequent ones.

    Raises ValueError when there is nothing to report.
    """
    trimmed = [c.strip() for c in commands]
    prefixes = Counter(interesting_command(c) for c in trimmed)
    top = prefixes.most_common(count) if count > 0 else []
    if not top:
        raise ValueError("No commands found")
    return Stats(top=top, total=len(trimmed), unique=len(set(trimmed)))


def _bar(count: int, highest: int) -> str:
    filled = 10 * count // highest
    parts = [_RED]
    for i in range(filled):
        if i == 2:
            parts.append(_YELLOW)
        elif i == 5:
            parts.append(_GREEN)
        parts.append("▮")
    parts.append(" " * (10 - filled))
    return "".join(parts)


def render_stats(stats: Stats) -> str:
    """Render statistics as coloured terminal text, one line per entry."""
    highest = max(n for _, n in stats.top)
    pad = len(str(highest))
    lines = [
        f"[{_bar(n, highest)}{_RESET}] {_GREY}{n:>{pad}}{_RESET} {_BOLD}{command}{_RESET}"
        for command, n in stats.top
    ]
    lines.append(f"Total commands:   {stats.total}")
    lines.append(f"Unique commands:  {stats.unique}")
    return "\n".join(lines) + "\n"