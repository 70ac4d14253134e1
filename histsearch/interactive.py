"""State and key handling of the interactive history search."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .cursor import Cursor, WordJumpMode
from .history_list import ListState
from .listing import HistoryEntry

RETURN_ORIGINAL = -1
RETURN_QUERY = -2

DEFAULT_WORD_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


class FilterMode(Enum):
    """Which part of history a search covers."""

    GLOBAL = "GLOBAL"
    HOST = "HOST"
    SESSION = "SESSION"
    DIRECTORY = "DIRECTORY"

    def next(self) -> "FilterMode":
        modes = list(FilterMode)
        return modes[(modes.index(self) + 1) % len(modes)]


class ExitMode(Enum):
    """What Esc returns: nothing, or the typed query."""

    RETURN_ORIGINAL = "return-original"
    RETURN_QUERY = "return-query"


@dataclass(frozen=True)
class Key:
    """A key event: a single character, or a named key such as ``Enter`` or ``Up``."""

    code: str
    ctrl: bool = False
    alt: bool = False
    release: bool = False

    ESC = "Esc"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"

    @property
    def char(self) -> str | None:
        return self.code if len(self.code) == 1 else None


@dataclass
class SearchSettings:
    """Settings that steer the interactive search."""

    exit_mode: ExitMode = ExitMode.RETURN_ORIGINAL
    word_chars: str = DEFAULT_WORD_CHARS
    word_jump_mode: WordJumpMode = WordJumpMode.EMACS
    scroll_context_lines: int = 1


@dataclass
class SearchState:
    """The query being typed, the filter mode and the result selection."""

    input: Cursor = field(default_factory=Cursor)
    filter_mode: FilterMode = FilterMode.GLOBAL
    results_state: ListState = field(default_factory=ListState)
    history_count: int = 0
    update_needed: str | None = None

    def _select_up(self, step: int, length: int) -> None:
        i = self.results_state.selected + step
        self.results_state.select(max(min(i, length - 1), 0))

    def _select_down(self, step: int) -> None:
        self.results_state.select(max(self.results_state.selected - step, 0))

    def handle_scroll(self, up: bool, length: int) -> None:
        """Move the selection one entry for a mouse wheel step."""
        if up:
            self._select_up(1, length)
        else:
            self._select_down(1)

    def _delete_word_backwards(self) -> None:
        while True:
            c = self.input.back()
            if c is None or not c.isspace():
                break
        while self.input.left():
            if self.input.char().isspace():
                self.input.right()
                break
            self.input.remove()

    def handle_key(self, settings: SearchSettings, key: Key, length: int) -> int | None:
        """Apply a key press; return the chosen index when the search ends."""
        if key.release:
            return None

        code, ch, ctrl = key.code, key.char, key.ctrl
        words = (settings.word_chars, settings.word_jump_mode)

        if ctrl and ch in ("c", "d", "g"):
            return RETURN_ORIGINAL
        if code == Key.ESC:
            if settings.exit_mode is ExitMode.RETURN_ORIGINAL:
                return RETURN_ORIGINAL
            return RETURN_QUERY
        if code == Key.ENTER:
            return self.results_state.selected
        if key.alt and ch is not None and "1" <= ch <= "9":
            return self.results_state.selected + int(ch)

        if code == Key.LEFT:
            if ctrl:
                self.input.prev_word(*words)
            else:
                self.input.left()
        elif ctrl and ch == "h":
            self.input.left()
        elif code == Key.RIGHT:
            if ctrl:
                self.input.next_word(*words)
            else:
                self.input.right()
        elif ctrl and ch == "l":
            self.input.right()
        elif (ctrl and ch == "a") or code == Key.HOME:
            self.input.start()
        elif (ctrl and ch == "e") or code == Key.END:
            self.input.end()
        elif code == Key.BACKSPACE:
            if ctrl:
                self.input.remove_prev_word(*words)
            else:
                self.input.back()
        elif code == Key.DELETE:
            if ctrl:
                self.input.remove_next_word(*words)
            else:
                self.input.remove()
        elif ctrl and ch == "w":
            self._delete_word_backwards()
        elif ctrl and ch == "u":
            self.input.clear()
        elif ctrl and ch == "r":
            self.filter_mode = self.filter_mode.next()
        elif code == Key.DOWN:
            if self.results_state.selected == 0:
                return RETURN_ORIGINAL
            self._select_down(1)
        elif ctrl and ch in ("n", "j"):
            self._select_down(1)
        elif code == Key.UP or (ctrl and ch in ("p", "k")):
            self._select_up(1, length)
        elif ch is not None:
            self.input.insert(ch)
        elif code == Key.PAGE_DOWN:
            scroll = max(self.results_state.max_entries - settings.scroll_context_lines, 0)
            self._select_down(scroll)
        elif code == Key.PAGE_UP:
            scroll = max(self.results_state.max_entries - settings.scroll_context_lines, 0)
            self._select_up(scroll, length)
        return None

    def input_line(self) -> str:
        """The input row: the centred filter mode followed by the query."""
        return f"[{self.filter_mode.value:^14}] {self.input.source}"


def preview_lines(command: str, width: int) -> list[str]:
    """Split ``command`` into chunks of at most ``width`` characters."""
    if width < 1:
        raise ValueError("width must be positive")
    return [command[i : i + width] for i in range(0, len(command), width)]


def resolve_selection(index: int, results: Sequence[HistoryEntry], query: str) -> str:
    """The text the search hands back for the index it ended with."""
    if 0 <= index < len(results):
        return results[index].command
    if index == RETURN_ORIGINAL:
        return ""
    return query