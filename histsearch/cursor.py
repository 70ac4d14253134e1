"""An editable line of text with a cursor and word-wise movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WordJumpMode(str, Enum):
    """How word boundaries are found when jumping by word."""

    EMACS = "emacs"
    SUBL = "subl"


def _first(indices, predicate):
    return next((i for i in indices if predicate(i)), None)


@dataclass(frozen=True)
class WordJumper:
    """Finds the next and previous word positions within a string."""

    word_chars: str
    word_jump_mode: WordJumpMode

    def _is_word(self, c: str) -> bool:
        return c in self.word_chars

    def _is_word_boundary(self, c: str, next_c: str) -> bool:
        return (
            c.isspace() != next_c.isspace()
            or self._is_word(c) != self._is_word(next_c)
        )

    def _emacs_next(self, source: str, index: int) -> int:
        n = len(source)
        last = max(n - 1, 0)
        found = _first(range(index + 1, last), lambda i: self._is_word(source[i]))
        index = n if found is None else found
        found = _first(range(index + 1, last), lambda i: not self._is_word(source[i]))
        return n if found is None else found

    def _emacs_prev(self, source: str, index: int) -> int:
        found = _first(reversed(range(1, index)), lambda i: self._is_word(source[i]))
        index = 0 if found is None else found
        found = _first(reversed(range(1, index)), lambda i: not self._is_word(source[i]))
        return 0 if found is None else found + 1

    def _subl_next(self, source: str, index: int) -> int:
        n = len(source)
        found = _first(
            range(index, max(n - 1, 0)),
            lambda i: self._is_word_boundary(source[i], source[i + 1]),
        )
        if found is None:
            return n
        found = _first(range(found + 1, n), lambda i: not source[i].isspace())
        return n if found is None else found

    def _subl_prev(self, source: str, index: int) -> int:
        found = _first(reversed(range(1, index)), lambda i: not source[i].isspace())
        if found is None:
            return 0
        found = _first(
            reversed(range(1, found)),
            lambda i: self._is_word_boundary(source[i - 1], source[i]),
        )
        return 0 if found is None else found

    def next_word_pos(self, source: str, index: int) -> int:
        """Position of the next word after ``index``."""
        if self.word_jump_mode is WordJumpMode.EMACS:
            return self._emacs_next(source, index)
        return self._subl_next(source, index)

    def prev_word_pos(self, source: str, index: int) -> int:
        """Position of the previous word before ``index``."""
        if self.word_jump_mode is WordJumpMode.EMACS:
            return self._emacs_prev(source, index)
        return self._subl_prev(source, index)


@dataclass
class Cursor:
    """A string being edited, with the cursor as a character index into it."""

    source: str = ""
    index: int = 0

    def substring(self) -> str:
        """The text before the cursor."""
        return self.source[: self.index]

    def char(self) -> str | None:
        """The character under the cursor, or None at the end."""
        if self.index < len(self.source):
            return self.source[self.index]
        return None

    def right(self) -> None:
        if self.index < len(self.source):
            self.index += 1

    def left(self) -> bool:
        """Move left one character; return whether the cursor moved."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.next_word_pos(self.source, self.index)

    def prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.prev_word_pos(self.source, self.index)

    def insert(self, c: str) -> None:
        self.source = self.source[: self.index] + c + self.source[self.index :]
        self.index += len(c)

    def remove(self) -> str | None:
        """Delete and return the character under the cursor."""
        if self.index < len(self.source):
            removed = self.source[self.index]
            self.source = self.source[: self.index] + self.source[self.index + 1 :]
            return removed
        return None

    def remove_next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        end = jumper.next_word_pos(self.source, self.index)
        self.source = self.source[: self.index] + self.source[end:]

    def remove_prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        start = jumper.prev_word_pos(self.source, self.index)
        self.source = self.source[:start] + self.source[self.index :]
        self.index = start

    def back(self) -> str | None:
        """Delete and return the character before the cursor."""
        if self.left():
            return self.remove()
        return None

    def clear(self) -> None:
        self.source = ""
        self.index = 0

    def end(self) -> None:
        self.index = len(self.source)

    def start(self) -> None:
        self.index = 0