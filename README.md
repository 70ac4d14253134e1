# histsearch

The pieces behind an interactive shell-history search, as a plain Python
library with no third-party dependencies.

## Modules

- `histsearch.duration`: `format_duration(timedelta)` renders a duration as
  its single most significant unit (`y`, `mo`, `d`, `h`, `m`, `s`, `ms`), and
  as `0s` below one millisecond. A negative duration raises `ValueError`.
- `histsearch.cursor`: `Cursor` holds the text being edited (`source`) and a
  character `index`. It moves with `left`, `right`, `start` and `end`, and by
  word with `next_word` and `prev_word`. It edits with `insert`, `remove`,
  `back`, `remove_next_word`, `remove_prev_word` and `clear`. `substring()`
  is the text before the cursor and `char()` the character under it. Word
  motion follows a `WordJumpMode` (`EMACS` or `SUBL`), worked out by a
  `WordJumper` from a string of word characters.
- `histsearch.stats`: `interesting_command` reduces a command line to the
  part worth counting. It drops a leading `sudo` and keeps the subcommand of
  `cargo`, `go`, `git`, `npm`, `yarn` and `pnpm`. `compute_stats(commands,
  count)` returns a `Stats` with the `count` most frequent commands, the
  total and the number of unique commands, and raises `ValueError` when there
  is nothing to report. `render_stats` draws it as a coloured bar chart for a
  terminal.
- `histsearch.listing`: `HistoryEntry` records one command (`command`,
  `timestamp`, `cwd`, `duration` in nanoseconds, `exit`, `hostname` as
  `host:user`, `session`, `id`). `ListMode.from_flags(human, cmd_only)`
  chooses `HUMAN`, `CMD_ONLY` or `REGULAR`. `render_list` prints entries in
  reverse order, one per line, and `format_entry` fills one template. Templates
  may use `{command}`, `{directory}`, `{duration}`, `{user}`, `{host}` and
  `{time}`, with literal braces doubled. A malformed template or an unknown
  variable raises `FormatError`. `should_record` rejects commands that start
  with a space or match any of the given regular expressions.
- `histsearch.search`: `filter_entries` keeps entries by exit code
  (`exit`, `exclude_exit`) and by working directory (`cwd`, `exclude_cwd`).
  A `cwd` of `"."` means the current directory.
- `histsearch.init`: `key_bindings(shell, disable_ctrl_r, disable_up_arrow,
  environ)` returns the key-binding lines for a `Shell` (`zsh`, `bash` or
  `fish`). Each of CTRL-R and the up arrow can be left out. The result is
  empty when `ATUIN_NOBIND` is set in `environ`, which defaults to
  `os.environ`.
- `histsearch.history_list`: `ListState` keeps the scroll offset, the
  selection and the number of visible entries. `items_bounds` gives the
  visible range. `index_marker` gives the three-character marker before a
  row. `render_rows` lays out the visible entries as text rows with marker,
  duration, age and command, and updates the state.
- `histsearch.interactive`: `SearchState.handle_key` applies a `Key` press
  under `SearchSettings`. It edits the query, moves the selection, and cycles
  the `FilterMode` on CTRL-R. When the search ends, it returns an index or
  one of `RETURN_ORIGINAL` and `RETURN_QUERY`, the latter two chosen for Esc
  by the `ExitMode`. `handle_scroll` moves the selection for a mouse wheel
  step. `input_line` renders the input row. `preview_lines` cuts a command
  into fixed-width chunks. `resolve_selection` turns the final index into the
  text handed back: the chosen command, an empty string for
  `RETURN_ORIGINAL`, or else the query.

## Examples

```python
from datetime import timedelta

from histsearch.cursor import Cursor
from histsearch.duration import format_duration
from histsearch.init import Shell, key_bindings
from histsearch.listing import ListMode
from histsearch.stats import interesting_command

format_duration(timedelta(hours=3, minutes=5))   # "3h"
format_duration(timedelta(0))                    # "0s"

interesting_command("cargo build foo bar")        # "cargo build"
interesting_command("sudo   cargo build foo bar") # "cargo build"
interesting_command("sudo")                       # "sudo"

ListMode.from_flags(human=True, cmd_only=False)   # ListMode.HUMAN

c = Cursor("öaöböc")
c.end()
c.back()                                          # "c"
c.substring()                                     # "öaöbö"

key_bindings(Shell.ZSH, disable_up_arrow=True, environ={})
# "bindkey '^r' _atuin_search_widget\n"
```

## What it does not do

This is a library only. It installs no command. It keeps no history store
and reads no shell history files. It does not draw a terminal screen or read
key events from a terminal. Callers supply the entries, feed `Key` values to
`SearchState`, and print the text that the functions return.

## Requirements

Python 3.10 or later. The test suite runs on pytest, which the `test` extra
installs.