from datetime import datetime, timedelta

import pytest

from histsearch.duration import format_duration
from histsearch.listing import (
    FormatError,
    HistoryEntry,
    ListMode,
    format_entry,
    render_list,
    should_record,
)


def _entry(command="ls", **kwargs):
    kwargs.setdefault("timestamp", datetime(2023, 1, 2, 3, 4, 5))
    return HistoryEntry(command=command, **kwargs)


@pytest.mark.parametrize(
    "human, cmd_only, expected",
    [
        (True, True, ListMode.HUMAN),
        (True, False, ListMode.HUMAN),
        (False, True, ListMode.CMD_ONLY),
        (False, False, ListMode.REGULAR),
    ],
)
def test_from_flags(human, cmd_only, expected):
    assert ListMode.from_flags(human, cmd_only) is expected


def test_success():
    assert _entry(exit=0).success() is True
    assert _entry(exit=1, duration=5).success() is False
    assert _entry(exit=1, duration=-1).success() is True


def test_command_and_directory_are_trimmed():
    e = _entry("  ls -la  ", cwd=" /tmp ")
    assert format_entry(e, "{command}") == "ls -la"
    assert format_entry(e, "{directory}") == "/tmp"


def test_host_and_user():
    e = _entry(hostname="box:alice")
    assert format_entry(e, "{host}") == "box"
    assert format_entry(e, "{user}") == "alice"


def test_hostname_without_user():
    e = _entry(hostname="box")
    assert format_entry(e, "{host}") == "box"
    assert format_entry(e, "{user}") == ""


def test_duration():
    e = _entry(duration=2_000_000_000)
    assert format_entry(e, "{duration}") == format_duration(timedelta(seconds=2))


def test_negative_duration_renders_zero():
    assert format_entry(_entry(duration=-1), "{duration}") == "0s"


def test_time():
    assert format_entry(_entry(), "{time}") == "2023-01-02 03:04:05"


def test_escaped_braces():
    assert format_entry(_entry(), "{{command}}") == "{command}"


def test_unknown_key():
    with pytest.raises(FormatError):
        format_entry(_entry(), "{nope}")


@pytest.mark.parametrize("template", ["{command", "command}", "{a{b}"])
def test_malformed_template(template):
    with pytest.raises(FormatError):
        format_entry(_entry(), template)


def test_cmd_only_reversed():
    out = render_list([_entry(" first "), _entry("second")], ListMode.CMD_ONLY)
    assert out.splitlines() == ["second", "first"]


def test_regular_default_layout():
    e = _entry("echo hi", duration=0)
    (line,) = render_list([e], ListMode.REGULAR).splitlines()
    parts = line.split("\t")
    assert parts == [format_entry(e, "{time}"), "echo hi", format_entry(e, "{duration}")]


def test_human_default_layout():
    e = _entry("echo hi")
    line = render_list([e], ListMode.HUMAN).rstrip("\n")
    assert line == format_entry(e, "{time} · {duration}\t{command}")


def test_escaped_tab_in_template():
    e = _entry("ls", cwd="/tmp")
    assert render_list([e], ListMode.REGULAR, "{command}\\t{directory}") == "ls\t/tmp\n"


def test_bad_template_raises_even_without_entries():
    with pytest.raises(FormatError):
        render_list([], ListMode.HUMAN, "{oops")


def test_should_record():
    assert should_record(" secret-cmd") is False
    assert should_record("ls -la") is True
    assert should_record("export TOKEN=x", [r"^export TOKEN"]) is False
    assert should_record("ls", [r"^export"]) is True