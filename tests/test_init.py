import pytest

from histsearch.init import Shell, key_bindings


@pytest.mark.parametrize("shell", list(Shell))
def test_nobind_disables_everything(shell):
    assert key_bindings(shell, environ={"ATUIN_NOBIND": "1"}) == ""


def test_zsh_all():
    out = key_bindings(Shell.ZSH, environ={})
    assert out.splitlines() == [
        "bindkey '^r' _atuin_search_widget",
        "bindkey '^[[A' _atuin_up_search_widget",
        "bindkey '^[OA' _atuin_up_search_widget",
    ]


def test_zsh_disable_ctrl_r():
    out = key_bindings("zsh", disable_ctrl_r=True, environ={})
    assert "bindkey '^r' _atuin_search_widget" not in out
    assert "_atuin_up_search_widget" in out


def test_bash_ctrl_r_only():
    out = key_bindings(Shell.BASH, disable_up_arrow=True, environ={})
    assert out == "bind -x '\"\\C-r\": __atuin_history'\n"


def test_fish_wraps_insert_mode():
    lines = key_bindings(Shell.FISH, environ={}).splitlines()
    assert lines[0] == r"bind \cr _atuin_search"
    assert "if bind -M insert > /dev/null 2>&1" in lines
    assert lines[-1] == "end"
    assert r"bind -M insert \cr _atuin_search" in lines


def test_fish_all_disabled_keeps_guard():
    lines = key_bindings(Shell.FISH, True, True, environ={}).splitlines()
    assert lines == ["if bind -M insert > /dev/null 2>&1", "end"]


def test_unknown_shell():
    with pytest.raises(ValueError):
        key_bindings("tcsh", environ={})