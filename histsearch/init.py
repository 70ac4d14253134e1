"""Key binding lines for shell setup."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum


class Shell(str, Enum):
    """Shells that can be set up."""

    ZSH = "zsh"
    BASH = "bash"
    FISH = "fish"


_BINDINGS = {
    Shell.ZSH: (
        "bindkey '^r' _atuin_search_widget",
        "bindkey '^[[A' _atuin_up_search_widget\nbindkey '^[OA' _atuin_up_search_widget",
    ),
    Shell.BASH: (
        r"""bind -x '"\C-r": __atuin_history'""",
        r"""bind -x '"\e[A": __atuin_history --shell-up-key-binding'"""
        "\n"
        r"""bind -x '"\eOA": __atuin_history --shell-up-key-binding'""",
    ),
    Shell.FISH: (
        r"bind \cr _atuin_search",
        r"bind -k up _atuin_bind_up" "\n" r"bind \eOA _atuin_bind_up" "\n" r"bind \e\[A _atuin_bind_up",
    ),
}

_FISH_INSERT = (
    r"bind -M insert \cr _atuin_search",
    r"bind -M insert -k up _atuin_bind_up"
    "\n"
    r"bind -M insert \eOA _atuin_bind_up"
    "\n"
    r"bind -M insert \e\[A _atuin_bind_up",
)


def _select(pair: tuple[str, str], disable_ctrl_r: bool, disable_up_arrow: bool) -> list[str]:
    ctrl_r, up_arrow = pair
    lines = []
    if not disable_ctrl_r:
        lines.append(ctrl_r)
    if not disable_up_arrow:
        lines.append(up_arrow)
    return lines


def key_bindings(
    shell: Shell | str,
    disable_ctrl_r: bool = False,
    disable_up_arrow: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the key binding commands for ``shell``.

    Nothing is bound when ATUIN_NOBIND is set in the environment.
    """
    shell = Shell(shell)
    env = os.environ if environ is None else environ
    if "ATUIN_NOBIND" in env:
        return ""

    lines = _select(_BINDINGS[shell], disable_ctrl_r, disable_up_arrow)
    if shell is Shell.FISH:
        lines.append("if bind -M insert > /dev/null 2>&1")
        lines.extend(_select(_FISH_INSERT, disable_ctrl_r, disable_up_arrow))
        lines.append("end")
    return "".join(f"{line}\n" for line in lines)