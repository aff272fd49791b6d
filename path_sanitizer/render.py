"""Shell statements that assign PATH."""

from __future__ import annotations

from typing import Iterable

from path_sanitizer.path_utils import SEPARATOR

_TEMPLATES = {
    "bash": 'export PATH="{path}"',
    "zsh": 'export PATH="{path}"',
    "fish": 'set -gx PATH "{path}"',
}


class ShellSelectionError(RuntimeError):
    """Raised when an unsupported shell reaches the renderer."""


def render(shell: str, parts: Iterable[str]) -> str:
    template = _TEMPLATES.get(shell)
    if template is None:
        raise ShellSelectionError(f"shell type selection failure: {shell!r}")
    return template.format(path=SEPARATOR.join(parts))
