"""PATH sanitizing pipeline."""

from __future__ import annotations

import logging
from typing import Callable

from path_sanitizer.config import Options
from path_sanitizer.path_utils import (
    SEPARATOR,
    extend_path,
    is_directory,
    normalize_path,
)
from path_sanitizer.render import render

logger = logging.getLogger(__name__)


def sanitize(
    path: str,
    options: Options,
    is_dir: Callable[[str], bool] = is_directory,
) -> str:
    """Return the shell statement that sets the extended, deduplicated PATH."""
    extended = extend_path(
        path,
        options.include_current_dir,
        options.candidates,
        options.prepend,
        is_dir=is_dir,
    )
    parts = normalize_path(extended)
    logger.info(
        "event=path_sanitized shell=%s entries_before=%d entries_after=%d",
        options.shell,
        len([entry for entry in path.split(SEPARATOR) if entry]),
        len(parts),
    )
    return render(options.shell, parts)
