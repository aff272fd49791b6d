"""Shared path helpers."""

from __future__ import annotations

import logging
import os
import re
from typing import Callable, Iterable

SEPARATOR = ":"
CANDIDATE_SUBDIRS = ("bin", "sbin")
CURRENT_DIR = "."

_SLASH_RUN = re.compile(r"/{2,}")
_SEPARATOR_RUN = re.compile(r":{2,}")

logger = logging.getLogger(__name__)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def extend_path(
    path: str,
    include_current_dir: bool,
    candidates: Iterable[str],
    prepend: bool,
    is_dir: Callable[[str], bool] = is_directory,
) -> str:
    """Add the current dir and candidate bin/sbin dirs to ``path``.

    Returns the raw combined value after :func:`clean_path`; duplicates are
    left for :func:`normalize_path`.
    """
    extra = CURRENT_DIR if include_current_dir else ""
    for candidate in candidates:
        for subdir in CANDIDATE_SUBDIRS:
            entry = f"{candidate}/{subdir}"
            if is_dir(entry):
                logger.debug("event=path_candidate_added path=%s", entry)
                extra += SEPARATOR + entry
            else:
                logger.debug("event=path_candidate_skipped path=%s", entry)

    if prepend:
        combined = extra + SEPARATOR + path
    else:
        combined = path + SEPARATOR + extra
    return clean_path(combined)


def clean_path(path: str) -> str:
    path = _SLASH_RUN.sub("/", path)
    path = _SEPARATOR_RUN.sub(SEPARATOR, path)
    return path.strip(SEPARATOR)


def normalize_path(path: str) -> list[str]:
    parts: list[str] = []
    seen: set[str] = set()
    for entry in path.split(SEPARATOR):
        if not entry or entry in seen:
            continue
        seen.add(entry)
        parts.append(entry)
    return parts
