"""Output file naming strategies for converted notebooks."""

from __future__ import annotations

import os
import re
from typing import Callable, Dict

NamingStrategy = Callable[[str, str], str]

SOURCE_SUFFIX = ".html"
NOTEBOOK_SUFFIX = " - Notebook.html"
UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def _replace_suffix(name: str, suffix: str, extension: str) -> str:
    if name.endswith(suffix):
        return name[: -len(suffix)] + extension
    return name


def preserve_filename(path: str, extension: str) -> str:
    """Keep the original name and only swap the extension."""

    return _replace_suffix(path, SOURCE_SUFFIX, extension)


def sanitize_filename(path: str, extension: str) -> str:
    """Drop the export suffix and anything but letters, digits, ``_-.``."""

    directory, current = os.path.split(path)
    if current.endswith(NOTEBOOK_SUFFIX):
        renamed = _replace_suffix(current, NOTEBOOK_SUFFIX, extension)
    else:
        renamed = _replace_suffix(current, SOURCE_SUFFIX, extension)
    renamed = UNSAFE_CHARS_RE.sub("", renamed)
    return os.path.join(directory, renamed)


NAMING_STRATEGIES: Dict[str, NamingStrategy] = {
    "sanitize": sanitize_filename,
    "preserve": preserve_filename,
}


def get_naming_strategy(name: str) -> NamingStrategy:
    """Look up a strategy by its config name."""

    try:
        return NAMING_STRATEGIES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown naming strategy: {name}") from exc
