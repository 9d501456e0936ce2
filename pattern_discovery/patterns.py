"""Regular-expression builders for pattern file discovery."""

from __future__ import annotations

import re
from collections.abc import Iterable

ALWAYS_IGNORED_DIRECTORY = "tests"

# Empty alternation would match every filename.
MATCH_NOTHING = "(?!)"


def build_extension_pattern(extensions: Iterable[str]) -> str:
    """Build a filename mask matching any of the given suffixes.

    Extensions are matched literally at the end of the filename and carry
    their own leading dot where one is wanted (e.g. ``.ui_patterns.yml``).
    An empty collection yields a pattern that matches nothing.
    """
    escaped = [re.escape(extension) for extension in extensions]
    if not escaped:
        return MATCH_NOTHING
    return f"(?:{'|'.join(escaped)})$"


def build_no_mask(ignore_directories: Iterable[str]) -> str:
    """Build the exclusion pattern for whole path segments.

    ``tests`` is always appended to the configured names.
    """
    ignore = list(ignore_directories)
    ignore.append(ALWAYS_IGNORED_DIRECTORY)
    escaped = [re.escape(name) for name in ignore]
    return f"^(?:{'|'.join(escaped)})$"
