"""Read-only settings passed explicitly to discovery components."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from copy import deepcopy
from types import MappingProxyType
from typing import Any

FILE_SCAN_IGNORE_DIRECTORIES = "file_scan_ignore_directories"


class Settings:
    """Key/value settings store.

    Values are looked up by name with a caller-supplied default, so a
    missing key never raises.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = MappingProxyType(deepcopy(dict(values or {})))

    @classmethod
    def from_ignore_directories(cls, names: Iterable[str]) -> Settings:
        """Create settings holding only the scan ignore list."""
        return cls({FILE_SCAN_IGNORE_DIRECTORIES: list(names)})

    def get(self, name: str, default: Any = None) -> Any:
        """Return the setting value, or ``default`` when unset."""
        return self._values.get(name, default)
