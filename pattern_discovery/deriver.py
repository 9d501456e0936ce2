"""Derive pattern definition files stored as YAML."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from models import ScannedFile
from pattern_discovery.interfaces import UNLIMITED_DEPTH, DirectoryScannerInterface
from pattern_discovery.patterns import build_extension_pattern, build_no_mask
from pattern_discovery.settings import FILE_SCAN_IGNORE_DIRECTORIES, Settings

DEFAULT_FILE_EXTENSIONS = (".ui_patterns.yml",)


class YamlPatternsDeriver:
    """Locate YAML pattern definition files below a directory.

    The scan primitive and settings are injected; the deriver only builds
    the filename mask and the exclusion pattern and forwards the call.
    """

    def __init__(
        self,
        scanner: DirectoryScannerInterface,
        settings: Settings | None = None,
        file_extensions: Iterable[str] = DEFAULT_FILE_EXTENSIONS,
    ) -> None:
        self._scanner = scanner
        self._settings = settings if settings is not None else Settings()
        self._file_extensions = tuple(file_extensions)

    def get_file_extensions(self) -> list[str]:
        """Return the accepted pattern file extensions."""
        return list(self._file_extensions)

    def get_no_mask(self) -> str:
        """Return the regular expression for entries excluded from a scan."""
        ignore = self._settings.get(FILE_SCAN_IGNORE_DIRECTORIES, [])
        return build_no_mask(ignore)

    def file_scan_directory(self, directory: str) -> dict[str, ScannedFile]:
        """Scan ``directory`` for pattern definition files.

        Errors raised by the scanner propagate unchanged.
        """
        mask = build_extension_pattern(self.get_file_extensions())
        nomask = self.get_no_mask()
        logger.debug(f"Scanning {directory} with mask {mask!r} and nomask {nomask!r}")
        return self._scanner.scan_directory(directory, mask, nomask, UNLIMITED_DEPTH)
