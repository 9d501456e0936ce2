"""Abstract interface for the recursive directory scan primitive."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Final

from models import ScannedFile

# Passed as max_depth to request a scan without a depth cap.
UNLIMITED_DEPTH: Final = None


class DirectoryScannerInterface(ABC):
    """Recursive directory scan capability.

    Implementations walk a directory tree, prune entries whose names match
    the no-mask pattern and collect files whose names match the mask.
    """

    @abstractmethod
    def scan_directory(
        self,
        directory: str,
        mask: str,
        nomask: str | None = None,
        max_depth: int | None = UNLIMITED_DEPTH,
    ) -> dict[str, ScannedFile]:
        """Scan a directory tree for files matching a pattern.

        Args:
            directory: Root directory to scan.
            mask: Regular expression searched in each filename.
            nomask: Regular expression; entries whose names match it are skipped.
            max_depth: Number of directory levels to descend, or
                UNLIMITED_DEPTH for no cap.

        Returns:
            Mapping from file URI to the discovered file.

        Raises:
            FileNotFoundError: If the root does not exist.
            NotADirectoryError: If the root is not a directory.
        """
