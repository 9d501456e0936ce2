"""Filesystem implementation of the recursive directory scan."""

from __future__ import annotations

import os
import re
from pathlib import Path
from stat import S_ISDIR

from loguru import logger

from models import ScannedFile
from pattern_discovery.interfaces import UNLIMITED_DEPTH, DirectoryScannerInterface


def _directory_key(directory_stat: os.stat_result) -> tuple[int, int]:
    """Return the device and inode identifying a directory."""
    return (directory_stat.st_dev, directory_stat.st_ino)


class FileSystemScanner(DirectoryScannerInterface):
    """Scan the local filesystem in sorted, depth-first order."""

    def scan_directory(
        self,
        directory: str,
        mask: str,
        nomask: str | None = None,
        max_depth: int | None = UNLIMITED_DEPTH,
    ) -> dict[str, ScannedFile]:
        """Recursively collect files whose names match ``mask``.

        Hidden entries and entries whose names match ``nomask`` are skipped;
        skipped directories are not descended. Files directly inside the
        root are at depth 0. Entries that cannot be read are logged and
        skipped, and a directory reached twice through symlinks is scanned
        once.

        Args:
            directory: Directory to scan.
            mask: Regular expression searched in each filename.
            nomask: Optional regular expression for entries to skip.
            max_depth: Directory levels to descend, or None for no cap.

        Returns:
            Discovered files keyed by URI.

        Raises:
            FileNotFoundError: If the path does not exist.
            NotADirectoryError: If the path is not a directory.
            PermissionError: If the root directory cannot be listed.
            re.error: If either pattern is not a valid regular expression.
        """
        root = Path(directory)
        if not root.exists():
            raise FileNotFoundError(f"Scan path does not exist: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Scan path is not a directory: {root}")

        mask_re = re.compile(mask)
        nomask_re = re.compile(nomask) if nomask is not None else None

        discovered: dict[str, ScannedFile] = {}
        visited: set[tuple[int, int]] = {_directory_key(root.stat())}
        pending: list[tuple[Path, int]] = [(root, 0)]

        while pending:
            current_dir, depth = pending.pop()
            try:
                entries = sorted(current_dir.iterdir(), key=lambda entry: entry.name)
            except OSError as exc:
                if current_dir == root:
                    raise
                logger.warning(f"Skipping unreadable directory: {current_dir} ({exc})")
                continue

            subdirectories: list[tuple[Path, int]] = []
            for entry in entries:
                if entry.name.startswith("."):
                    continue
                if nomask_re is not None and nomask_re.search(entry.name):
                    continue

                try:
                    entry_stat = entry.stat()
                except OSError as exc:
                    logger.warning(f"Skipping unreadable entry: {entry} ({exc})")
                    continue

                if S_ISDIR(entry_stat.st_mode):
                    if max_depth is not UNLIMITED_DEPTH and depth >= max_depth:
                        continue
                    directory_key = _directory_key(entry_stat)
                    if directory_key in visited:
                        logger.debug(f"Skipping already scanned directory: {entry}")
                        continue
                    visited.add(directory_key)
                    subdirectories.append((entry, depth + 1))
                    continue

                if mask_re.search(entry.name):
                    uri = str(entry)
                    discovered[uri] = ScannedFile(uri=uri, filename=entry.name, name=entry.stem)

            # Reversed so the stack pops subdirectories in name order.
            pending.extend(reversed(subdirectories))

        return discovered
