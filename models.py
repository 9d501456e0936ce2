"""Data models for scan results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScannedFile:
    """File discovered by a directory scan."""

    uri: str
    filename: str
    name: str

    def to_dict(self) -> dict[str, str]:
        """Serialize file to dictionary output."""
        return {
            "uri": self.uri,
            "filename": self.filename,
            "name": self.name,
        }
