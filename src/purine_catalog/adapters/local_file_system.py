"""Local filesystem access for source snapshots."""

from dataclasses import dataclass
from pathlib import Path

from purine_catalog.services.sources import SourceFileSystem


@dataclass
class LocalFileSystem(SourceFileSystem):
    """Reads snapshot folders from the local disk."""

    encoding: str = "utf-8"

    def list_subdirectories(self, path: Path) -> list[str]:
        """Return names of the immediate subdirectories of a path."""
        if not path.is_dir():
            return []
        return sorted(entry.name for entry in path.iterdir() if entry.is_dir())

    def list_files(self, path: Path) -> list[str]:
        """Return names of the regular files directly inside a path."""
        return sorted(entry.name for entry in path.iterdir() if entry.is_file())

    def read_text(self, path: Path) -> str:
        """Return the decoded contents of a file."""
        return path.read_text(encoding=self.encoding)
