"""Locating the newest dated snapshot of source CSV files."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from purine_catalog.domain.errors import MissingSourceFileError, NoDataFoundError

DATED_FOLDER = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_logger = logging.getLogger(__name__)


class SourceFileSystem(Protocol):
    """Read-only filesystem access needed by the pipeline."""

    def list_subdirectories(self, path: Path) -> list[str]:
        """Return names of the immediate subdirectories of a path."""

    def list_files(self, path: Path) -> list[str]:
        """Return names of the regular files directly inside a path."""

    def read_text(self, path: Path) -> str:
        """Return the UTF-8 contents of a file."""


@dataclass(frozen=True)
class SourceSnapshot:
    """One dated export batch with its two source files."""

    folder: str
    food_file: Path
    alcohol_file: Path


def select_latest(names: Iterable[str]) -> str:
    """Pick the latest ``YYYY-MM-DD`` name."""
    dated = sorted(name for name in names if DATED_FOLDER.fullmatch(name))
    if not dated:
        raise NoDataFoundError("No timestamped folders found")
    return dated[-1]


def find_source_file(file_names: Iterable[str], keyword: str) -> str | None:
    """Return the first CSV whose name contains the keyword."""
    matches = sorted(
        name for name in file_names if keyword in name and name.endswith(".csv")
    )
    if len(matches) > 1:
        _logger.warning(
            "Several %s CSV files found, using %s: %s", keyword, matches[0], matches
        )
    return matches[0] if matches else None


@dataclass
class SnapshotLocator:
    """Resolves the newest snapshot under a data directory."""

    file_system: SourceFileSystem

    def locate(self, data_dir: Path) -> SourceSnapshot:
        """Find the latest dated folder and its food and alcohol files."""
        try:
            folder = select_latest(self.file_system.list_subdirectories(data_dir))
        except NoDataFoundError as exc:
            raise NoDataFoundError(
                f"No timestamped folders found in {data_dir}"
            ) from exc

        folder_path = data_dir / folder
        files = self.file_system.list_files(folder_path)
        food_file = find_source_file(files, "food")
        if food_file is None:
            raise MissingSourceFileError(f"Food CSV file not found in {folder_path}")
        alcohol_file = find_source_file(files, "alcohol")
        if alcohol_file is None:
            raise MissingSourceFileError(
                f"Alcohol CSV file not found in {folder_path}"
            )
        return SourceSnapshot(
            folder=folder,
            food_file=folder_path / food_file,
            alcohol_file=folder_path / alcohol_file,
        )
