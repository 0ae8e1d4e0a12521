# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dupe_planner import verifier, walker
from dupe_planner.errors import NotADirectory
from dupe_planner.utils import report_timestamp, str_file_size_to_int

logger = logging.getLogger(__name__)

MAX_RECOMMENDED_WALK_BATCH = 1024
MAX_RECOMMENDED_HASH_BATCH = 64


@dataclass
class DuplicateFinderConfig:
    """
    Configuration class for the duplicate planner.
    """

    # The folder to search for duplicate files.
    # Relative paths are resolved against the current directory.
    scan_folder_path: str

    # Entry names (files or folders) skipped at any depth.
    # Nothing below an excluded folder is scanned.
    # If None, the default NAS metadata folder name is used.
    excluded_names: Optional[List[str]] = None

    # How many directory entries are inspected at once while scanning.
    # Zero or a negative value selects the default.
    walk_batch_width: int = walker.DEFAULT_BATCH_WIDTH

    # How many files are hashed at once inside a size group.
    # Each file being hashed holds one open handle and one read buffer.
    hash_batch_width: int = verifier.DEFAULT_BATCH_WIDTH

    # Read buffer size used while hashing, as a human-readable
    # size (e.g. '1MiB', '64K').
    chunk_size_str: str = "1MiB"

    # Read buffer size in bytes.
    # Calculated from chunk_size_str, not accepted by the constructor.
    chunk_size: int = field(init=False, default=verifier.DEFAULT_CHUNK_SIZE)

    # Where the list of duplicate groups is written.
    # If None, a timestamped file in the current directory is used.
    report_file_path: Optional[str] = None

    # Delete duplicate files (keep the lexicographically first
    # file in each group). If False, the run is a dry run.
    delete_duplicates: bool = False

    # Skip the confirmation prompt before deleting.
    assume_yes: bool = False

    # Path to a report file listing the outcome for every deleted path.
    # If None, no deletion report will be generated.
    delete_report_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        """
        Post-initialization method to normalize and validate
        the configuration parameters.
        """
        self.scan_folder_path = self.normalize_dir_path(self.scan_folder_path)
        self.excluded_names = self.normalize_names(self.excluded_names)
        self.walk_batch_width = self.normalize_batch_width(
            self.walk_batch_width,
            default=walker.DEFAULT_BATCH_WIDTH,
            recommended_max=MAX_RECOMMENDED_WALK_BATCH)
        self.hash_batch_width = self.normalize_batch_width(
            self.hash_batch_width,
            default=verifier.DEFAULT_BATCH_WIDTH,
            recommended_max=MAX_RECOMMENDED_HASH_BATCH)
        self.chunk_size = self.normalize_chunk_size(self.chunk_size_str)
        self.report_file_path = self.normalize_file_path(
            self.report_file_path
        ) or self.default_report_path()
        self.delete_report_file_path = self.normalize_file_path(
            self.delete_report_file_path
        )

    # Utility functions for normalization
    @staticmethod
    def normalize_dir_path(folder_path: str) -> str:
        """
        Resolve the folder to scan to an absolute path.
        """
        path = Path(folder_path).expanduser().resolve()
        if not path.is_dir():
            raise NotADirectory(str(path))
        return str(path)

    @staticmethod
    def normalize_file_path(file_path: str | None) -> str | None:
        if file_path is None:
            return None
        return str(Path(file_path).expanduser().resolve())

    @staticmethod
    def normalize_names(names: list[str] | None) -> list[str]:
        """
        Strip whitespace, drop empty names and duplicates.
        """
        if names is None:
            return sorted(walker.DEFAULT_EXCLUDED_NAMES)
        result = []
        for name in names:
            name = name.strip()
            if name and name not in result:
                result.append(name)
        return result

    @staticmethod
    def normalize_batch_width(width: int | None,
                              default: int,
                              recommended_max: int) -> int:
        if width is None or width <= 0:
            return default
        if width > recommended_max:
            logger.warning(
                "Using a batch width of %d, which is more than the"
                " recommended maximum of %d.", width, recommended_max)
        return width

    @staticmethod
    def normalize_chunk_size(size: str) -> int:
        try:
            chunk_size = str_file_size_to_int(size)
        except ValueError as e:
            raise ValueError(f"Invalid chunk size '{size}': {e}") from e
        if chunk_size <= 0:
            raise ValueError(f"Chunk size must be positive, got '{size}'")
        return chunk_size

    @staticmethod
    def default_report_path() -> str:
        return str(Path(f"duplicates-{report_timestamp()}.txt").resolve())
