# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import hashlib
import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from dupe_planner import utils
from dupe_planner.errors import HashComputeFailure
from dupe_planner.grouping import drop_singletons
from dupe_planner.models import ContentGroup, SizeGroups

logger = logging.getLogger(__name__)

DEFAULT_BATCH_WIDTH = 10
DEFAULT_CHUNK_SIZE = 1024 * 1024


def calc_file_digest(file_path: str,
                     chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Compute the SHA-256 hex digest of a file, read in fixed-size chunks."""
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def verify(
    size_groups: SizeGroups,
    batch_width: int = DEFAULT_BATCH_WIDTH,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_error: Callable[[HashComputeFailure], None] | None = None,
) -> list[ContentGroup]:
    """
    Split every size group into groups of files with identical content.

    Size groups are handled smallest first. Inside a group the files are
    hashed in parallel batches of `batch_width`; a batch is joined before
    the next one starts, so at most `batch_width` files are open at once.
    A file that cannot be read is logged, handed to `on_error` and left
    out of every group.

    Returns the groups of two or more identical files, ordered by size
    and then by keeper path.
    """
    if not size_groups:
        logger.info("No files to hash, skipping hashing step.")
        return []

    total_groups = len(size_groups)
    total_files = sum(len(paths) for paths in size_groups.values())
    processed_files = 0
    content_groups: list[ContentGroup] = []

    def hash_worker(path: str) -> tuple[str, str | HashComputeFailure]:
        try:
            return path, calc_file_digest(path, chunk_size)
        except OSError as e:
            return path, HashComputeFailure(path, e)

    logger.info("Hashing %d potential duplicates in %d size groups...",
                total_files, total_groups)
    with ThreadPoolExecutor(max_workers=batch_width) as executor:
        for group_idx, size in enumerate(sorted(size_groups), 1):
            paths = size_groups[size]
            logger.debug("Processing group of %d files of size %s",
                         len(paths), utils.int_file_size_to_str(size))

            # Only the controlling thread writes to this mapping
            files_by_digest: dict[str, list[str]] = defaultdict(list)
            for batch in utils.batched(paths, batch_width):
                for path, outcome in executor.map(hash_worker, batch):
                    processed_files += 1
                    if isinstance(outcome, HashComputeFailure):
                        logger.warning("%s", outcome)
                        if on_error is not None:
                            on_error(outcome)
                    else:
                        files_by_digest[outcome].append(path)

            for digest, members in drop_singletons(files_by_digest).items():
                content_groups.append(
                    ContentGroup(digest=digest, size=size,
                                 paths=tuple(members))
                )
            logger.debug("Verified %d/%d files, %d/%d size groups",
                         processed_files, total_files, group_idx, total_groups)

    content_groups.sort(key=lambda group: (group.size, group.keeper))
    logger.info("Found %d groups of true duplicates", len(content_groups))
    return content_groups
