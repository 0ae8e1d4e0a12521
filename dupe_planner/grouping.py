# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging
from collections import defaultdict
from typing import Hashable, Iterable, TypeVar

from dupe_planner.models import FileRecord, PathSizeIndex, SizeGroups

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def drop_singletons(groups: dict[K, list[str]]) -> dict[K, list[str]]:
    # A group can only be judged once every candidate has been inserted
    return {key: paths for key, paths in groups.items() if len(paths) > 1}


def group_by_size(records: Iterable[FileRecord]) -> SizeGroups:
    """Bucket paths by exact byte size, keeping buckets of two or more."""
    files_by_size: dict[int, list[str]] = defaultdict(list)
    for record in records:
        files_by_size[record.size].append(record.path)

    result = drop_singletons(files_by_size)
    logger.info("Found %d unique file sizes, %d potential duplicate groups",
                len(files_by_size), len(result))
    return result


def build_size_index(records: Iterable[FileRecord]) -> PathSizeIndex:
    return {record.path: record.size for record in records}
