# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from typing import Iterable

from dupe_planner.models import (
    ContentGroup,
    DeletionEntry,
    DeletionPlan,
    PathSizeIndex,
)


def build_plan(content_groups: Iterable[ContentGroup],
               size_index: PathSizeIndex) -> DeletionPlan:
    """
    Mark every file but one of each duplicate group for deletion.

    The lexicographically smallest path of a group is kept; the others
    follow in sorted order, so an unchanged tree always yields the same
    plan.
    """
    plan = DeletionPlan()
    for group in content_groups:
        for path in sorted(group.paths)[1:]:  # first one is the keeper
            size = size_index[path]
            plan.entries.append(DeletionEntry(path=path, size=size))
            plan.total_reclaimable_bytes += size
    return plan
