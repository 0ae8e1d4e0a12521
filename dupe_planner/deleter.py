# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging
from pathlib import Path

from dupe_planner.models import DeletionFailure, DeletionPlan, DeletionResult

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 10


def delete_files(plan: DeletionPlan, dry_run: bool = True) -> DeletionResult:
    """
    Remove every file of the plan, in plan order.

    A failed removal is recorded with its reason and does not stop the
    remaining ones. With `dry_run` nothing is removed and every entry is
    reported as deletable.
    """
    result = DeletionResult(dry_run=dry_run)
    total = len(plan)

    for i, entry in enumerate(plan, 1):
        if dry_run:
            result.deleted.append(entry.path)
            result.freed_bytes += entry.size
            continue

        try:
            Path(entry.path).unlink()
        except OSError as e:
            logger.error("Failed to delete %s: %s", entry.path, e)
            result.failed.append(DeletionFailure(path=entry.path,
                                                 error=str(e)))
        else:
            logger.debug("Deleted: %s", entry.path)
            result.deleted.append(entry.path)
            result.freed_bytes += entry.size

        if i % PROGRESS_INTERVAL == 0 or i == total:
            logger.info("Deleted %d/%d files...", i, total)

    return result
