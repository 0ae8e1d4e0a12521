# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging

from dupe_planner import utils
from dupe_planner.models import ContentGroup, DeletionPlan, DeletionResult

logger = logging.getLogger(__name__)


def print_duplicates(groups: list[ContentGroup]) -> None:
    # Print found duplicates in grouped format
    if not groups:
        print("No duplicates found.")
        return

    total_groups = len(groups)

    print("\nDuplicate files:")
    for idx, group in enumerate(groups, start=1):
        print(
            f"\nGroup {idx}/{total_groups} ({len(group.paths)}"
            f" file(s), size: {utils.int_file_size_to_str(group.size)}):"
        )
        print(f"  [KEEP] {group.keeper}")
        for path in group.duplicates:
            print(f"  [DELETE] {path}")


def save_report_to_file(groups: list[ContentGroup],
                        output_report_path: str) -> bool:
    """
    Write the duplicate groups with their keeper and deletion candidates.

    Returns False if the report could not be written; the run goes on
    without it.
    """
    try:
        with open(output_report_path, "w", encoding="utf-8") as f:
            f.write("Duplicate files found:\n")
            for group in groups:
                f.write(
                    f"\nSize: {utils.int_file_size_to_str(group.size)}"
                    f" ({len(group.paths)} copies)\n"
                )
                f.write(f"  [KEEP] {group.keeper}\n")
                for path in group.duplicates:
                    f.write(f"  [DELETE] {path}\n")
    except OSError as e:
        logger.error("Failed to save to file %s: %s", output_report_path, e)
        return False
    print(f"\nDuplicate information saved to: {output_report_path}")
    return True


def print_plan_summary(plan: DeletionPlan) -> None:
    print(
        f"\nFiles marked for deletion: {len(plan)}"
        f"\nTotal space that would be freed:"
        f" {utils.int_file_size_to_str(plan.total_reclaimable_bytes)}"
    )


def print_deletion_result(result: DeletionResult) -> None:
    if result.dry_run:
        print("\n[DRY RUN]")
        for path in result.deleted:
            print(f"[would delete] {path}")
        print("\nNote: This was a dry run. No files were deleted.")
        print("To actually delete the files, run with the --delete flag.")
        return

    if result.deleted:
        print("\nSuccessfully deleted:")
        for path in result.deleted:
            print(f"  {path}")
    if result.failed:
        print("\nFailed to delete:")
        for failure in result.failed:
            print(f"  {failure.path} (Error: {failure.error})")
    print(
        f"\nDeletion complete. Freed"
        f" {utils.int_file_size_to_str(result.freed_bytes)} of space."
    )


def save_deletion_report(result: DeletionResult, report_path: str) -> bool:
    """Write one line per planned path with its deletion outcome."""
    if result.dry_run:
        lines = [f"[would delete] {path}" for path in result.deleted]
    else:
        lines = [f"Deleted: {path}" for path in result.deleted]
        lines += [f"FAILED: {failure.path} ({failure.error})"
                  for failure in result.failed]
    try:
        with open(report_path, "w", encoding="utf-8") as f:
            f.write("Duplicate File Deletion Report\n" + "=" * 30 + "\n")
            f.writelines(line + "\n" for line in lines)
    except OSError as e:
        logger.error("Failed to save report: %s", e)
        return False
    print(f"Report saved to: {report_path}")
    return True
