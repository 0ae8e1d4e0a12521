# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging

from dupe_planner import deleter, report, verifier, walker
from dupe_planner.duplicate_finder_config import DuplicateFinderConfig
from dupe_planner.grouping import build_size_index, group_by_size
from dupe_planner.models import DeletionResult, ScanResult
from dupe_planner.planner import build_plan

logger = logging.getLogger(__name__)


class DuplicateFinder:
    def __init__(self) -> None:
        # Results of the last run
        self.result: ScanResult | None = None
        self.deletion_result: DeletionResult | None = None

    def scan(self, config: DuplicateFinderConfig) -> ScanResult:
        """
        Find duplicate groups and build the deletion plan.

        Nothing on disk is modified. Only an invalid scan folder aborts
        the scan; unreadable entries and files are collected in
        `ScanResult.failures`.
        """
        result = ScanResult(root=config.scan_folder_path)
        self.result = result

        # Stage 1: Scan the folder
        records = walker.walk(
            config.scan_folder_path,
            excluded_names=config.excluded_names,
            batch_width=config.walk_batch_width,
            on_error=result.failures.append)
        if not records:
            logger.info("No files found or all files are excluded.")
            return result
        result.size_index = build_size_index(records)

        # Stage 2: Files of a unique size cannot be duplicates
        size_groups = group_by_size(records)
        records.clear()
        if not size_groups:
            logger.info("No potential duplicates found after filtering"
                        " by size.")
            return result

        # Stage 3: Hash files that have the same size
        result.content_groups = verifier.verify(
            size_groups,
            batch_width=config.hash_batch_width,
            chunk_size=config.chunk_size,
            on_error=result.failures.append)
        size_groups.clear()
        if not result.content_groups:
            logger.info("No duplicate files found after content"
                        " verification.")
            return result

        # Stage 4: Pick keepers and list everything else
        result.plan = build_plan(result.content_groups, result.size_index)
        return result

    def run(self, config: DuplicateFinderConfig) -> ScanResult:
        """
        Scan, report the duplicates and carry out the deletion plan
        (or only list it, unless deletion was requested and confirmed).
        """
        self.deletion_result = None
        result = self.scan(config)

        if result.failures:
            logger.warning("%d entries could not be read and were skipped",
                           len(result.failures))

        if not result.content_groups:
            print("No duplicates found.")
            return result

        report.print_duplicates(result.content_groups)
        report.save_report_to_file(result.content_groups,
                                   config.report_file_path)
        report.print_plan_summary(result.plan)

        dry_run = not config.delete_duplicates
        if not dry_run and not config.assume_yes:
            confirm = (
                input(
                    "\nAre you sure you want to"
                    " delete duplicate files? (y/[n]): "
                )
                .strip()
                .lower()
            )
            if confirm != "y":
                print("Deletion cancelled.")
                return result

        self.deletion_result = deleter.delete_files(result.plan,
                                                    dry_run=dry_run)
        report.print_deletion_result(self.deletion_result)
        if config.delete_report_file_path:
            report.save_deletion_report(self.deletion_result,
                                        config.delete_report_file_path)
        return result
