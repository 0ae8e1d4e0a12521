# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import argparse

from dupe_planner import verifier, walker


class ArgumentParserAdapter:
    def __init__(self):
        # Initialize the argument parser with a description
        self.parser = argparse.ArgumentParser(
            prog="dupe-planner",
            description="Find duplicate files and plan their deletion."
                        " Runs as a dry run unless --delete is given.",
        )
        self._add_arguments()

    def _add_arguments(self):
        self.parser.add_argument(
            "folder_path",
            type=str,
            help="Mandatory parameter: path to folder for search",
        )
        self.parser.add_argument(
            "--exclude",
            "-e",
            type=str,
            nargs="*",
            default=None,
            metavar="NAME",
            help="Optional: file or folder names to skip at any depth"
                 " (default: "
                 f"{', '.join(sorted(walker.DEFAULT_EXCLUDED_NAMES))})",
        )
        self.parser.add_argument(
            "--output",
            "-o",
            type=str,
            help="Optional: path to the duplicates report"
                 " (default: duplicates-<timestamp>.txt)",
        )
        self.parser.add_argument(
            "--delete",
            action="store_true",
            help="Optional: actually delete duplicate files"
                 " (keeps the first path of each group in sorted order)",
        )
        self.parser.add_argument(
            "--yes",
            "-y",
            action="store_true",
            help="Optional: do not ask for confirmation before deleting",
        )
        self.parser.add_argument(
            "--delete-report",
            type=str,
            help="Optional: path to report file where deleted"
                 " file paths will be saved",
        )
        self.parser.add_argument(
            "--walk-batch",
            type=int,
            default=walker.DEFAULT_BATCH_WIDTH,
            help="Optional: directory entries inspected at once"
                 f" (default: {walker.DEFAULT_BATCH_WIDTH})",
        )
        self.parser.add_argument(
            "--hash-batch",
            type=int,
            default=verifier.DEFAULT_BATCH_WIDTH,
            help="Optional: files hashed at once"
                 f" (default: {verifier.DEFAULT_BATCH_WIDTH})",
        )
        self.parser.add_argument(
            "--chunk-size",
            type=str,
            default="1MiB",
            help="Optional: read buffer used while hashing"
                 " (e.g. 64K, 1MiB)",
        )

        verbosity = self.parser.add_mutually_exclusive_group()
        verbosity.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Optional: show per-file progress",
        )
        verbosity.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Optional: only show warnings and errors",
        )

    def parse(self, argv: list[str] | None = None) -> argparse.Namespace:
        # Parse and return the command-line arguments
        return self.parser.parse_args(argv)
