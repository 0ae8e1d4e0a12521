# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging
import sys

from dupe_planner.cli_args import ArgumentParserAdapter
from dupe_planner.duplicate_finder import DuplicateFinder
from dupe_planner.duplicate_finder_config import DuplicateFinderConfig
from dupe_planner.errors import NotADirectory


def main(argv: list[str] | None = None) -> None:
    # Parse command-line arguments (folder path, flags, etc.)
    args = ArgumentParserAdapter().parse(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        config = DuplicateFinderConfig(
            scan_folder_path=args.folder_path,
            excluded_names=args.exclude,
            walk_batch_width=args.walk_batch,
            hash_batch_width=args.hash_batch,
            chunk_size_str=args.chunk_size,
            report_file_path=args.output,
            delete_duplicates=args.delete,
            assume_yes=args.yes,
            delete_report_file_path=args.delete_report,
        )
    except ValueError as e:
        # NotADirectory included
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        DuplicateFinder().run(config=config)
    except NotADirectory as e:
        # Folder removed after the config was validated
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


# Allow running the script directly
if __name__ == "__main__":
    main()
