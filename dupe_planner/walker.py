# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import logging
import os
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from dupe_planner.errors import EntryReadFailure, NotADirectory
from dupe_planner.models import FileRecord
from dupe_planner.utils import batched

logger = logging.getLogger(__name__)

# Synology NAS metadata folders
DEFAULT_EXCLUDED_NAMES = frozenset({"@eaDir"})
DEFAULT_BATCH_WIDTH = 100
PROGRESS_INTERVAL = 1000

_FILE = "file"
_DIRECTORY = "directory"
_SKIP = "skip"
_FAILED = "failed"


def _list_directory(path: str) -> list[os.DirEntry]:
    with os.scandir(path) as it:
        return list(it)


def _inspect_entry(entry: os.DirEntry) -> tuple[str, object]:
    # Runs on a worker thread; must not touch shared state
    try:
        if entry.is_symlink():
            # A dangling link raises here and is reported. Live links are
            # never recorded or descended into, so a target is not planned
            # for deletion through its alias and link cycles cannot occur.
            os.stat(entry.path)
            return _SKIP, entry.path
        if entry.is_dir(follow_symlinks=False):
            return _DIRECTORY, entry.path
        if not entry.is_file(follow_symlinks=False):
            return _SKIP, entry.path
        size = entry.stat(follow_symlinks=False).st_size
        return _FILE, FileRecord(path=entry.path, size=size)
    except OSError as e:
        return _FAILED, EntryReadFailure(entry.path, e)


def walk(
    root: str,
    excluded_names: Iterable[str] | None = DEFAULT_EXCLUDED_NAMES,
    batch_width: int = DEFAULT_BATCH_WIDTH,
    on_error: Callable[[EntryReadFailure], None] | None = None,
) -> list[FileRecord]:
    """
    Recursively enumerate the regular files under `root`.

    Entries whose name is in `excluded_names` are skipped together with
    everything below them. Entries of a directory are inspected in
    parallel batches of `batch_width`, each batch joined before the next
    is started. Unreadable entries are logged, handed to `on_error` and
    skipped.

    Raises:
        NotADirectory: `root` does not resolve to a directory.
    """
    root_path = Path(root).expanduser().resolve()
    if not root_path.is_dir():
        raise NotADirectory(str(root_path))

    excluded = frozenset(excluded_names or ())
    records: list[FileRecord] = []
    pending = deque([str(root_path)])
    skipped = 0

    def fail(failure: EntryReadFailure) -> None:
        logger.warning("%s", failure)
        if on_error is not None:
            on_error(failure)

    logger.info("Scanning folder: %s", root_path)
    with ThreadPoolExecutor(max_workers=batch_width) as executor:
        while pending:
            directory = pending.popleft()
            try:
                entries = _list_directory(directory)
            except OSError as e:
                fail(EntryReadFailure(directory, e))
                continue

            kept = []
            for entry in entries:
                if entry.name in excluded:
                    logger.debug("Excluded: %s", entry.path)
                    skipped += 1
                else:
                    kept.append(entry)

            for batch in batched(kept, batch_width):
                for kind, value in executor.map(_inspect_entry, batch):
                    if kind == _FILE:
                        records.append(value)
                        if len(records) % PROGRESS_INTERVAL == 0:
                            logger.debug("Processed %d files...",
                                         len(records))
                    elif kind == _DIRECTORY:
                        pending.append(value)
                    elif kind == _FAILED:
                        fail(value)
                    else:
                        logger.debug("Not a regular file, skipped: %s",
                                     value)

    logger.info("Scanning finished. Found %d files.", len(records))
    if skipped:
        logger.info("Skipped %d excluded entries (%s)",
                    skipped, ", ".join(sorted(excluded)))
    return records
