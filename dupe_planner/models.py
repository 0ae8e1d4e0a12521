# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from dataclasses import dataclass, field
from typing import Iterator

from dupe_planner.errors import DupePlannerError

# size -> paths sharing that size
SizeGroups = dict[int, list[str]]

# path -> size, built once from the enumeration
PathSizeIndex = dict[str, int]


@dataclass(frozen=True)
class FileRecord:
    path: str
    size: int


@dataclass(frozen=True)
class ContentGroup:
    """
    Files whose full content digests are identical.

    Paths are kept in case-sensitive lexicographic order, so the first
    one is always the file that survives deletion.
    """

    digest: str
    size: int
    paths: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "paths", tuple(sorted(self.paths)))

    @property
    def keeper(self) -> str:
        return self.paths[0]

    @property
    def duplicates(self) -> tuple[str, ...]:
        return self.paths[1:]


@dataclass(frozen=True)
class DeletionEntry:
    path: str
    size: int


@dataclass
class DeletionPlan:
    entries: list[DeletionEntry] = field(default_factory=list)
    total_reclaimable_bytes: int = 0

    def __iter__(self) -> Iterator[DeletionEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self.entries]


@dataclass(frozen=True)
class DeletionFailure:
    path: str
    error: str


@dataclass
class DeletionResult:
    dry_run: bool = True
    deleted: list[str] = field(default_factory=list)
    failed: list[DeletionFailure] = field(default_factory=list)
    freed_bytes: int = 0


@dataclass
class ScanResult:
    """Everything a run hands over to the report and deletion steps."""

    root: str
    content_groups: list[ContentGroup] = field(default_factory=list)
    plan: DeletionPlan = field(default_factory=DeletionPlan)
    size_index: PathSizeIndex = field(default_factory=dict)
    # Recovered per-entry and per-file failures, in the order seen
    failures: list[DupePlannerError] = field(default_factory=list)
