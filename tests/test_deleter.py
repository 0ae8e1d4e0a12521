# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from pathlib import Path

import pytest

from dupe_planner import report
from dupe_planner.deleter import delete_files
from dupe_planner.models import (
    ContentGroup,
    DeletionEntry,
    DeletionFailure,
    DeletionPlan,
    DeletionResult,
)


def create_file(path: Path, content: bytes = b"dupe") -> str:
    path.write_bytes(content)
    return str(path)


def make_plan(*paths: str, size: int = 4) -> DeletionPlan:
    return DeletionPlan(
        entries=[DeletionEntry(path, size) for path in paths],
        total_reclaimable_bytes=size * len(paths),
    )


def test_dry_run_keeps_files(tmp_path: Path) -> None:
    a = create_file(tmp_path / "a.txt")
    b = create_file(tmp_path / "b.txt")

    result = delete_files(make_plan(a, b))

    assert result.dry_run
    assert result.deleted == [a, b]
    assert result.freed_bytes == 8
    assert Path(a).exists() and Path(b).exists()


def test_deletes_in_plan_order(tmp_path: Path) -> None:
    a = create_file(tmp_path / "a.txt")
    b = create_file(tmp_path / "b.txt")

    result = delete_files(make_plan(b, a), dry_run=False)

    assert result.deleted == [b, a]
    assert result.failed == []
    assert result.freed_bytes == 8
    assert not Path(a).exists() and not Path(b).exists()


def test_failure_is_recorded_and_pass_continues(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.txt")
    b = create_file(tmp_path / "b.txt")

    result = delete_files(make_plan(missing, b), dry_run=False)

    assert result.deleted == [b]
    assert [f.path for f in result.failed] == [missing]
    assert result.failed[0].error
    assert result.freed_bytes == 4


def test_empty_plan() -> None:
    result = delete_files(DeletionPlan(), dry_run=False)
    assert result == DeletionResult(dry_run=False)


# report
def test_save_report_to_file(tmp_path: Path) -> None:
    group = ContentGroup(digest="d", size=2048,
                         paths=("/t/b.txt", "/t/a.txt", "/t/c.txt"))
    output = tmp_path / "duplicates.txt"

    assert report.save_report_to_file([group], str(output))

    assert output.read_text(encoding="utf-8").splitlines() == [
        "Duplicate files found:",
        "",
        "Size: 2.0 KB (3 copies)",
        "  [KEEP] /t/a.txt",
        "  [DELETE] /t/b.txt",
        "  [DELETE] /t/c.txt",
    ]


def test_save_report_to_unwritable_path(tmp_path: Path) -> None:
    group = ContentGroup(digest="d", size=1, paths=("/t/a", "/t/b"))
    target = tmp_path / "missing_dir" / "report.txt"
    assert not report.save_report_to_file([group], str(target))


def test_print_duplicates(capsys: pytest.CaptureFixture[str]) -> None:
    group = ContentGroup(digest="d", size=5, paths=("/t/b", "/t/a"))

    report.print_duplicates([group])

    out = capsys.readouterr().out
    assert "Group 1/1 (2 file(s), size: 5 B)" in out
    assert "[KEEP] /t/a" in out
    assert "[DELETE] /t/b" in out


def test_print_plan_summary(capsys: pytest.CaptureFixture[str]) -> None:
    report.print_plan_summary(make_plan("/t/b", size=1536))
    assert "Total space that would be freed: 1.5 KB" in (
        capsys.readouterr().out)


def test_save_deletion_report(tmp_path: Path) -> None:
    result = DeletionResult(
        dry_run=False,
        deleted=["/t/b"],
        failed=[DeletionFailure("/t/c", "Permission denied")],
        freed_bytes=4,
    )
    output = tmp_path / "deleted.txt"

    assert report.save_deletion_report(result, str(output))

    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[2:] == ["Deleted: /t/b", "FAILED: /t/c (Permission denied)"]


def test_print_dry_run_result(capsys: pytest.CaptureFixture[str]) -> None:
    report.print_deletion_result(DeletionResult(dry_run=True,
                                                deleted=["/t/b"]))
    out = capsys.readouterr().out
    assert "[would delete] /t/b" in out
    assert "No files were deleted" in out
