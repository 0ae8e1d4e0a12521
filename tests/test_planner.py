# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from dupe_planner.models import ContentGroup, DeletionEntry
from dupe_planner.planner import build_plan


def test_keeper_is_lexicographically_smallest() -> None:
    group = ContentGroup(digest="d1", size=5,
                         paths=("/t/b.txt", "/t/a.txt"))
    index = {"/t/a.txt": 5, "/t/b.txt": 5}

    plan = build_plan([group], index)

    assert group.keeper == "/t/a.txt"
    assert plan.entries == [DeletionEntry("/t/b.txt", 5)]
    assert plan.total_reclaimable_bytes == 5


def test_ordering_is_case_sensitive() -> None:
    # Upper case sorts before lower case
    group = ContentGroup(digest="d1", size=3,
                         paths=("/t/a.txt", "/t/B.txt", "/t/C.txt"))
    index = dict.fromkeys(group.paths, 3)

    plan = build_plan([group], index)

    assert group.keeper == "/t/B.txt"
    assert plan.paths == ["/t/C.txt", "/t/a.txt"]


def test_ordering_is_by_code_point() -> None:
    # U+E000 sorts before U+1F600 by code point
    private_use = "/t/\ue000.txt"
    emoji = "/t/\U0001F600.txt"
    group = ContentGroup(digest="d1", size=4, paths=(emoji, private_use))

    plan = build_plan([group], dict.fromkeys(group.paths, 4))

    assert group.keeper == private_use
    assert plan.paths == [emoji]


def test_every_non_keeper_appears_once_in_sorted_order() -> None:
    groups = [
        ContentGroup(digest="d1", size=10,
                     paths=("/t/z", "/t/m", "/t/a", "/t/q")),
        ContentGroup(digest="d2", size=2,
                     paths=("/u/2", "/u/1")),
    ]
    index = {**dict.fromkeys(groups[0].paths, 10),
             **dict.fromkeys(groups[1].paths, 2)}

    plan = build_plan(groups, index)

    assert plan.paths == ["/t/m", "/t/q", "/t/z", "/u/2"]
    assert len(plan) == sum(len(g.paths) - 1 for g in groups)
    for group in groups:
        assert group.keeper == min(group.paths)
        assert group.keeper not in plan.paths
    assert plan.total_reclaimable_bytes == 3 * 10 + 2


def test_total_comes_from_size_index() -> None:
    group = ContentGroup(digest="d1", size=0, paths=("/t/a", "/t/b"))
    plan = build_plan([group], {"/t/a": 7, "/t/b": 7})
    assert plan.total_reclaimable_bytes == 7


def test_empty_plan() -> None:
    plan = build_plan([], {})
    assert plan.entries == []
    assert len(plan) == 0
    assert plan.total_reclaimable_bytes == 0


def test_same_input_same_plan() -> None:
    groups = [ContentGroup(digest="d", size=1, paths=("/c", "/a", "/b"))]
    index = dict.fromkeys(groups[0].paths, 1)
    assert build_plan(groups, index) == build_plan(groups, index)
