"""Tests for porcelain v2 parsing and pair construction."""

from gitbadges.enums import StatusKind, StatusShow
from gitbadges.repository import (
    CLEAN_CHECK_OPTIONS,
    SNAPSHOT_OPTIONS,
    DeltaPair,
    StatusDelta,
    StatusOptions,
    parse_porcelain_v2,
)
from gitbadges.repository._enumerator import _build_pairs, _status_args

SHA = "0123456789abcdef0123456789abcdef01234567"


def _ordinary(xy: str, path: str) -> str:
    return f"1 {xy} N... 100644 100644 100644 {SHA} {SHA} {path}"


def _renamed(xy: str, path: str) -> str:
    return f"2 {xy} N... 100644 100644 100644 {SHA} {SHA} R100 {path}"


def _unmerged(path: str) -> str:
    return f"u UU N... 100644 100644 100644 100644 {SHA} {SHA} {SHA} {path}"


def _output(*records: str) -> str:
    return "\0".join(records) + "\0"


class TestParsePorcelainV2:
    def test_ordinary_record(self) -> None:
        entries = list(parse_porcelain_v2(_output(_ordinary("M.", "a.txt"))))
        assert entries == [("a.txt", StatusKind.MODIFIED, StatusKind.UNMODIFIED, None)]

    def test_worktree_change(self) -> None:
        entries = list(parse_porcelain_v2(_output(_ordinary(".M", "a.txt"))))
        assert entries == [("a.txt", StatusKind.UNMODIFIED, StatusKind.MODIFIED, None)]

    def test_path_with_spaces(self) -> None:
        entries = list(parse_porcelain_v2(_output(_ordinary("A.", "my file.txt"))))
        assert entries[0][0] == "my file.txt"

    def test_added_deleted_and_typechange_letters(self) -> None:
        output = _output(
            _ordinary("A.", "added.txt"),
            _ordinary(".D", "deleted.txt"),
            _ordinary(".T", "link"),
        )
        statuses = [(path, x, y) for path, x, y, _ in parse_porcelain_v2(output)]
        assert statuses == [
            ("added.txt", StatusKind.ADDED, StatusKind.UNMODIFIED),
            ("deleted.txt", StatusKind.UNMODIFIED, StatusKind.DELETED),
            ("link", StatusKind.UNMODIFIED, StatusKind.TYPECHANGE),
        ]

    def test_renamed_record_consumes_original_path(self) -> None:
        output = _output(_renamed("R.", "new.txt"), "old.txt", _ordinary(".M", "b.txt"))
        entries = list(parse_porcelain_v2(output))
        assert entries == [
            ("new.txt", StatusKind.RENAMED, StatusKind.UNMODIFIED, "old.txt"),
            ("b.txt", StatusKind.UNMODIFIED, StatusKind.MODIFIED, None),
        ]

    def test_unmerged_record_is_conflicted(self) -> None:
        entries = list(parse_porcelain_v2(_output(_unmerged("c.txt"))))
        assert entries == [("c.txt", None, StatusKind.CONFLICTED, None)]

    def test_untracked_and_ignored_records(self) -> None:
        entries = list(parse_porcelain_v2(_output("? new.txt", "! build/out.o")))
        assert entries == [
            ("new.txt", None, StatusKind.UNTRACKED, None),
            ("build/out.o", None, StatusKind.IGNORED, None),
        ]

    def test_headers_are_skipped(self) -> None:
        output = _output("# branch.oid (initial)", "# branch.head main", "? a.txt")
        assert [entry[0] for entry in parse_porcelain_v2(output)] == ["a.txt"]

    def test_unknown_letter_is_unreadable(self) -> None:
        entries = list(parse_porcelain_v2(_output(_ordinary("Z.", "odd.txt"))))
        assert entries == [("odd.txt", StatusKind.UNREADABLE, StatusKind.UNMODIFIED, None)]

    def test_truncated_record_is_unreadable(self) -> None:
        entries = list(parse_porcelain_v2(_output("1 M. N... broken.txt")))
        assert entries == [("broken.txt", None, StatusKind.UNREADABLE, None)]

    def test_unknown_record_kind_is_unreadable(self) -> None:
        entries = list(parse_porcelain_v2(_output("x mystery.txt")))
        assert entries == [("mystery.txt", None, StatusKind.UNREADABLE, None)]

    def test_empty_output(self) -> None:
        assert list(parse_porcelain_v2("")) == []


class TestStatusArgs:
    def test_snapshot_options(self) -> None:
        assert _status_args(SNAPSHOT_OPTIONS) == [
            "--porcelain=v2",
            "-z",
            "--untracked-files=all",
            "--ignored=traditional",
            "--renames",
        ]

    def test_clean_check_options(self) -> None:
        assert _status_args(CLEAN_CHECK_OPTIONS) == [
            "--porcelain=v2",
            "-z",
            "--untracked-files=normal",
            "--ignored=no",
            "--no-renames",
        ]

    def test_default_options_exclude_untracked(self) -> None:
        assert "--untracked-files=no" in _status_args(StatusOptions())


class TestBuildPairs:
    def test_unmodified_view_is_dropped_by_default(self) -> None:
        entries = iter([("a.txt", StatusKind.MODIFIED, StatusKind.UNMODIFIED, None)])

        pairs = _build_pairs(entries, frozenset(), StatusOptions())

        assert pairs == [
            DeltaPair(head_to_index=StatusDelta("a.txt", StatusKind.MODIFIED))
        ]

    def test_rename_keeps_original_path(self) -> None:
        entries = iter([("new.txt", StatusKind.RENAMED, StatusKind.UNMODIFIED, "old.txt")])

        pairs = _build_pairs(entries, frozenset(), SNAPSHOT_OPTIONS)

        assert pairs[0].head_to_index == StatusDelta(
            "new.txt", StatusKind.RENAMED, old_path="old.txt"
        )

    def test_tracked_files_without_records_are_unmodified(self) -> None:
        entries = iter([("b.txt", None, StatusKind.UNTRACKED, None)])

        pairs = _build_pairs(entries, frozenset({"a.txt"}), SNAPSHOT_OPTIONS)

        assert pairs == [
            DeltaPair(
                head_to_index=StatusDelta("a.txt", StatusKind.UNMODIFIED),
                index_to_workdir=StatusDelta("a.txt", StatusKind.UNMODIFIED),
            ),
            DeltaPair(index_to_workdir=StatusDelta("b.txt", StatusKind.UNTRACKED)),
        ]

    def test_untracked_and_ignored_filtered_by_options(self) -> None:
        entries = iter(
            [
                ("b.txt", None, StatusKind.UNTRACKED, None),
                ("c.o", None, StatusKind.IGNORED, None),
            ]
        )
        assert _build_pairs(entries, frozenset(), StatusOptions()) == []

    def test_index_only_drops_workdir_view(self) -> None:
        entries = iter([("a.txt", StatusKind.ADDED, StatusKind.MODIFIED, None)])
        options = StatusOptions(show=StatusShow.INDEX_ONLY)

        pairs = _build_pairs(entries, frozenset(), options)

        assert pairs == [DeltaPair(head_to_index=StatusDelta("a.txt", StatusKind.ADDED))]

    def test_workdir_only_drops_index_view(self) -> None:
        entries = iter([("a.txt", StatusKind.ADDED, StatusKind.MODIFIED, None)])
        options = StatusOptions(show=StatusShow.WORKDIR_ONLY)

        pairs = _build_pairs(entries, frozenset(), options)

        assert pairs == [
            DeltaPair(index_to_workdir=StatusDelta("a.txt", StatusKind.MODIFIED))
        ]

    def test_pairs_are_sorted_by_path(self) -> None:
        entries = iter(
            [
                ("z.txt", StatusKind.ADDED, None, None),
                ("a.txt", StatusKind.ADDED, None, None),
            ]
        )
        pairs = _build_pairs(entries, frozenset(), StatusOptions())
        assert [pair.head_to_index.path for pair in pairs if pair.head_to_index] == [
            "a.txt",
            "z.txt",
        ]

    def test_records_for_one_path_are_joined(self) -> None:
        entries = iter(
            [
                ("a.txt", StatusKind.DELETED, StatusKind.UNMODIFIED, None),
                ("a.txt", None, StatusKind.UNTRACKED, None),
            ]
        )

        pairs = _build_pairs(entries, frozenset(), SNAPSHOT_OPTIONS)

        assert pairs == [
            DeltaPair(
                head_to_index=StatusDelta("a.txt", StatusKind.DELETED),
                index_to_workdir=StatusDelta("a.txt", StatusKind.UNTRACKED),
            )
        ]

    def test_joined_record_keeps_more_severe_view(self) -> None:
        entries = iter(
            [
                ("a.txt", None, StatusKind.UNTRACKED, None),
                ("a.txt", StatusKind.DELETED, StatusKind.UNMODIFIED, None),
            ]
        )

        pairs = _build_pairs(entries, frozenset(), SNAPSHOT_OPTIONS)

        assert pairs[0].index_to_workdir == StatusDelta("a.txt", StatusKind.UNTRACKED)
        assert pairs[0].head_to_index == StatusDelta("a.txt", StatusKind.DELETED)
