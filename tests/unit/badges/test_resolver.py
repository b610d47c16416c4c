"""Tests for badge resolution."""

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from gitbadges.badges import relative_path, resolve_badge
from gitbadges.enums import BadgeId, StatusKind
from gitbadges.status import StatusSnapshot

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

ROOT = Path("/r")


def _never_locate(path: Path) -> Path | None:
    msg = f"locate must not be called for {path}"
    raise AssertionError(msg)


def _never_clean_check(root: Path) -> bool:
    msg = f"clean check must not be called for {root}"
    raise AssertionError(msg)


def _resolve(
    target: str, snapshot: StatusSnapshot, *, is_directory: bool = False
) -> BadgeId | None:
    return resolve_badge(
        target,
        is_directory=is_directory,
        snapshot=snapshot,
        clean_check=_never_clean_check,
        locate=_never_locate,
    )


class TestRelativePath:
    def test_strips_root_and_separator(self) -> None:
        assert relative_path("/r/src/a.txt", "/r") == "src/a.txt"

    def test_root_itself_is_empty(self) -> None:
        assert relative_path("/r", "/r") == ""

    def test_outside_root_is_none(self) -> None:
        assert relative_path("/other/a.txt", "/r") is None

    def test_accepts_paths(self) -> None:
        assert relative_path(Path("/r/a.txt"), ROOT) == "a.txt"

    def test_sibling_sharing_a_prefix_is_treated_as_inside(self) -> None:
        # Prefix test on strings: /r2 starts with /r.
        assert relative_path("/r2/a.txt", "/r") == "2/a.txt"

    def test_uses_forward_slashes(self) -> None:
        target = os.sep.join(["", "r", "src", "a.txt"])
        root = os.sep.join(["", "r"])
        assert relative_path(target, root) == "src/a.txt"


class TestResolveWithSnapshot:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (StatusKind.UNMODIFIED, BadgeId.GREEN),
            (StatusKind.ADDED, BadgeId.PLUS),
            (StatusKind.DELETED, BadgeId.RED),
            (StatusKind.MODIFIED, BadgeId.ORANGE),
            (StatusKind.RENAMED, BadgeId.ORANGE),
            (StatusKind.COPIED, BadgeId.ORANGE),
            (StatusKind.IGNORED, BadgeId.TRANSPARENT),
            (StatusKind.UNTRACKED, BadgeId.RED),
            (StatusKind.TYPECHANGE, BadgeId.ORANGE),
            (StatusKind.UNREADABLE, BadgeId.RED),
            (StatusKind.CONFLICTED, BadgeId.RED),
        ],
    )
    def test_single_entry_maps_through_table(
        self, status: StatusKind, expected: BadgeId
    ) -> None:
        snapshot = StatusSnapshot(ROOT, {"f.txt": status})
        assert _resolve("/r/f.txt", snapshot) is expected

    def test_directory_with_changed_descendant_is_orange(self) -> None:
        snapshot = StatusSnapshot(
            ROOT, {"a/x.txt": StatusKind.MODIFIED, "a/y.txt": StatusKind.UNMODIFIED}
        )
        assert _resolve("/r/a", snapshot, is_directory=True) is BadgeId.ORANGE

    def test_directory_with_quiet_descendants_is_green(self) -> None:
        snapshot = StatusSnapshot(
            ROOT, {"a/x.txt": StatusKind.UNMODIFIED, "a/y.txt": StatusKind.IGNORED}
        )
        assert _resolve("/r/a", snapshot, is_directory=True) is BadgeId.GREEN

    def test_directory_without_descendants_is_green(self) -> None:
        snapshot = StatusSnapshot(ROOT, {"b/x.txt": StatusKind.MODIFIED})
        assert _resolve("/r/a", snapshot, is_directory=True) is BadgeId.GREEN

    def test_repository_root_rolls_up_everything(self) -> None:
        snapshot = StatusSnapshot(ROOT, {"deep/down/x.txt": StatusKind.ADDED})
        assert _resolve("/r", snapshot, is_directory=True) is BadgeId.ORANGE

    def test_directory_rollup_matches_sibling_sharing_a_prefix(self) -> None:
        snapshot = StatusSnapshot(
            ROOT, {"foo/a.txt": StatusKind.UNMODIFIED, "foobar.txt": StatusKind.MODIFIED}
        )
        assert _resolve("/r/foo", snapshot, is_directory=True) is BadgeId.ORANGE

    def test_trailing_slash_entry_is_not_a_direct_hit(self) -> None:
        snapshot = StatusSnapshot(
            ROOT, {"vendor/": StatusKind.IGNORED, "vendor/x.txt": StatusKind.MODIFIED}
        )
        # Only the exact key "vendor" is a direct hit; "vendor/" joins the rollup.
        assert _resolve("/r/vendor", snapshot, is_directory=True) is BadgeId.ORANGE

    def test_unknown_file_has_no_badge(self) -> None:
        snapshot = StatusSnapshot(ROOT, {"a.txt": StatusKind.MODIFIED})
        assert _resolve("/r/missing.txt", snapshot) is None

    def test_path_outside_root_has_no_badge(self) -> None:
        snapshot = StatusSnapshot(ROOT, {"a.txt": StatusKind.MODIFIED})
        assert _resolve("/elsewhere/a.txt", snapshot) is None
        assert _resolve("/elsewhere", snapshot, is_directory=True) is None

    def test_scenario_modified_and_untracked(self) -> None:
        snapshot = StatusSnapshot(
            ROOT, {"a.txt": StatusKind.MODIFIED, "b.txt": StatusKind.UNTRACKED}
        )

        assert _resolve("/r/a.txt", snapshot) is BadgeId.ORANGE
        assert _resolve("/r/b.txt", snapshot) is BadgeId.RED
        assert _resolve("/r", snapshot, is_directory=True) is BadgeId.ORANGE


class TestResolveWithoutSnapshot:
    def test_clean_repository_directory(self, mocker: "MockerFixture") -> None:
        clean_check = mocker.Mock(return_value=True)

        badge = resolve_badge(
            "/d",
            is_directory=True,
            snapshot=None,
            clean_check=clean_check,
            locate=lambda path: path,
        )

        assert badge is BadgeId.CLEAN_REPO
        clean_check.assert_called_once_with(Path("/d"))

    def test_dirty_repository_directory(self) -> None:
        badge = resolve_badge(
            "/d",
            is_directory=True,
            snapshot=None,
            clean_check=lambda root: False,
            locate=lambda path: path,
        )
        assert badge is BadgeId.MODIFIED_REPO

    def test_non_repository_directory_has_no_badge(self) -> None:
        badge = resolve_badge(
            "/d",
            is_directory=True,
            snapshot=None,
            clean_check=_never_clean_check,
            locate=lambda path: None,
        )
        assert badge is None

    def test_file_has_no_badge(self) -> None:
        badge = resolve_badge(
            "/d/a.txt",
            is_directory=False,
            snapshot=None,
            clean_check=_never_clean_check,
            locate=_never_locate,
        )
        assert badge is None

    def test_uses_real_locator_by_default(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()

        badge = resolve_badge(
            tmp_path, is_directory=True, snapshot=None, clean_check=lambda root: True
        )

        assert badge is BadgeId.CLEAN_REPO
