"""Shared test fixtures for gitbadges tests."""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from git import Repo
from rich.console import Console

RepoFactory = Callable[..., Repo]

_DIRECTORY_MARKERS = {
    "unit": pytest.mark.unit,
    "properties": pytest.mark.property,
    "integration": pytest.mark.integration,
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    tests_dir = Path(__file__).parent
    for item in items:
        path = Path(item.path)
        if not path.is_relative_to(tests_dir):
            continue
        marker = _DIRECTORY_MARKERS.get(path.relative_to(tests_dir).parts[0])
        if marker is not None:
            item.add_marker(marker)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory and clear GITBADGES_* variables.

    Keeps config discovery and default log files away from the real home
    directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("GITBADGES_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


def _configure(repo: Repo) -> None:
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")


@pytest.fixture
def make_repo(tmp_path: Path) -> Iterator[RepoFactory]:
    """Create real git repositories under tmp_path.

    The factory takes a directory name and a mapping of committed files
    (relative path to content) and returns the opened Repo. Repos are
    closed at teardown.
    """
    repos: list[Repo] = []

    def _make(name: str = "repo", files: dict[str, str] | None = None) -> Repo:
        root = tmp_path / name
        root.mkdir(parents=True)
        repo = Repo.init(root)
        _configure(repo)
        repos.append(repo)

        if files:
            for relative, content in files.items():
                path = root / relative
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content)
            repo.git.add(A=True)
            repo.git.commit("-m", "initial")
        return repo

    yield _make

    for repo in repos:
        repo.close()


@pytest.fixture
def repo_root(make_repo: RepoFactory) -> Path:
    """A repository with three committed files and a clean working tree."""
    repo = make_repo(
        "repo",
        {
            "README.md": "# readme\n",
            "src/app.py": "print('hello')\n",
            "src/util.py": "VALUE = 1\n",
        },
    )
    return Path(repo.working_tree_dir)
