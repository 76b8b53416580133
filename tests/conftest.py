"""Pytest fixtures for git-recent tests"""
import tempfile
from pathlib import Path
from typing import List, Optional

import pytest
import git

from git_recent.core import BranchController, ControllerView
from git_recent.exceptions import GitOperationError
from git_recent.models.branch import BranchSnapshot


# Commit times used by git_repo_with_branches, as raw git dates
MAIN_TIME = 1_700_000_100
FEATURE_X_TIME = 1_700_000_200
FEATURE_Y_TIME = 1_700_000_050


def make_snapshot(name: str, t: int, current: bool = False, upstream: Optional[str] = None):
    return BranchSnapshot(
        name=name,
        last_change_time=t,
        relative_age="some time ago",
        is_current=current,
        upstream_status=upstream,
    )


def commit_file(repo: git.Repo, filename: str, content: str, message: str, when: int):
    """Write, stage and commit one file with a fixed commit time."""
    path = Path(repo.working_dir) / filename
    path.write_text(content)
    repo.index.add([filename])
    date = f"{when} +0000"
    return repo.index.commit(message, author_date=date, commit_date=date)


class FakeRepository:
    """In-memory repository collaborator that records calls."""

    def __init__(self, snapshots: List[BranchSnapshot]):
        self.snapshots = list(snapshots)
        self.switched: List[str] = []
        self.deleted: List[str] = []
        self.switch_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None
        self.list_error: Optional[Exception] = None

    def list_branches(self) -> List[BranchSnapshot]:
        if self.list_error:
            raise self.list_error
        return list(self.snapshots)

    def switch(self, name: str) -> None:
        if self.switch_error:
            raise self.switch_error
        self.switched.append(name)

    def delete(self, name: str) -> None:
        if self.delete_error:
            raise self.delete_error
        self.deleted.append(name)
        self.snapshots = [s for s in self.snapshots if s.name != name]


class RecordingRenderer:
    """Renderer that keeps every frame it was asked to draw."""

    def __init__(self):
        self.views: List[ControllerView] = []

    def render_view(self, view: ControllerView) -> None:
        self.views.append(view)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_snapshots():
    """Unsorted snapshots: main is current and sits between the features by age."""
    return [
        make_snapshot("main", MAIN_TIME, current=True, upstream="up to date"),
        make_snapshot("feature-x", FEATURE_X_TIME),
        make_snapshot("feature-y", FEATURE_Y_TIME, upstream="ahead 1"),
    ]


@pytest.fixture
def fake_repository(sample_snapshots):
    return FakeRepository(sample_snapshots)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def controller(fake_repository, renderer):
    """Controller over the sample snapshots with a recording renderer."""
    return BranchController(
        fake_repository, fake_repository.list_branches(), renderer=renderer, page_size=10
    )


@pytest.fixture
def git_error():
    return GitOperationError("delete_branch", "feature-y", "boom")


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit", MAIN_TIME)

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with main (current), feature-x (newest) and feature-y (oldest)."""
    repo = git_repo

    repo.git.checkout('-b', 'feature-x')
    commit_file(repo, "x.txt", "x\n", "Add x", FEATURE_X_TIME)

    repo.git.checkout('main')
    repo.git.checkout('-b', 'feature-y')
    commit_file(repo, "y.txt", "y\n", "Add y", FEATURE_Y_TIME)

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def git_repo_with_upstream(git_repo_with_branches, temp_dir):
    """main tracks origin/main and has one unpushed commit."""
    repo = git_repo_with_branches
    remote_path = temp_dir / "remote.git"
    git.Repo.init(remote_path, bare=True).close()

    repo.create_remote('origin', str(remote_path))
    repo.git.push('-u', 'origin', 'main')
    commit_file(repo, "local.txt", "local\n", "Local only", MAIN_TIME + 10)

    yield repo
