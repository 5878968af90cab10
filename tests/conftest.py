"""Pytest fixtures for git-sync-keeper tests"""
import io
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git
from rich.console import Console

from git_sync_keeper.services.git.commands import GitCommands


def _configure_user(repo):
    """Configure a commit identity local to the repository."""
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")


def _commit_file(repo, name: str, content: str, message: str):
    """Write a file, stage it and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'remote_name': 'origin',
        'default_branch': 'master',
        'command_timeout': None,
        'echo_commands': False,
        'fail_if_nothing_to_commit': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def console_buffer():
    """Console writing into a string buffer, returned as (console, buffer)."""
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, width=200), buffer


@pytest.fixture
def empty_repo(temp_dir):
    """Create a Git repository with no commits."""
    repo_path = temp_dir / "empty_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    yield repo

    repo.close()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    # Initialize repository
    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    # Create initial commit on main branch
    _commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")
    repo.git.branch('-M', 'main')

    # Add a fake GitHub remote for testing
    repo.create_remote('origin', 'git@github.com:test/test-repo.git')

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with extra local branches."""
    repo = git_repo
    repo.git.checkout('-b', 'feature/test-feature')
    _commit_file(repo, "feature.txt", "Feature content\n", "Add feature")
    repo.git.checkout('main')
    repo.git.branch('bugfix/typo')

    yield repo


@pytest.fixture
def tracked_repo(temp_dir):
    """Create a clone-like repository whose main branch tracks a local bare remote.

    After setup HEAD, origin/main and their merge-base are the same commit.
    """
    remote_path = temp_dir / "remote.git"
    git.Repo.init(remote_path, bare=True).close()

    repo_path = temp_dir / "local_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)
    _configure_user(repo)
    _commit_file(repo, "README.md", "# Tracked\n", "Initial commit")
    repo.git.branch('-M', 'main')
    repo.create_remote('origin', str(remote_path))
    repo.git.push('-u', 'origin', 'main')

    yield repo

    repo.close()


@pytest.fixture
def commit_file():
    """Expose the commit helper to tests."""
    return _commit_file


@pytest.fixture
def mock_commands(mock_config):
    """Create a mock GitCommands runner."""
    commands = Mock(spec=GitCommands)
    commands.config = mock_config
    commands.console = Console(file=io.StringIO())
    commands.get = Mock(return_value="")
    commands.run = Mock(return_value=(0, "", ""))
    commands.do = Mock(return_value=0)
    return commands
