"""Tests for branch queries and remote tracking state"""
import pytest

from git_sync_keeper.exceptions import GitOperationError, RevisionResolutionError
from git_sync_keeper.models.branch import Divergence
from git_sync_keeper.services.git.branch_queries import BranchQueries, split_lines
from git_sync_keeper.services.git_service import GitService


class TestBranchListing:
    """Test local and remote branch listings."""

    def test_branches(self, git_repo_with_branches, mock_config):
        service = GitService(git_repo_with_branches.working_dir, mock_config)
        assert sorted(service.branches()) == ["bugfix/typo", "feature/test-feature", "main"]

    def test_branch_exists(self, git_repo_with_branches, mock_config):
        service = GitService(git_repo_with_branches.working_dir, mock_config)
        assert service.branch_exists("main") is True
        assert service.branch_exists("feature/test-feature") is True
        assert service.branch_exists("feature") is False
        assert service.branch_exists("* main") is False

    def test_no_branches_before_first_commit(self, empty_repo, mock_config):
        assert GitService(empty_repo.working_dir, mock_config).branches() == []

    def test_remote_branches(self, tracked_repo, mock_config):
        service = GitService(tracked_repo.working_dir, mock_config)
        assert "origin/main" in service.remote_branches()
        assert service.remote_branch_exists("origin/main") is True
        assert service.remote_branch_exists("origin/feature") is False
        assert service.remote_branch_exists("main") is False

    def test_listing_outside_repository_raises(self, temp_dir, mock_config):
        with pytest.raises(GitOperationError):
            GitService(str(temp_dir), mock_config).branches()

    def test_split_lines(self):
        assert split_lines("  main\n\nfeature  \n") == ["main", "feature"]
        assert split_lines("") == []


class TestCurrentBranch:
    """Test current branch detection."""

    def test_current_branch(self, git_repo_with_branches, mock_config):
        service = GitService(git_repo_with_branches.working_dir, mock_config)
        assert service.get_current_branch() == "main"
        git_repo_with_branches.git.checkout("feature/test-feature")
        assert service.get_current_branch() == "feature/test-feature"

    def test_unborn_repository_reports_its_branch(self, empty_repo, mock_config):
        empty_repo.git.symbolic_ref("HEAD", "refs/heads/trunk")
        service = GitService(empty_repo.working_dir, mock_config)
        assert service.is_unborn() is True
        assert service.get_current_branch() == "trunk"

    def test_unborn_default_remote_ref_follows_branch(self, empty_repo, mock_config):
        empty_repo.git.symbolic_ref("HEAD", "refs/heads/trunk")
        service = GitService(empty_repo.working_dir, mock_config)
        assert service.default_remote_ref() == "origin/trunk"

    def test_detached_head(self, git_repo, mock_config):
        git_repo.git.checkout(git_repo.head.commit.hexsha)
        service = GitService(git_repo.working_dir, mock_config)
        assert service.is_unborn() is False
        assert service.get_current_branch() == "HEAD"

    def test_not_a_repository_is_not_unborn(self, temp_dir, mock_config):
        service = GitService(str(temp_dir), mock_config)
        assert service.is_unborn() is False
        with pytest.raises(GitOperationError):
            service.get_current_branch()


class TestRemoteStatus:
    """Test divergence between HEAD and its remote branch."""

    def test_equal(self, tracked_repo, mock_config):
        service = GitService(tracked_repo.working_dir, mock_config)
        assert service.remote_status("origin/main") == Divergence.EQUAL

    def test_default_remote_ref(self, tracked_repo, mock_config):
        service = GitService(tracked_repo.working_dir, mock_config)
        assert service.remote_status() == Divergence.EQUAL

    def test_local_ahead(self, tracked_repo, mock_config, commit_file):
        commit_file(tracked_repo, "ahead.txt", "ahead\n", "Ahead")
        service = GitService(tracked_repo.working_dir, mock_config)
        assert service.remote_status("origin/main") == Divergence.LOCAL_AHEAD

    def test_local_behind(self, tracked_repo, mock_config, commit_file):
        commit_file(tracked_repo, "pushed.txt", "pushed\n", "Pushed")
        tracked_repo.git.push("origin", "main")
        tracked_repo.git.reset("--hard", "HEAD~1")

        service = GitService(tracked_repo.working_dir, mock_config)
        assert service.remote_status("origin/main") == Divergence.LOCAL_BEHIND

    def test_diverged(self, tracked_repo, mock_config, commit_file):
        commit_file(tracked_repo, "pushed.txt", "pushed\n", "Pushed")
        tracked_repo.git.push("origin", "main")
        tracked_repo.git.reset("--hard", "HEAD~1")
        commit_file(tracked_repo, "local.txt", "local\n", "Local only")

        service = GitService(tracked_repo.working_dir, mock_config)
        assert service.remote_status("origin/main") == Divergence.DIVERGED

    def test_missing_remote_ref(self, tracked_repo, mock_config):
        service = GitService(tracked_repo.working_dir, mock_config)
        with pytest.raises(RevisionResolutionError) as exc_info:
            service.remote_status("origin/does-not-exist")
        assert exc_info.value.revision == "origin/does-not-exist"

    def test_unborn_head(self, empty_repo, mock_config):
        service = GitService(empty_repo.working_dir, mock_config)
        with pytest.raises(RevisionResolutionError) as exc_info:
            service.remote_status("origin/main")
        assert exc_info.value.revision == "HEAD"

    def test_no_merge_base(self, tracked_repo, mock_config, commit_file):
        tracked_repo.git.checkout("--orphan", "unrelated")
        tracked_repo.git.rm("-rf", "--cached", ".")
        commit_file(tracked_repo, "other.txt", "other\n", "Unrelated root")

        service = GitService(tracked_repo.working_dir, mock_config)
        with pytest.raises(RevisionResolutionError, match="merge-base"):
            service.remote_status("origin/main")


class TestBranchQueriesWithMockRunner:
    """Test query logic without running git."""

    def test_remote_status_uses_three_revisions(self, mock_commands, mock_config):
        mock_commands.get.side_effect = ["aaa\n", "bbb\n", "aaa\n"]
        queries = BranchQueries(mock_commands, mock_config)

        assert queries.remote_status("origin/main") == Divergence.LOCAL_BEHIND
        calls = [call.args for call in mock_commands.get.call_args_list]
        assert calls == [
            ("rev-parse", "--verify", "HEAD"),
            ("rev-parse", "--verify", "origin/main"),
            ("merge-base", "HEAD", "origin/main"),
        ]

    def test_resolution_failure_stops_comparison(self, mock_commands, mock_config):
        mock_commands.get.side_effect = [
            "aaa\n",
            GitOperationError("rev-parse", "unknown revision", 128),
        ]
        queries = BranchQueries(mock_commands, mock_config)

        with pytest.raises(RevisionResolutionError):
            queries.remote_status("origin/gone")
        assert mock_commands.get.call_count == 2

    def test_unborn_checks_symbolic_ref(self, mock_commands, mock_config):
        mock_commands.run.side_effect = [(1, "", ""), (0, "master\n", "")]
        queries = BranchQueries(mock_commands, mock_config)
        assert queries.is_unborn() is True
        assert mock_commands.run.call_args.args == ("symbolic-ref", "--quiet", "--short", "HEAD")

    def test_unborn_name_from_symbolic_ref(self, mock_commands, mock_config):
        mock_commands.run.side_effect = [(1, "", ""), (0, "trunk\n", "")]
        assert BranchQueries(mock_commands, mock_config).get_current_branch() == "trunk"
        mock_commands.get.assert_not_called()

    def test_unborn_without_name_uses_default(self, mock_commands, mock_config):
        mock_config["default_branch"] = "develop"
        mock_commands.run.side_effect = [(1, "", ""), (0, "", "")]
        assert BranchQueries(mock_commands, mock_config).get_current_branch() == "develop"

    def test_detached_unresolvable_head_is_not_unborn(self, mock_commands, mock_config):
        mock_commands.run.side_effect = [(1, "", ""), (1, "", "")]
        assert BranchQueries(mock_commands, mock_config).unborn_branch() is None
