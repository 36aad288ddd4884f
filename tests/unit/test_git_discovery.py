"""Unit tests for Git discovery module.

GitPython is mocked at ``git_file_url.git.discovery.git.Repo``; real
repositories are exercised in tests/git/test_integration.py.
"""

from pathlib import Path
from unittest.mock import Mock, PropertyMock, patch

import pytest
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from git_file_url.git.discovery import GitDiscovery
from git_file_url.git.exceptions import (
    BareRepositoryError,
    NoRemotesError,
    NotGitRepositoryError,
    RemoteNotFoundError,
    UnresolvableReferenceError,
)
from git_file_url.git.models import GitRemote


def make_remote(name: str, url: str, has_url: bool = True) -> Mock:
    remote = Mock()
    remote.name = name
    remote.url = url
    remote.config_reader.has_option.return_value = has_url
    return remote


def make_repo(
    remotes: list[Mock] | None = None,
    working_tree_dir: str | None = "/work/project",
    branch: str | None = "main",
    sha: str = "0123456789abcdef0123456789abcdef01234567",
) -> Mock:
    """Build a mock git.Repo; branch=None means detached HEAD."""
    repo = Mock()
    repo.remotes = remotes or []
    repo.bare = working_tree_dir is None
    repo.working_tree_dir = working_tree_dir
    repo.head.is_detached = branch is None
    repo.head.commit.hexsha = sha
    if branch is not None:
        repo.active_branch.name = branch
    return repo


class TestRepositoryAccess:
    """Tests for lazy repository access and working tree root."""

    @patch("git_file_url.git.discovery.git.Repo")
    def test_repo_opened_lazily_with_parent_search(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo()

        discovery = GitDiscovery("/work/project/src")
        mock_repo_class.assert_not_called()

        discovery.list_remotes()
        mock_repo_class.assert_called_once_with(Path("/work/project/src").resolve(), search_parent_directories=True)

    @patch("git_file_url.git.discovery.git.Repo")
    def test_repo_is_cached(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo()

        discovery = GitDiscovery()
        discovery.list_remotes()
        discovery.current_reference()

        assert mock_repo_class.call_count == 1

    @pytest.mark.parametrize("error", [InvalidGitRepositoryError("/tmp"), NoSuchPathError("/tmp")])
    @patch("git_file_url.git.discovery.git.Repo")
    def test_not_a_repository(self, mock_repo_class: Mock, error: Exception) -> None:
        mock_repo_class.side_effect = error

        with pytest.raises(NotGitRepositoryError) as exc_info:
            GitDiscovery("/tmp").list_remotes()

        assert exc_info.value.path == str(Path("/tmp").resolve())

    @patch("git_file_url.git.discovery.git.Repo")
    def test_working_tree_root(self, mock_repo_class: Mock, tmp_path: Path) -> None:
        mock_repo_class.return_value = make_repo(working_tree_dir=str(tmp_path))

        assert GitDiscovery(tmp_path).working_tree_root == tmp_path.resolve()

    @patch("git_file_url.git.discovery.git.Repo")
    def test_bare_repository_rejected(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(working_tree_dir=None)

        with pytest.raises(BareRepositoryError):
            _ = GitDiscovery().working_tree_root


class TestListRemotes:
    @patch("git_file_url.git.discovery.git.Repo")
    def test_url_types(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(
            remotes=[
                make_remote("origin", "git@github.com:o/r.git"),
                make_remote("mirror", "ssh://git@gitlab.com/o/r.git"),
                make_remote("web", "https://bitbucket.org/o/r.git"),
                make_remote("local", "/srv/git/r.git"),
            ]
        )

        remotes = GitDiscovery().list_remotes()

        assert [r.url_type for r in remotes] == ["ssh", "ssh", "https", "unknown"]
        assert remotes[0] == GitRemote("origin", "git@github.com:o/r.git", "ssh")

    @patch("git_file_url.git.discovery.git.Repo")
    def test_no_remotes(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo()

        assert GitDiscovery().list_remotes() == []

    @patch("git_file_url.git.discovery.git.Repo")
    def test_remote_without_url_skipped(self, mock_repo_class: Mock) -> None:
        """A remote section with only fetch/pushurl entries is not usable."""
        origin = make_remote("origin", "", has_url=False)
        fork = make_remote("fork", "git@github.com:me/r.git")
        mock_repo_class.return_value = make_repo(remotes=[origin, fork])

        remotes = GitDiscovery().list_remotes()

        assert [r.name for r in remotes] == ["fork"]
        origin.config_reader.has_option.assert_called_once_with("url")

    @patch("git_file_url.git.discovery.git.Repo")
    def test_only_remote_without_url_means_no_remotes(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(remotes=[make_remote("origin", "", has_url=False)])

        with pytest.raises(NoRemotesError):
            GitDiscovery().get_remote()


class TestGetRemote:
    @patch("git_file_url.git.discovery.git.Repo")
    def test_no_remotes_raises(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo()

        with pytest.raises(NoRemotesError):
            GitDiscovery().get_remote()

    @patch("git_file_url.git.discovery.git.Repo")
    def test_single_remote_used_whatever_its_name(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(remotes=[make_remote("fork", "git@github.com:me/r.git")])

        assert GitDiscovery().get_remote().name == "fork"

    @patch("git_file_url.git.discovery.git.Repo")
    def test_origin_preferred(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(
            remotes=[
                make_remote("fork", "git@github.com:me/r.git"),
                make_remote("upstream", "git@github.com:up/r.git"),
                make_remote("origin", "git@github.com:o/r.git"),
            ]
        )

        assert GitDiscovery().get_remote().name == "origin"

    @patch("git_file_url.git.discovery.git.Repo")
    def test_upstream_before_others(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(
            remotes=[
                make_remote("fork", "git@github.com:me/r.git"),
                make_remote("upstream", "git@github.com:up/r.git"),
            ]
        )

        assert GitDiscovery().get_remote().name == "upstream"

    @patch("git_file_url.git.discovery.git.Repo")
    def test_first_remote_when_none_preferred(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(
            remotes=[
                make_remote("alpha", "git@github.com:a/r.git"),
                make_remote("beta", "git@github.com:b/r.git"),
            ]
        )

        assert GitDiscovery().get_remote().name == "alpha"

    @patch("git_file_url.git.discovery.git.Repo")
    def test_named_remote(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(
            remotes=[
                make_remote("origin", "git@github.com:o/r.git"),
                make_remote("fork", "git@github.com:me/r.git"),
            ]
        )

        assert GitDiscovery().get_remote("fork").url == "git@github.com:me/r.git"

    @patch("git_file_url.git.discovery.git.Repo")
    def test_named_remote_missing(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(remotes=[make_remote("origin", "git@github.com:o/r.git")])

        with pytest.raises(RemoteNotFoundError) as exc_info:
            GitDiscovery().get_remote("upstream")

        assert exc_info.value.remote_name == "upstream"
        assert "'origin'" in str(exc_info.value)


class TestCurrentReference:
    @patch("git_file_url.git.discovery.git.Repo")
    def test_branch_name(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(branch="feature/links")

        assert GitDiscovery().current_reference() == ("feature/links", False)

    @patch("git_file_url.git.discovery.git.Repo")
    def test_detached_head_uses_commit(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(branch=None, sha="a" * 40)

        assert GitDiscovery().current_reference() == ("a" * 40, True)

    @patch("git_file_url.git.discovery.git.Repo")
    def test_non_branch_symbolic_head_falls_back_to_commit(self, mock_repo_class: Mock) -> None:
        repo = make_repo(sha="b" * 40)
        type(repo).active_branch = PropertyMock(side_effect=TypeError("HEAD is a symbolic reference"))
        mock_repo_class.return_value = repo

        assert GitDiscovery().current_reference() == ("b" * 40, True)

    @patch("git_file_url.git.discovery.git.Repo")
    def test_no_branch_and_no_commit(self, mock_repo_class: Mock) -> None:
        repo = make_repo(branch=None)
        type(repo.head).commit = PropertyMock(side_effect=ValueError("Reference does not exist"))
        mock_repo_class.return_value = repo

        with pytest.raises(UnresolvableReferenceError):
            GitDiscovery().current_reference()


class TestReadRemote:
    @patch("git_file_url.git.discovery.git.Repo")
    def test_returns_url_and_ref(self, mock_repo_class: Mock) -> None:
        mock_repo_class.return_value = make_repo(
            remotes=[make_remote("origin", "git@github.com:nbouliol/git-file-url.git")],
            branch="master",
        )

        assert GitDiscovery().read_remote() == ("git@github.com:nbouliol/git-file-url.git", "master")


class TestInspect:
    @patch("git_file_url.git.discovery.git.Repo")
    def test_full_state(self, mock_repo_class: Mock, tmp_path: Path) -> None:
        mock_repo_class.return_value = make_repo(
            remotes=[make_remote("origin", "https://gitlab.com/g/p.git")],
            working_tree_dir=str(tmp_path),
            branch="main",
        )

        state = GitDiscovery(tmp_path).inspect()

        assert state.root == tmp_path.resolve()
        assert state.remote is not None
        assert state.remote.name == "origin"
        assert state.ref == "main"
        assert state.detached is False

    @patch("git_file_url.git.discovery.git.Repo")
    def test_remote_optional(self, mock_repo_class: Mock, tmp_path: Path) -> None:
        mock_repo_class.return_value = make_repo(working_tree_dir=str(tmp_path))

        state = GitDiscovery(tmp_path).inspect(need_remote=False)

        assert state.remote is None

    @patch("git_file_url.git.discovery.git.Repo")
    def test_remote_required_by_default(self, mock_repo_class: Mock, tmp_path: Path) -> None:
        mock_repo_class.return_value = make_repo(working_tree_dir=str(tmp_path))

        with pytest.raises(NoRemotesError):
            GitDiscovery(tmp_path).inspect()
