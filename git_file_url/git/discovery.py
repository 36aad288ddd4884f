"""Git repository discovery.

This module reads the facts the link pipeline needs from a local
repository: the working tree root, the configured remotes and the current
branch or commit. It is strictly read-only.

Key Exports:
    GitDiscovery: Main class for repository inspection.

Example:
    >>> from git_file_url.git.discovery import GitDiscovery
    >>> discovery = GitDiscovery()
    >>> raw_url, ref = discovery.read_remote()
    >>> print(raw_url, ref)
    git@github.com:owner/repo.git main

Dependencies:
    Requires GitPython (gitpython) package for repository access.

See Also:
    - git_file_url.git.parser: Remote URL normalization
    - git_file_url.git.models: Data models for repository information
    - git_file_url.git.exceptions: Custom exceptions for git operations
"""

from pathlib import Path
from typing import Literal

import structlog

try:
    import git
    from git.exc import InvalidGitRepositoryError, NoSuchPathError
except ImportError as e:
    raise ImportError("GitPython is required for Git discovery. Install it with: pip install gitpython") from e

from git_file_url.git.exceptions import (
    BareRepositoryError,
    NoRemotesError,
    NotGitRepositoryError,
    RemoteNotFoundError,
    UnresolvableReferenceError,
)
from git_file_url.git.models import GitRemote, RepositoryState

log = structlog.get_logger(__name__)


class GitDiscovery:
    """Reads remote and reference information from a local repository.

    The git.Repo object is created lazily on first access, so an instance
    can be built before the path is known to be inside a repository.

    Attributes:
        repo_path: Resolved absolute path the search starts from.
        PREFERRED_REMOTES: Remote names tried in order when none is requested.

    Example:
        >>> discovery = GitDiscovery("/path/to/repo/src")
        >>> discovery.working_tree_root
        PosixPath('/path/to/repo')
        >>> discovery.get_remote().name
        'origin'
        >>> discovery.current_reference()
        ('main', False)
    """

    # Preferred remote names in order of preference
    PREFERRED_REMOTES = ["origin", "upstream"]

    def __init__(self, repo_path: str | Path = ".") -> None:
        """Initialize Git discovery for a path.

        Args:
            repo_path: Any path inside the repository; parent directories
                are searched. Default is the current directory.
        """
        self.repo_path = Path(repo_path).resolve()
        self._repo: git.Repo | None = None

    def _get_repo(self) -> git.Repo:
        """Get the Git repository object, initializing if needed.

        Raises:
            NotGitRepositoryError: If the path is not within a Git repository.
        """
        if self._repo is None:
            try:
                self._repo = git.Repo(self.repo_path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise NotGitRepositoryError(str(self.repo_path)) from e

        return self._repo

    @property
    def working_tree_root(self) -> Path:
        """Absolute, symlink-resolved path of the working tree root.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            BareRepositoryError: If the repository has no working tree.
        """
        repo = self._get_repo()
        if repo.bare or repo.working_tree_dir is None:
            raise BareRepositoryError(str(self.repo_path))
        return Path(repo.working_tree_dir).resolve()

    def list_remotes(self) -> list[GitRemote]:
        """List all configured Git remotes that have a URL.

        A remote section without a `url` entry (only `fetch` or `pushurl`)
        cannot be linked to and is skipped.

        Returns:
            List of GitRemote objects containing name, URL, and URL type.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
        """
        repo = self._get_repo()

        remotes = []
        for remote in repo.remotes:
            if not remote.config_reader.has_option("url"):
                log.debug("remote_without_url_skipped", remote=remote.name)
                continue
            url = remote.url

            url_type: Literal["ssh", "https", "unknown"] = "unknown"
            if url.startswith(("git@", "ssh://")):
                url_type = "ssh"
            elif url.startswith(("http://", "https://")):
                url_type = "https"

            remotes.append(GitRemote(name=remote.name, url=url, url_type=url_type))

        return remotes

    def get_remote(self, remote_name: str | None = None) -> GitRemote:
        """Get a Git remote by name or using automatic selection.

        Selection logic (when remote_name is None):
            1. 'origin' if present
            2. 'upstream' if present
            3. The first configured remote

        Args:
            remote_name: Specific remote name to retrieve (optional).

        Returns:
            The selected GitRemote object.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            NoRemotesError: If no remotes are configured.
            RemoteNotFoundError: If the specified remote_name doesn't exist.
        """
        remotes = self.list_remotes()

        if not remotes:
            raise NoRemotesError()

        if remote_name:
            for remote in remotes:
                if remote.name == remote_name:
                    return remote
            raise RemoteNotFoundError(remote_name, remotes)

        for preferred in self.PREFERRED_REMOTES:
            for remote in remotes:
                if remote.name == preferred:
                    return remote

        return remotes[0]

    def current_reference(self) -> tuple[str, bool]:
        """Return the checked-out branch name, or the commit SHA when detached.

        Returns:
            Tuple of (reference, detached).

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            UnresolvableReferenceError: If HEAD names no branch and points
                at no commit.
        """
        repo = self._get_repo()

        if not repo.head.is_detached:
            try:
                return repo.active_branch.name, False
            except TypeError:
                # HEAD is a symbolic ref to something other than a branch
                log.debug("active_branch_unavailable", path=str(self.repo_path))

        try:
            sha = repo.head.commit.hexsha
        except ValueError as e:
            raise UnresolvableReferenceError(str(self.repo_path)) from e

        log.info("detached_head", commit=sha)
        return sha, True

    def read_remote(self, remote_name: str | None = None) -> tuple[str, str]:
        """Return the raw remote URL and the current reference.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            NoRemotesError: If no remotes are configured.
            UnresolvableReferenceError: If no branch or commit is available.
        """
        remote = self.get_remote(remote_name)
        ref, _ = self.current_reference()
        return remote.url, ref

    def inspect(self, remote_name: str | None = None, need_remote: bool = True) -> RepositoryState:
        """Read everything the link pipeline needs in one call.

        Args:
            remote_name: Specific remote name (optional).
            need_remote: When False, a missing remote is not an error and
                RepositoryState.remote is None.

        Returns:
            RepositoryState for this invocation.
        """
        root = self.working_tree_root
        remote = self.get_remote(remote_name) if need_remote else None
        ref, detached = self.current_reference()

        log.debug(
            "repository_inspected",
            root=str(root),
            remote=remote.name if remote else None,
            ref=ref,
            detached=detached,
        )
        return RepositoryState(root=root, remote=remote, ref=ref, detached=detached)

