"""Git discovery exceptions.

This module defines the exception hierarchy for Git repository discovery,
remote URL parsing and host lookup. All exceptions inherit from
GitDiscoveryError and include helpful error messages with hints for
resolution.

Example:
    >>> from git_file_url.git.exceptions import NotGitRepositoryError
    >>> raise NotGitRepositoryError("/tmp/not-a-repo")
    Traceback (most recent call last):
        ...
    NotGitRepositoryError: Not a Git repository: /tmp/not-a-repo

    Hint: Run the command from inside a Git working tree.
"""

from typing import TYPE_CHECKING

from git_file_url.exceptions import GitOperationError

if TYPE_CHECKING:
    from git_file_url.git.models import GitRemote


class GitDiscoveryError(GitOperationError):
    """Base exception for Git discovery errors.

    Attributes:
        message: Error message
        hint: Optional hint for resolution
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            hint: Optional hint for resolution
        """
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Format error message with hint.

        Returns:
            Formatted error message with optional hint
        """
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class NotGitRepositoryError(GitDiscoveryError):
    """Raised when the directory is not inside a Git working tree.

    Attributes:
        path: Path to the directory that was inspected
    """

    def __init__(self, path: str, message: str | None = None, hint: str | None = None) -> None:
        """Initialize exception.

        Args:
            path: Path to the directory
            message: Override for the default message
            hint: Override for the default hint
        """
        super().__init__(
            message=message or f"Not a Git repository: {path}",
            hint=hint or "Run the command from inside a Git working tree.",
        )
        self.path = path


class BareRepositoryError(NotGitRepositoryError):
    """Raised when the repository has no working tree."""

    def __init__(self, path: str) -> None:
        super().__init__(
            path,
            message=f"Cannot use a bare repository: {path}",
            hint="Run the command from a clone that has a working tree.",
        )


class NoRemotesError(GitDiscoveryError):
    """Raised when repository has no remotes configured."""

    def __init__(self, message: str | None = None, hint: str | None = None) -> None:
        """Initialize exception."""
        super().__init__(
            message=message or "No Git remotes configured in this repository",
            hint=hint or "Add a remote with: git remote add origin <url>, or pass --url",
        )


class RemoteNotFoundError(NoRemotesError):
    """Raised when a remote was requested by name and does not exist.

    Attributes:
        remote_name: The requested remote
        remotes: Remotes that are configured
    """

    def __init__(self, remote_name: str, remotes: list["GitRemote"]) -> None:
        available = ", ".join(f"'{r.name}'" for r in remotes)
        super().__init__(
            message=f"Remote '{remote_name}' not found",
            hint=f"Available remotes: {available}",
        )
        self.remote_name = remote_name
        self.remotes = remotes


class UnresolvableReferenceError(GitDiscoveryError):
    """Raised when neither a branch name nor a commit can be read from HEAD."""

    def __init__(self, path: str) -> None:
        super().__init__(
            message=f"Cannot determine the current branch or commit in {path}",
            hint="Check out a branch or create a commit, or pass --ref",
        )
        self.path = path


class InvalidGitUrlError(GitDiscoveryError):
    """Raised when Git URL format is not recognized.

    Attributes:
        url: The invalid URL
    """

    def __init__(self, url: str, reason: str | None = None) -> None:
        """Initialize exception.

        Args:
            url: The invalid URL
            reason: Optional reason for the error
        """
        msg = f"Invalid Git URL format: {url}"
        if reason:
            msg += f" ({reason})"

        super().__init__(
            message=msg,
            hint=(
                "Expected formats:\n"
                "  - git@github.com:owner/repo.git\n"
                "  - ssh://git@github.com/owner/repo.git\n"
                "  - https://github.com/owner/repo.git"
            ),
        )
        self.url = url


class UnsupportedHostError(GitDiscoveryError):
    """Raised when the remote host has no known blob URL convention.

    Attributes:
        host: The unsupported host
        supported: Hosts that have a URL convention
    """

    def __init__(self, host: str, supported: list[str]) -> None:
        """Initialize exception.

        Args:
            host: The unsupported host
            supported: Known hosts
        """
        super().__init__(
            message=f"Unsupported Git host: {host}",
            hint=(
                f"Supported hosts: {', '.join(supported)}.\n"
                "Pass --platform github|gitlab|bitbucket to use that URL convention."
            ),
        )
        self.host = host
        self.supported = supported
