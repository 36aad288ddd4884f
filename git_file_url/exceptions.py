"""Custom exception hierarchy for git-file-url.

This module defines the exception hierarchy used across the tool. Every stage
of the link pipeline raises one of these and the CLI entry point catches them
in a single place, turning them into a non-zero exit with a readable message.

Exception Hierarchy:
    GitFileUrlError (base)
    ├── ConfigurationError
    ├── GitOperationError
    │   └── GitDiscoveryError (see git_file_url.git.exceptions)
    └── PathResolutionError
        ├── PathNotFoundError
        └── PathOutsideRepositoryError

Example Usage:
    >>> from git_file_url.exceptions import PathNotFoundError
    >>> try:
    ...     resolve_relative_path("missing.txt", repo_root)
    ... except PathNotFoundError as e:
    ...     print(e.message)
    File not found: missing.txt
"""

from pathlib import Path


class GitFileUrlError(Exception):
    """Base exception for all git-file-url errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(GitFileUrlError):
    """Invalid option values supplied on the command line.

    Examples:
        - Unknown platform name
        - Blank remote name or reference
        - Unknown log level
    """

    pass


class GitOperationError(GitFileUrlError):
    """Git repository inspection errors.

    This is the base class for Git-specific errors. See the
    git_file_url.git.exceptions module for the concrete types:
    - NotGitRepositoryError: Directory is not inside a Git working tree
    - NoRemotesError: No Git remotes configured
    - UnresolvableReferenceError: Neither branch nor commit could be read
    - InvalidGitUrlError: Remote URL format not recognized
    - UnsupportedHostError: Remote host has no known URL convention
    """

    pass


class PathResolutionError(GitFileUrlError):
    """The file argument could not be mapped into the repository.

    Attributes:
        path: The path as given by the user
    """

    def __init__(self, message: str, path: str | Path) -> None:
        """Initialize exception.

        Args:
            message: Error message
            path: The offending path
        """
        super().__init__(message)
        self.path = str(path)


class PathNotFoundError(PathResolutionError):
    """The file argument does not exist on disk."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"File not found: {path}", path)


class PathOutsideRepositoryError(PathResolutionError):
    """The file argument resolves to a location outside the working tree.

    Attributes:
        path: The resolved absolute path
        repo_root: The repository working tree root
    """

    def __init__(self, path: str | Path, repo_root: str | Path) -> None:
        super().__init__(f"Path is outside the repository: {path} (repository root: {repo_root})", path)
        self.repo_root = str(repo_root)
