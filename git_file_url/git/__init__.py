"""Git repository discovery and remote URL parsing.

This package reads the configured remote and current reference from a local
repository and normalizes remote URLs into a host/owner/repo descriptor.

Example:
    >>> from git_file_url.git import GitDiscovery, normalize_remote_url
    >>> discovery = GitDiscovery()
    >>> raw_url, ref = discovery.read_remote()
    >>> remote = normalize_remote_url(raw_url)
    >>> print(f"{remote.full_name} @ {remote.host} ({ref})")
    owner/repo @ github.com (main)

Error Handling:
    All exceptions inherit from GitDiscoveryError and include helpful
    error messages and hints for resolution.

    >>> from git_file_url.git import GitDiscovery, NoRemotesError
    >>> try:
    ...     GitDiscovery().get_remote()
    ... except NoRemotesError as e:
    ...     print(e)
    No Git remotes configured in this repository

    Hint: Add a remote with: git remote add origin <url>, or pass --url
"""

from git_file_url.git.discovery import GitDiscovery
from git_file_url.git.exceptions import (
    BareRepositoryError,
    GitDiscoveryError,
    InvalidGitUrlError,
    NoRemotesError,
    NotGitRepositoryError,
    RemoteNotFoundError,
    UnresolvableReferenceError,
    UnsupportedHostError,
)
from git_file_url.git.models import GitRemote, RemoteDescriptor, RepositoryState
from git_file_url.git.parser import GitUrlParser, normalize_remote_url

__all__ = [
    # Main API
    "GitDiscovery",
    # Parser
    "GitUrlParser",
    "normalize_remote_url",
    # Models
    "GitRemote",
    "RemoteDescriptor",
    "RepositoryState",
    # Exceptions
    "GitDiscoveryError",
    "NotGitRepositoryError",
    "BareRepositoryError",
    "NoRemotesError",
    "RemoteNotFoundError",
    "UnresolvableReferenceError",
    "InvalidGitUrlError",
    "UnsupportedHostError",
]
