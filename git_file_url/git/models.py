"""Git repository data models.

This module defines the models passed between the stages of the link
pipeline: configured remotes, the normalized remote descriptor, and the
snapshot of repository state read once per invocation.

Example:
    >>> from git_file_url.git.models import RemoteDescriptor
    >>> remote = RemoteDescriptor(host="github.com", owner="myorg", repo="myrepo")
    >>> remote.full_name
    'myorg/myrepo'
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


@dataclass(frozen=True)
class GitRemote:
    """Represents a Git remote configuration.

    Attributes:
        name: Remote name (e.g., 'origin', 'upstream')
        url: Raw URL from git config
        url_type: Whether SSH or HTTPS format
    """

    name: str
    url: str
    url_type: Literal["ssh", "https", "unknown"]


class RemoteDescriptor(BaseModel):
    """Normalized remote: host, owner path and repository name.

    Produced by the URL parser from raw remote text and never modified
    afterwards. The owner may contain slashes for nested groups
    (``group/subgroup``); the repository name never does.

    Attributes:
        host: Lowercase hostname without scheme, user or port
        owner: Owner, organization or group path
        repo: Repository name (without .git suffix)

    Example:
        >>> remote = RemoteDescriptor(host="GitLab.com", owner="group/sub", repo="project.git")
        >>> remote.host, remote.repo
        ('gitlab.com', 'project')
        >>> remote.web_url
        'https://gitlab.com/group/sub/project'
    """

    model_config = ConfigDict(frozen=True)

    host: str
    owner: str
    repo: str

    @field_validator("host", "owner", "repo")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Ensure fields are not empty.

        Args:
            v: The value to validate

        Returns:
            Stripped value

        Raises:
            ValueError: If value is empty or whitespace
        """
        if not v or not v.strip():
            raise ValueError("Host, owner and repo must not be empty")
        return v.strip()

    @field_validator("host")
    @classmethod
    def validate_bare_host(cls, v: str) -> str:
        """Reject hosts that still carry a scheme, user, port or path."""
        if any(c in v for c in ":@/"):
            raise ValueError(f"Host must be a bare hostname (got: {v})")
        return v.lower()

    @field_validator("owner")
    @classmethod
    def validate_owner_segments(cls, v: str) -> str:
        v = v.strip("/")
        if not v or any(not part for part in v.split("/")):
            raise ValueError(f"Owner path has empty segments (got: {v})")
        return v

    @field_validator("repo")
    @classmethod
    def validate_no_git_suffix(cls, v: str) -> str:
        """Ensure .git suffix is removed.

        Args:
            v: The repo name

        Returns:
            Repo name without .git suffix

        Raises:
            ValueError: If nothing is left after stripping or the name has a slash
        """
        v = v.removesuffix(".git")
        if not v:
            raise ValueError("Repo must not be empty")
        if "/" in v:
            raise ValueError(f"Repo must be a single path segment (got: {v})")
        return v

    @property
    def full_name(self) -> str:
        """Return owner/repo format.

        Returns:
            Repository full name in owner/repo format
        """
        return f"{self.owner}/{self.repo}"

    @property
    def web_url(self) -> str:
        """Return the repository home page URL."""
        return f"https://{self.host}/{self.full_name}"


@dataclass(frozen=True)
class RepositoryState:
    """Facts read from the local repository for one invocation.

    Attributes:
        root: Absolute, resolved path of the working tree root
        remote: The selected remote, or None when no remote was needed
        ref: Branch name, or commit SHA when HEAD is detached
        detached: True when ``ref`` is a commit SHA
    """

    root: Path
    remote: GitRemote | None
    ref: str
    detached: bool = False
