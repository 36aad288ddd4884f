"""Enumerations for git-file-url hosting platforms."""

from enum import Enum


class Platform(str, Enum):
    """Hosting platforms with a known file URL convention.

    - github: /blob/<ref>/<path>
    - gitlab: /-/blob/<ref>/<path>
    - bitbucket: /src/<ref>/<path>
    """

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"

    def __str__(self) -> str:
        return self.value
