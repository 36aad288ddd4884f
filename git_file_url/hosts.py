"""Host URL conventions and file URL construction.

Each supported hosting platform has a template for linking to a file at a
reference (``blob``) and one for linking to the repository tree at a
reference (``tree``), used when the file argument is the repository root.

The host table is built once at import time and is read-only.

Example:
    >>> from git_file_url.git.models import RemoteDescriptor
    >>> remote = RemoteDescriptor(host="github.com", owner="nbouliol", repo="git-file-url")
    >>> build_file_url(remote, "master", "Cargo.toml")
    'https://github.com/nbouliol/git-file-url/blob/master/Cargo.toml'
"""

from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import quote

import structlog

from git_file_url.enums import Platform
from git_file_url.git.exceptions import UnsupportedHostError
from git_file_url.git.models import RemoteDescriptor

log = structlog.get_logger(__name__)

# RFC 3986 pchar sub-delims plus ':' and '@' stay literal in path segments
_PATH_SAFE = "/!$&'()*+,;=:@"


@dataclass(frozen=True)
class HostTemplate:
    """URL templates for one hosting platform.

    Templates are ``str.format`` strings consuming ``host``, ``owner``,
    ``repo``, ``ref`` and (for ``blob``) ``path``.

    Attributes:
        platform: Platform the templates belong to
        blob: Template for a file at a reference
        tree: Template for the repository root at a reference
    """

    platform: Platform
    blob: str
    tree: str

    def render(self, remote: RemoteDescriptor, ref: str, path: str) -> str:
        """Fill the template; an empty path selects the tree template."""
        fields = {
            "host": remote.host,
            "owner": remote.owner,
            "repo": remote.repo,
            "ref": quote_path(ref),
        }
        if not path:
            return self.tree.format(**fields)
        return self.blob.format(path=quote_path(path), **fields)


PLATFORM_TEMPLATES: MappingProxyType[Platform, HostTemplate] = MappingProxyType(
    {
        Platform.GITHUB: HostTemplate(
            platform=Platform.GITHUB,
            blob="https://{host}/{owner}/{repo}/blob/{ref}/{path}",
            tree="https://{host}/{owner}/{repo}/tree/{ref}",
        ),
        Platform.GITLAB: HostTemplate(
            platform=Platform.GITLAB,
            blob="https://{host}/{owner}/{repo}/-/blob/{ref}/{path}",
            tree="https://{host}/{owner}/{repo}/-/tree/{ref}",
        ),
        Platform.BITBUCKET: HostTemplate(
            platform=Platform.BITBUCKET,
            blob="https://{host}/{owner}/{repo}/src/{ref}/{path}",
            tree="https://{host}/{owner}/{repo}/src/{ref}",
        ),
    }
)

HOST_TEMPLATES: MappingProxyType[str, HostTemplate] = MappingProxyType(
    {
        "github.com": PLATFORM_TEMPLATES[Platform.GITHUB],
        "gitlab.com": PLATFORM_TEMPLATES[Platform.GITLAB],
        "bitbucket.org": PLATFORM_TEMPLATES[Platform.BITBUCKET],
    }
)


def quote_path(value: str) -> str:
    """Percent-encode characters that are unsafe in a URL path.

    Slashes and RFC 3986 sub-delimiters are kept, so the path reads the
    same on the hosting site. Spaces, ``#``, ``?``, ``%`` and non-ASCII
    characters are encoded (UTF-8).

    Example:
        >>> quote_path("docs/read me#1.md")
        'docs/read%20me%231.md'
    """
    return quote(value, safe=_PATH_SAFE)


def get_host_template(host: str, platform: Platform | None = None) -> HostTemplate:
    """Select the template for a host.

    Args:
        host: Normalized hostname
        platform: Forces this platform's template regardless of host

    Raises:
        UnsupportedHostError: If no platform is given and host is unknown.
    """
    if platform is not None:
        return PLATFORM_TEMPLATES[Platform(platform)]

    template = HOST_TEMPLATES.get(host.lower())
    if template is None:
        raise UnsupportedHostError(host, sorted(HOST_TEMPLATES))
    return template


def build_file_url(
    remote: RemoteDescriptor,
    ref: str,
    path: str,
    platform: Platform | None = None,
) -> str:
    """Build the web URL of a file at a reference.

    Args:
        remote: Normalized remote
        ref: Branch name or commit SHA
        path: Slash-separated path relative to the repository root; empty
            for the repository root itself
        platform: Optional platform override for hosts outside the table

    Returns:
        The URL, without a trailing slash.

    Raises:
        UnsupportedHostError: If the host is unknown and no platform is given.
    """
    template = get_host_template(remote.host, platform)
    url = template.render(remote, ref, path.strip("/")).rstrip("/")
    log.debug("url_built", host=remote.host, platform=str(template.platform), url=url)
    return url
