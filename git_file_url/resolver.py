"""Link pipeline: repository facts, remote normalization, path, URL.

The stages run once per invocation in a fixed order:

    GitDiscovery (root, remote, ref)
      -> GitUrlParser (host/owner/repo)
      -> resolve_relative_path (path under root)
      -> build_file_url (final URL)

Any stage failure raises a GitFileUrlError subclass and aborts the run;
there are no partial results.
"""

from pathlib import Path

import structlog

from git_file_url.config import LinkOptions
from git_file_url.git.discovery import GitDiscovery
from git_file_url.git.parser import GitUrlParser
from git_file_url.hosts import build_file_url
from git_file_url.paths import resolve_relative_path

log = structlog.get_logger(__name__)


class FileUrlResolver:
    """Builds the hosting-site URL of a file in a local working tree.

    Example:
        >>> resolver = FileUrlResolver(LinkOptions(), cwd="/home/user/project")
        >>> resolver.resolve("Cargo.toml")
        'https://github.com/nbouliol/git-file-url/blob/master/Cargo.toml'
    """

    def __init__(self, options: LinkOptions | None = None, cwd: str | Path | None = None) -> None:
        self.options = options or LinkOptions()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.discovery = GitDiscovery(self.cwd)

    def resolve(self, file_arg: str | Path) -> str:
        """Return the URL for ``file_arg``.

        Raises:
            GitFileUrlError: Any stage failure (see git_file_url.exceptions).
        """
        state = self.discovery.inspect(self.options.remote, need_remote=self.options.url is None)
        raw_url = self.options.url if self.options.url is not None else state.remote.url
        parser = GitUrlParser(raw_url)
        remote = parser.descriptor
        ref = self.options.ref or state.ref

        log.info(
            "remote_selected",
            remote=state.remote.name if state.remote else None,
            remote_url_type=state.remote.url_type if state.remote else None,
            url_type=parser.url_type,
            full_name=remote.full_name,
            host=remote.host,
            ref=ref,
        )

        path = resolve_relative_path(file_arg, state.root, cwd=self.cwd)
        return build_file_url(remote, ref, path, platform=self.options.platform)


def resolve_file_url(file_arg: str | Path, options: LinkOptions | None = None, cwd: str | Path | None = None) -> str:
    """Convenience wrapper around FileUrlResolver.resolve."""
    return FileUrlResolver(options, cwd=cwd).resolve(file_arg)
