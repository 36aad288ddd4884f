"""git-file-url: print the hosting-site URL of a file in a Git working tree."""

from git_file_url.resolver import FileUrlResolver, resolve_file_url

__version__ = "0.2.0"

__all__ = ["FileUrlResolver", "resolve_file_url", "__version__"]
