"""Resolve the file argument to a path relative to the working tree root."""

from pathlib import Path

import structlog

from git_file_url.exceptions import PathNotFoundError, PathOutsideRepositoryError

log = structlog.get_logger(__name__)


def resolve_relative_path(file_arg: str | Path, repo_root: str | Path, cwd: str | Path | None = None) -> str:
    """Return ``file_arg`` as a slash-separated path relative to ``repo_root``.

    Relative arguments are taken relative to ``cwd`` (default: the process
    working directory). Symlinks are resolved on both sides before
    comparing, so ``..`` segments never survive. Git tracking status is not
    checked; untracked files resolve like tracked ones.

    The repository root itself resolves to ``""``. Paths inside the
    ``.git`` directory are repository metadata, not working tree files, and
    count as outside the repository.

    Args:
        file_arg: Path given by the user, absolute or relative
        repo_root: Working tree root
        cwd: Base directory for relative arguments

    Returns:
        Relative path such as ``src/lib.rs``.

    Raises:
        PathNotFoundError: If the path does not exist on disk.
        PathOutsideRepositoryError: If the path is not under repo_root or
            is inside its .git directory.
    """
    candidate = Path(file_arg)
    if not candidate.is_absolute():
        candidate = Path(cwd) / candidate if cwd is not None else Path.cwd() / candidate

    try:
        absolute = candidate.resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise PathNotFoundError(file_arg) from e

    root = Path(repo_root).resolve()
    try:
        relative = absolute.relative_to(root)
    except ValueError as e:
        raise PathOutsideRepositoryError(absolute, root) from e

    if relative.parts[:1] == (".git",):
        raise PathOutsideRepositoryError(absolute, root)

    posix = relative.as_posix()
    result = "" if posix == "." else posix
    log.debug("path_resolved", file=str(file_arg), relative=result)
    return result
