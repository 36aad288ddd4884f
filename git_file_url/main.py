"""CLI entry point for git-file-url."""

import sys

import click
import structlog

from git_file_url.config import LOG_LEVELS, LinkOptions
from git_file_url.enums import Platform
from git_file_url.exceptions import ConfigurationError, GitFileUrlError
from git_file_url.resolver import FileUrlResolver
from git_file_url.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.command()
@click.argument("path", type=click.Path(path_type=str))
@click.option("--remote", "-r", default=None, help="Remote to read the URL from (default: origin)")
@click.option("--ref", default=None, help="Branch, tag or commit to link to (default: current branch)")
@click.option(
    "--platform",
    "-p",
    type=click.Choice([p.value for p in Platform], case_sensitive=False),
    default=None,
    help="Use this platform's URL convention for any host",
)
@click.option("--url", default=None, help="Repository URL to use instead of a configured remote (not with --remote)")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging level (logs go to stderr)",
)
@click.version_option(package_name="git-file-url")
def cli(
    path: str,
    remote: str | None,
    ref: str | None,
    platform: str | None,
    url: str | None,
    log_level: str,
) -> None:
    """Print the web URL of PATH on the repository's hosting site.

    Examples:
        git-file-url Cargo.toml
        git-file-url src/lib.rs --ref v1.2.0
        git-file-url README.md --platform gitlab
    """
    try:
        options = LinkOptions.from_cli(
            remote=remote,
            ref=ref,
            platform=platform.lower() if platform else None,
            url=url,
            log_level=log_level,
        )
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(2)

    configure_logging(options.log_level)

    try:
        file_url = FileUrlResolver(options).resolve(path)
    except GitFileUrlError as e:
        click.echo(f"Error: {e}", err=True)
        log.debug("resolve_error", error_type=type(e).__name__, exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        log.error("resolve_unexpected", exc_info=True)
        sys.exit(1)

    click.echo(file_url)


if __name__ == "__main__":
    cli()
