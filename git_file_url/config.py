"""
Option model using Pydantic for validated command-line settings.

git-file-url reads no configuration file and no environment variables; the
command-line options are the whole configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from git_file_url.enums import Platform
from git_file_url.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LinkOptions(BaseModel):
    """Options that change how a file link is built."""

    model_config = ConfigDict(frozen=True)

    remote: str | None = Field(default=None, description="Remote name to read the URL from")
    ref: str | None = Field(default=None, description="Branch, tag or commit to link to")
    platform: Platform | None = Field(default=None, description="Force this platform's URL convention")
    url: str | None = Field(default=None, description="Repository URL to use instead of the remote")
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("remote", "ref", "url")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_url_or_remote(self) -> LinkOptions:
        if self.url is not None and self.remote is not None:
            raise ValueError("--remote and --url cannot be combined")
        return self

    @classmethod
    def from_cli(cls, **options: object) -> LinkOptions:
        """Build options from parsed CLI values.

        Raises:
            ConfigurationError: If any option value is invalid
        """
        try:
            return cls(**options)
        except ValidationError as e:
            problems = "; ".join(_format_error(err) for err in e.errors())
            raise ConfigurationError(f"Invalid options: {problems}") from e


def _format_error(err: Mapping[str, Any]) -> str:
    if not err["loc"]:
        return err["msg"]
    return f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
