"""
PMD Review Configuration — pydantic-settings based.

All settings are read from environment variables or .env file. Settings are
handed to the processor explicitly; nothing reads them as a module global.
"""

from __future__ import annotations

import shlex
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Adapter settings sourced from environment variables."""

    # ── PMD ──
    pmd_rulesets: str | None = Field(
        default=None,
        description="Comma-separated PMD rule-set identifiers",
    )
    pmd_show_violation_details: bool = Field(
        default=False,
        description="Append rule rationale and documentation URL to messages",
    )
    pmd_executable: str = Field(default="pmd", description="PMD launcher on PATH or absolute path")
    pmd_extra_args: str = Field(
        default="",
        description="Extra arguments passed to 'pmd check', split with shell-style quoting",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @field_validator("pmd_show_violation_details", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> bool:
        # Only a case-insensitive "true" enables details
        if isinstance(value, bool):
            return value
        return isinstance(value, str) and value.lower() == "true"

    @field_validator("pmd_extra_args")
    @classmethod
    def _check_extra_args(cls, value: str) -> str:
        try:
            shlex.split(value)
        except ValueError as e:
            raise ValueError(f"PMD_EXTRA_ARGS is not a valid argument list: {e}") from e
        return value

    @property
    def pmd_extra_arg_list(self) -> list[str]:
        return shlex.split(self.pmd_extra_args)


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return Settings()
