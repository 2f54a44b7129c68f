"""
PMD Data Models — Run configuration, raw findings and reports.

Transient records owned by a single adapter invocation. Nothing here is
persisted or shared across runs.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

from pydantic import BaseModel, Field


class RulePriority(IntEnum):
    """PMD rule priorities as reported in the ``priority`` property."""

    HIGH = 1
    MEDIUM_HIGH = 2
    MEDIUM = 3
    MEDIUM_LOW = 4
    LOW = 5


class PmdConfiguration(BaseModel):
    """Inputs for one PMD run."""

    rule_sets: list[str] = Field(default_factory=list)
    input_paths: list[Path] = Field(default_factory=list)


class Finding(BaseModel):
    """One raw rule violation reported by PMD."""

    filename: str = Field(..., description="File path the finding refers to")
    begin_line: int = Field(..., description="1-based first line of the finding")
    priority: int = Field(..., description="Raw PMD rule priority")
    description: str = Field(..., description="Violation message produced by the rule")
    rule_name: str = ""
    rule_set: str = ""
    rule_description: str = Field(default="", description="Rule rationale text")
    external_info_url: str = Field(default="", description="Rule documentation link")


class Report(BaseModel):
    """Findings collected from a single PMD run, in PMD's order."""

    findings: list[Finding] = Field(default_factory=list)
    tool_version: str = ""
