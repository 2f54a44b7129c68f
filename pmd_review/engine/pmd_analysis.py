"""
PMD Analysis Session — Scoped wrapper around one ``pmd check`` run.

A session owns a temporary work directory holding the file list, the
report and, when no rule sets are configured, an empty rule set. The
directory is removed on close, which also runs when used as a context
manager and the analysis raises.

Exit codes: 0 means no violations, 4 means violations were found, 5 means
some files could not be processed (reported, not fatal). Anything else is a
failed run. ``--no-fail-on-error`` keeps PMD from turning processing errors
into a failure exit code.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Protocol, Sequence

from pmd_review.engine.sarif import parse_report
from pmd_review.errors import PmdExecutionError
from pmd_review.models.pmd_models import PmdConfiguration, Report

logger = logging.getLogger("pmd_review.engine.pmd")

SUCCESS_EXIT_CODES = frozenset({0, 4, 5})

EMPTY_RULESET = """<?xml version="1.0" encoding="UTF-8"?>
<ruleset name="empty"
    xmlns="http://pmd.sourceforge.net/ruleset/2.0.0"
    xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    xsi:schemaLocation="http://pmd.sourceforge.net/ruleset/2.0.0 https://pmd.sourceforge.io/ruleset_2_0_0.xsd">
    <description>No rule sets configured</description>
</ruleset>
"""


class Analysis(Protocol):
    """A started analyzer session able to run once and release its resources."""

    def perform_analysis_and_collect_report(self) -> Report: ...

    def close(self) -> None: ...

    def __enter__(self) -> Analysis: ...

    def __exit__(self, *exc_info: object) -> None: ...


class PmdAnalysis:
    """One PMD command-line run and the files it needs."""

    def __init__(
        self,
        configuration: PmdConfiguration,
        executable: str = "pmd",
        extra_args: Sequence[str] = (),
    ) -> None:
        self.configuration = configuration
        self.executable = executable
        self.extra_args = list(extra_args)
        self.work_dir = Path(tempfile.mkdtemp(prefix="pmd-review-"))
        self.closed = False

    @classmethod
    def create(
        cls,
        configuration: PmdConfiguration,
        executable: str = "pmd",
        extra_args: Sequence[str] = (),
    ) -> PmdAnalysis:
        return cls(configuration, executable=executable, extra_args=extra_args)

    @property
    def file_list_path(self) -> Path:
        return self.work_dir / "files.txt"

    @property
    def report_path(self) -> Path:
        return self.work_dir / "report.sarif"

    @property
    def empty_ruleset_path(self) -> Path:
        return self.work_dir / "empty-ruleset.xml"

    def build_command(self) -> list[str]:
        """Command line for ``pmd check`` reading its inputs from the work directory."""
        if self.configuration.rule_sets:
            rule_sets = ",".join(self.configuration.rule_sets)
        else:
            rule_sets = os.fspath(self.empty_ruleset_path)
        return [
            self.executable,
            "check",
            "--no-cache",
            "--no-progress",
            "--no-fail-on-error",
            "--format",
            "sarif",
            "--rulesets",
            rule_sets,
            "--file-list",
            os.fspath(self.file_list_path),
            "--report-file",
            os.fspath(self.report_path),
            *self.extra_args,
        ]

    def perform_analysis_and_collect_report(self) -> Report:
        """
        Run PMD over the configured files.

        Raises:
            PmdExecutionError: if PMD cannot be started, exits with an error
                code, or leaves no readable report.
        """
        if self.closed:
            raise PmdExecutionError("PMD analysis session is already closed")

        self._write_inputs()
        command = self.build_command()
        logger.debug(f"Running {' '.join(command)}")

        start = time.monotonic()
        try:
            proc = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise PmdExecutionError(f"Failed to start PMD '{self.executable}': {e}") from e
        elapsed = (time.monotonic() - start) * 1000

        stderr = (proc.stderr or "").strip()
        if proc.returncode not in SUCCESS_EXIT_CODES:
            raise PmdExecutionError(
                f"PMD exited with code {proc.returncode}: {stderr[:500] or 'no output'}",
                exit_code=proc.returncode,
                stderr=stderr,
            )
        if not self.report_path.exists():
            raise PmdExecutionError(
                "PMD did not write a report",
                exit_code=proc.returncode,
                stderr=stderr,
            )

        report = parse_report(
            self.report_path.read_text(encoding="utf-8"),
            self.configuration.input_paths,
        )
        logger.info(
            f"PMD analyzed {len(self.configuration.input_paths)} files: "
            f"{len(report.findings)} findings ({elapsed:.1f}ms)"
        )
        for finding in report.findings:
            logger.debug(
                f"{finding.filename}:{finding.begin_line} "
                f"[{finding.rule_set}/{finding.rule_name}] priority {finding.priority}"
            )
        return report

    def _write_inputs(self) -> None:
        lines = [os.fspath(p) for p in self.configuration.input_paths]
        self.file_list_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        if not self.configuration.rule_sets:
            self.empty_ruleset_path.write_text(EMPTY_RULESET, encoding="utf-8")

    def close(self) -> None:
        """Remove the work directory. Safe to call more than once."""
        if self.closed:
            return
        shutil.rmtree(self.work_dir, ignore_errors=True)
        self.closed = True

    def __enter__(self) -> PmdAnalysis:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
