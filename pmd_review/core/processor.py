"""
PMD Processor — Review adapter running PMD over the reviewed files.

Pipeline for one invocation:
1. Select the review's Java files (all must exist on disk)
2. Load the configured rule sets
3. Run one PMD analysis session, always closed afterwards
4. Convert every finding into a canonical Violation

Nothing is shared between invocations; settings are passed in at
construction.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable

from pmd_review.config import Settings
from pmd_review.core import file_selector, renderer, severity
from pmd_review.core.rulesets import load_rules
from pmd_review.engine.pmd_analysis import Analysis, PmdAnalysis
from pmd_review.errors import AnalysisFailure
from pmd_review.models.pmd_models import PmdConfiguration, Report
from pmd_review.models.review_models import (
    FileFilter,
    FileTransformer,
    Review,
    ReviewResult,
    Violation,
    review_filename,
)

logger = logging.getLogger("pmd_review.processor")

SOURCE_NAME = "PMD"

AnalysisFactory = Callable[[PmdConfiguration], Analysis]


class PmdProcessor:
    """Runs PMD and normalizes its report into a ReviewResult."""

    def __init__(
        self,
        settings: Settings,
        analysis_factory: AnalysisFactory | None = None,
        file_filter: FileFilter = file_selector.PMD_FILTER,
        transformer: FileTransformer = review_filename,
    ) -> None:
        self.settings = settings
        self.analysis_factory = analysis_factory or partial(
            PmdAnalysis.create,
            executable=settings.pmd_executable,
            extra_args=settings.pmd_extra_arg_list,
        )
        self.file_filter = file_filter
        self.transformer = transformer

    @property
    def name(self) -> str:
        return SOURCE_NAME

    def process(self, review: Review) -> ReviewResult | None:
        """
        Review the PMD-relevant files of ``review``.

        Returns:
            None when no file was selected, otherwise the (possibly empty)
            ReviewResult.

        Raises:
            MissingFileError: a selected file does not exist.
            AnalysisFailure: PMD failed to configure or run.
            UnsupportedPriorityError: PMD reported an unknown priority.
        """
        files_to_review = file_selector.select(review.get_files(self.file_filter, self.transformer))
        return self.analyze(
            files_to_review,
            load_rules(self.settings.pmd_rulesets),
            self.settings.pmd_show_violation_details,
        )

    def analyze(
        self,
        selected_files: list[Path],
        rule_sets: list[str],
        show_details: bool,
    ) -> ReviewResult | None:
        """Run PMD once over ``selected_files`` and convert its report."""
        if not selected_files:
            return None

        try:
            configuration = PmdConfiguration(rule_sets=rule_sets, input_paths=selected_files)
            report = self._do_pmd(configuration)
        except Exception as e:
            logger.error(
                "PMD processing error. Something wrong with configuration "
                f"or analyzed files are not in workspace: {e}"
            )
            raise AnalysisFailure("PMD processing error") from e

        return convert_report(report, show_details)

    def _do_pmd(self, configuration: PmdConfiguration) -> Report:
        with self.analysis_factory(configuration) as analysis:
            return analysis.perform_analysis_and_collect_report()


def convert_report(report: Report, show_details: bool) -> ReviewResult:
    """Convert every finding of ``report``, in order, into a Violation."""
    result = ReviewResult()
    for finding in report.findings:
        result.add(
            Violation(
                filename=finding.filename,
                line=finding.begin_line,
                message=renderer.render(finding, show_details),
                severity=severity.convert(finding.priority),
            )
        )
    return result
