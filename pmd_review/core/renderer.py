"""
Violation Renderer — Builds the message shown for a finding.
"""

from __future__ import annotations

from pmd_review.models.pmd_models import Finding

LINE_SEPARATOR = "\n"


def render(finding: Finding, show_details: bool) -> str:
    """
    Render the violation message for a finding.

    Without details the finding's description is returned verbatim. With
    details the rule rationale and then the documentation URL are appended
    on their own lines, each only when non-empty.
    """
    if not show_details:
        return finding.description
    return render_details(finding)


def render_details(finding: Finding) -> str:
    parts = [finding.description]
    if finding.rule_description:
        parts.append(finding.rule_description)
    if finding.external_info_url:
        parts.append(finding.external_info_url)
    return LINE_SEPARATOR.join(parts)
