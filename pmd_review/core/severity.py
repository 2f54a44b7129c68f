"""
Severity Mapper — PMD rule priority to canonical severity.

PMD's five priority levels collapse onto the pipeline's four severities,
the two middle tiers merging into INFO. Unknown priorities are a version
mismatch with PMD and halt conversion.
"""

from __future__ import annotations

from pmd_review.errors import UnsupportedPriorityError
from pmd_review.models.pmd_models import RulePriority
from pmd_review.models.review_models import Severity

# Must cover every RulePriority member
PRIORITY_SEVERITIES: dict[RulePriority, Severity] = {
    RulePriority.HIGH: Severity.ERROR,
    RulePriority.MEDIUM_HIGH: Severity.WARNING,
    RulePriority.MEDIUM: Severity.INFO,
    RulePriority.MEDIUM_LOW: Severity.INFO,
    RulePriority.LOW: Severity.IGNORE,
}


def convert(priority: int | RulePriority) -> Severity:
    """Map a PMD priority to a Severity, raising UnsupportedPriorityError otherwise."""
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise UnsupportedPriorityError(priority)
    try:
        return PRIORITY_SEVERITIES[RulePriority(priority)]
    except (ValueError, KeyError):
        raise UnsupportedPriorityError(priority) from None
