"""
Rule Configuration Loader — Splits the PMD_RULESETS value.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("pmd_review.rulesets")

RULESET_SEPARATOR = ","


def load_rules(raw_value: str | None) -> list[str]:
    """
    Split a comma-separated rule-set value into identifiers.

    Identifiers are not validated; PMD rejects unknown ones at run time.
    An absent value means no rule sets.
    """
    logger.info(f"Using PMD rulesets {raw_value}")
    if raw_value is None:
        return []
    return raw_value.split(RULESET_SEPARATOR)
