"""
SARIF Report Parser — Turns PMD's SARIF output into a Report.

PMD writes one run per invocation. Rule metadata lives in
``runs[0].tool.driver.rules`` and results reference it by ``ruleIndex``
(falling back to ``ruleId``). Locations are ``file://`` URIs which are
mapped back to the file names the pipeline supplied. Results without a
location are dropped.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

from pmd_review.errors import PmdExecutionError
from pmd_review.models.pmd_models import Finding, Report

logger = logging.getLogger("pmd_review.engine.sarif")


def parse_report(
    payload: str,
    input_paths: list[Path] | None = None,
) -> Report:
    """
    Parse a SARIF document produced by ``pmd check -f sarif``.

    Args:
        payload: SARIF JSON text.
        input_paths: Paths handed to PMD; reported locations resolving to
            one of them are reported under that path's original spelling.

    Raises:
        PmdExecutionError: if the document is not valid SARIF or PMD
            reported configuration errors. Per-file processing errors
            are logged and the remaining findings kept.
    """
    try:
        document = json.loads(payload)
    except json.JSONDecodeError as e:
        raise PmdExecutionError(f"PMD report is not valid JSON: {e}") from e

    runs = document.get("runs") if isinstance(document, dict) else None
    if not runs:
        raise PmdExecutionError("PMD report contains no runs")
    run = runs[0]

    _check_invocations(run)

    driver = run.get("tool", {}).get("driver", {})
    rules: list[dict[str, Any]] = driver.get("rules") or []
    rules_by_id = {r.get("id"): r for r in rules}
    originals = _original_names(input_paths or [])

    findings: list[Finding] = []
    for result in run.get("results") or []:
        rule = _lookup_rule(result, rules, rules_by_id)
        properties = rule.get("properties") or {}
        location = _first_location(result)
        line = location.get("line")
        if not location.get("uri") or not isinstance(line, int) or line < 1:
            logger.warning(f"Skipping PMD result without a usable location: {result.get('ruleId')}")
            continue
        findings.append(
            Finding(
                filename=_to_original(location.get("uri", ""), originals),
                begin_line=line,
                priority=properties.get("priority", 0),
                description=(result.get("message") or {}).get("text", ""),
                rule_name=result.get("ruleId") or rule.get("id", ""),
                rule_set=properties.get("ruleset", ""),
                rule_description=(rule.get("fullDescription") or {}).get("text", ""),
                external_info_url=rule.get("helpUri") or "",
            )
        )

    return Report(findings=findings, tool_version=driver.get("version", ""))


def _check_invocations(run: dict[str, Any]) -> None:
    # Configuration errors fail the run; per-file processing errors only warn
    for invocation in run.get("invocations") or []:
        for message in _notification_texts(invocation.get("toolExecutionNotifications")):
            logger.warning(f"PMD processing error: {message}")
        config_errors = _notification_texts(invocation.get("toolConfigurationNotifications"))
        if config_errors:
            raise PmdExecutionError(f"PMD reported configuration errors: {'; '.join(config_errors)}")


def _notification_texts(notifications: list[dict[str, Any]] | None) -> list[str]:
    texts = [(n.get("message") or {}).get("text", "") for n in notifications or []]
    return [t for t in texts if t]


def _lookup_rule(
    result: dict[str, Any],
    rules: list[dict[str, Any]],
    rules_by_id: dict[str, dict[str, Any]],
) -> dict[str, Any]:
    index = result.get("ruleIndex")
    if isinstance(index, int) and 0 <= index < len(rules):
        return rules[index]
    return rules_by_id.get(result.get("ruleId"), {})


def _first_location(result: dict[str, Any]) -> dict[str, Any]:
    locations = result.get("locations") or []
    if not locations:
        return {}
    physical = locations[0].get("physicalLocation") or {}
    return {
        "uri": (physical.get("artifactLocation") or {}).get("uri", ""),
        "line": (physical.get("region") or {}).get("startLine", 0),
    }


def _original_names(input_paths: list[Path]) -> dict[str, str]:
    return {_canonical(path): os.fspath(path) for path in input_paths}


def _canonical(path: Path) -> str:
    return os.path.normcase(os.fspath(path.resolve()))


def _uri_to_path(uri: str) -> Path:
    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path))
    return Path(uri)


def _to_original(uri: str, originals: dict[str, str]) -> str:
    if not uri:
        return ""
    path = _uri_to_path(uri)
    return originals.get(_canonical(path), os.fspath(path))
