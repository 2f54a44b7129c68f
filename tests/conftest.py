"""
Test fixtures shared across all PMD review tests.
"""

import pytest

from pmd_review.models.pmd_models import Finding, PmdConfiguration, Report


class FakeAnalysis:
    """Stands in for a PMD session; records how it was used."""

    def __init__(self, configuration: PmdConfiguration, report: Report, error: Exception | None):
        self.configuration = configuration
        self.report = report
        self.error = error
        self.runs = 0
        self.closed = False

    def perform_analysis_and_collect_report(self) -> Report:
        self.runs += 1
        if self.error is not None:
            raise self.error
        return self.report

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class FakeAnalyzer:
    """Analysis factory handing out FakeAnalysis sessions."""

    def __init__(self):
        self.report = Report()
        self.error: Exception | None = None
        self.sessions: list[FakeAnalysis] = []

    def __call__(self, configuration: PmdConfiguration) -> FakeAnalysis:
        session = FakeAnalysis(configuration, self.report, self.error)
        self.sessions.append(session)
        return session


@pytest.fixture
def fake_analyzer():
    return FakeAnalyzer()


@pytest.fixture
def java_workspace(tmp_path, monkeypatch):
    """Workspace with A.java, B.java and README.md; cwd is the workspace."""
    for name in ("A.java", "B.java", "README.md"):
        (tmp_path / name).write_text("class X {}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_finding():
    def _make(**overrides) -> Finding:
        values = {
            "filename": "A.java",
            "begin_line": 12,
            "priority": 2,
            "description": "avoid X",
            "rule_name": "AvoidX",
            "rule_set": "Design",
            "rule_description": "",
            "external_info_url": "",
        }
        values.update(overrides)
        return Finding(**values)

    return _make


@pytest.fixture
def build_sarif():
    """Build a PMD-shaped SARIF document from (rule, result) descriptions."""

    def _build(rules, results, successful=True, notifications=None, config_notifications=None):
        return {
            "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "PMD",
                            "version": "7.0.0",
                            "informationUri": "https://docs.pmd-code.org/latest/",
                            "rules": [
                                {
                                    "id": r["id"],
                                    "shortDescription": {"text": r.get("short", "")},
                                    "fullDescription": {"text": r.get("rationale", "")},
                                    "helpUri": r.get("url", ""),
                                    "properties": {
                                        "ruleset": r.get("ruleset", "Best Practices"),
                                        "priority": r.get("priority", 3),
                                        "tags": [r.get("ruleset", "Best Practices")],
                                    },
                                }
                                for r in rules
                            ],
                        }
                    },
                    "results": [
                        {
                            "ruleId": res["rule"],
                            "ruleIndex": res.get("index", [r["id"] for r in rules].index(res["rule"])),
                            "message": {"text": res["message"]},
                            "locations": [
                                {
                                    "physicalLocation": {
                                        "artifactLocation": {"uri": res["uri"]},
                                        "region": {
                                            "startLine": res["line"],
                                            "startColumn": 1,
                                            "endLine": res["line"],
                                            "endColumn": 10,
                                        },
                                    }
                                }
                            ],
                        }
                        for res in results
                    ],
                    "invocations": [
                        {
                            "executionSuccessful": successful,
                            "toolConfigurationNotifications": config_notifications or [],
                            "toolExecutionNotifications": notifications or [],
                        }
                    ],
                }
            ],
        }

    return _build
