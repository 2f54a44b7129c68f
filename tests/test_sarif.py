"""
Tests for the SARIF report parser.
"""

import json
from pathlib import Path

import pytest

from pmd_review.engine.sarif import parse_report
from pmd_review.errors import PmdExecutionError

RULES = [
    {
        "id": "UnusedPrivateField",
        "rationale": "Detects when a private field is declared and/or assigned a value, but not used.",
        "url": "https://docs.pmd-code.org/latest/pmd_rules_java_bestpractices.html#unusedprivatefield",
        "ruleset": "Best Practices",
        "priority": 3,
    },
    {
        "id": "EmptyCatchBlock",
        "rationale": "",
        "url": "",
        "ruleset": "Error Prone",
        "priority": 1,
    },
]


def test_findings_carry_rule_metadata(tmp_path, build_sarif):
    source = tmp_path / "Foo.java"
    source.write_text("class Foo {}\n", encoding="utf-8")
    document = build_sarif(
        RULES,
        [
            {"rule": "EmptyCatchBlock", "message": "Avoid empty catch blocks", "uri": source.resolve().as_uri(), "line": 7},
            {"rule": "UnusedPrivateField", "message": "Avoid unused private fields such as 'x'.", "uri": source.resolve().as_uri(), "line": 2},
        ],
    )

    report = parse_report(json.dumps(document), [source])

    assert report.tool_version == "7.0.0"
    first, second = report.findings
    assert first.filename == str(source)
    assert first.begin_line == 7
    assert first.priority == 1
    assert first.description == "Avoid empty catch blocks"
    assert first.rule_set == "Error Prone"
    assert first.rule_description == ""
    assert first.external_info_url == ""
    assert second.rule_name == "UnusedPrivateField"
    assert second.priority == 3
    assert second.rule_description.startswith("Detects when a private field")
    assert second.external_info_url.endswith("#unusedprivatefield")


def test_uri_mapped_back_to_supplied_relative_path(tmp_path, monkeypatch, build_sarif):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Foo.java").write_text("class Foo {}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    uri = (tmp_path / "src" / "Foo.java").resolve().as_uri()
    document = build_sarif(RULES, [{"rule": "EmptyCatchBlock", "message": "m", "uri": uri, "line": 1}])

    report = parse_report(json.dumps(document), [Path("src/Foo.java")])

    assert report.findings[0].filename == "src/Foo.java"


def test_unknown_location_keeps_reported_path(tmp_path, build_sarif):
    other = tmp_path / "Other.java"
    document = build_sarif(RULES, [{"rule": "EmptyCatchBlock", "message": "m", "uri": other.as_uri(), "line": 1}])

    report = parse_report(json.dumps(document), [])

    assert report.findings[0].filename == str(other)


def test_rule_looked_up_by_id_when_index_invalid(tmp_path, build_sarif):
    document = build_sarif(
        RULES,
        [{"rule": "UnusedPrivateField", "index": 99, "message": "m", "uri": (tmp_path / "A.java").as_uri(), "line": 4}],
    )

    report = parse_report(json.dumps(document))

    assert report.findings[0].priority == 3
    assert report.findings[0].rule_set == "Best Practices"


def test_missing_priority_left_for_mapper_to_reject(tmp_path, build_sarif):
    document = build_sarif(RULES, [{"rule": "EmptyCatchBlock", "message": "m", "uri": (tmp_path / "A.java").as_uri(), "line": 1}])
    del document["runs"][0]["tool"]["driver"]["rules"][1]["properties"]["priority"]

    report = parse_report(json.dumps(document))

    assert report.findings[0].priority == 0


def test_no_results_is_empty_report(build_sarif):
    report = parse_report(json.dumps(build_sarif(RULES, [])))
    assert report.findings == []


def test_processing_errors_keep_other_findings(tmp_path, build_sarif, caplog):
    document = build_sarif(
        RULES,
        [{"rule": "EmptyCatchBlock", "message": "Avoid empty catch blocks", "uri": (tmp_path / "A.java").as_uri(), "line": 3}],
        successful=False,
        notifications=[{"message": {"text": "ParseException: Broken.java line 1"}}],
    )

    with caplog.at_level("WARNING", logger="pmd_review.engine.sarif"):
        report = parse_report(json.dumps(document))

    assert len(report.findings) == 1
    assert report.findings[0].begin_line == 3
    assert "ParseException: Broken.java line 1" in caplog.text


def test_configuration_errors_raise(build_sarif):
    document = build_sarif(
        [],
        [],
        successful=False,
        config_notifications=[{"message": {"text": "Cannot load ruleset nope"}}],
    )
    with pytest.raises(PmdExecutionError, match="Cannot load ruleset nope"):
        parse_report(json.dumps(document))


def test_results_without_location_are_skipped(tmp_path, build_sarif, caplog):
    document = build_sarif(
        RULES,
        [
            {"rule": "EmptyCatchBlock", "message": "kept", "uri": (tmp_path / "A.java").as_uri(), "line": 5},
            {"rule": "EmptyCatchBlock", "message": "no line", "uri": (tmp_path / "A.java").as_uri(), "line": 0},
            {"rule": "UnusedPrivateField", "message": "no location", "uri": "", "line": 2},
        ],
    )
    del document["runs"][0]["results"][2]["locations"]

    with caplog.at_level("WARNING", logger="pmd_review.engine.sarif"):
        report = parse_report(json.dumps(document))

    assert [f.description for f in report.findings] == ["kept"]
    assert caplog.text.count("without a usable location") == 2


def test_invalid_json_raises():
    with pytest.raises(PmdExecutionError, match="not valid JSON"):
        parse_report("{not json")


def test_document_without_runs_raises():
    with pytest.raises(PmdExecutionError, match="no runs"):
        parse_report(json.dumps({"version": "2.1.0", "runs": []}))
