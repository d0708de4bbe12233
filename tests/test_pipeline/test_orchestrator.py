"""
End-to-end tests for the pipeline orchestrator.
"""

import json
import os
import re
import pytest
from unittest.mock import patch

from src.agents.aggregation import KeywordTableBuilder, ReportAssembler, utc_timestamp
from src.agents.keywords import STOPWORDS
from src.agents.rearchitecture import ACTION_CATALOG
from src.orchestrator import PipelineOrchestrator
from src.utils.storage import ReportStorage

SAMPLE = (
    "The nightly cron workflow failed with error 128 after commit abc123. "
    "The workflow pushes to main using the gh token stored as a secret. "
    "We should restrict the token permissions. "
    "Why does the notify step send an email on every run?\n\n"
    "Maintainers must label the issue before triage."
)


@pytest.fixture
def orchestrator():
    return PipelineOrchestrator(
        assembler=ReportAssembler(clock=lambda: "2026-10-16T12:00:00.000Z")
    )


def test_report_shape_and_meta(orchestrator):
    data = orchestrator.analyze(SAMPLE).to_dict()

    assert data["meta"] == {"timestamp": "2026-10-16T12:00:00.000Z", "sourceSize": len(SAMPLE)}
    assert set(data["focalPoints"]) == {"focal", "micro"}


def test_default_timestamp_format():
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", utc_timestamp())


def test_pipeline_properties(orchestrator):
    report = orchestrator.analyze(SAMPLE)
    data = report.to_dict()

    decon = data["deconstruction"]
    assert len(decon["facts"]) + len(decon["claims"]) + len(decon["questions"]) == 5
    assert decon["questions"] == ["Why does the notify step send an email on every run?"]
    assert decon["claims"] == ["We should restrict the token permissions."]

    keywords = data["keywords"]
    counts = [k["count"] for k in keywords]
    assert len(keywords) <= 12
    assert counts == sorted(counts, reverse=True)
    assert all(k["keyword"] not in STOPWORDS and len(k["keyword"]) > 2 for k in keywords)

    focal = data["focalPoints"]["focal"]
    top6 = [k["keyword"] for k in keywords[:6]]
    assert len(focal) <= 5
    for fp in focal:
        assert fp["triggers"]
        assert set(fp["triggers"]) <= set(top6)
        assert all(t in fp["summary"].lower() for t in fp["triggers"])

    micro = data["focalPoints"]["micro"]
    assert [m["keyword"] for m in micro] == top6
    assert [m["id"] for m in micro] == [f"K{i + 1}" for i in range(len(top6))]

    assert [p["id"] for p in data["rearchitecture"]] == [fp["id"] for fp in focal]
    for proposal in data["rearchitecture"]:
        assert 1 <= len(proposal["proposals"]) <= 3
        assert proposal["principles"] == ["Simple", "Efficient", "Pragmatic", "Safe"]


def test_security_actions_for_token_and_secret_sentence():
    orchestrator = PipelineOrchestrator()
    text = "The gh token secret leaked. The gh token secret must rotate. Lunch is ready."
    report = orchestrator.analyze(text)

    audit, instrument = ACTION_CATALOG[1][1]
    token_proposals = [
        p for p in report.rearchitecture if "gh token" in p.problem.lower()
    ]
    assert len(token_proposals) == 2
    assert report.rearchitecture[0].problem == "The gh token secret must rotate."
    for proposal in token_proposals:
        assert audit in proposal.proposals
        assert instrument in proposal.proposals


def test_analysis_is_idempotent():
    first = PipelineOrchestrator().analyze(SAMPLE).to_dict()
    second = PipelineOrchestrator().analyze(SAMPLE).to_dict()

    first.pop("meta")
    second.pop("meta")
    assert first == second


def test_run_without_storage(orchestrator):
    report, path = orchestrator.run(SAMPLE)

    assert path is None
    assert report.meta.source_size == len(SAMPLE)


def test_run_persists_report_and_keyword_table(tmp_path):
    orchestrator = PipelineOrchestrator(
        storage=ReportStorage(str(tmp_path)),
        write_keyword_table=True
    )

    report, path = orchestrator.run(SAMPLE)

    assert os.path.dirname(path) == str(tmp_path)
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == report.to_dict()
    assert os.path.exists(path.replace(".json", "_keywords.csv"))


def test_keyword_table_marks_triggers(orchestrator):
    report = orchestrator.analyze(SAMPLE)
    table = KeywordTableBuilder().build(report)

    assert len(table) == len(report.keywords)
    assert table["Trigger"].sum() == len(report.focal_points.micro)
    assert list(table["Rank"]) == list(range(1, len(table) + 1))


def test_keyword_table_next_to_report_in_dotted_results_dir(tmp_path):
    results_dir = tmp_path / "out.json.d"
    orchestrator = PipelineOrchestrator(
        storage=ReportStorage(str(results_dir)),
        write_keyword_table=True
    )

    _, path = orchestrator.run(SAMPLE)

    written = sorted(os.listdir(results_dir))
    assert len(written) == 2
    assert os.path.basename(path) in written
    assert any(name.endswith("_keywords.csv") for name in written)


def test_failed_keyword_table_leaves_no_report(tmp_path):
    orchestrator = PipelineOrchestrator(
        storage=ReportStorage(str(tmp_path)),
        write_keyword_table=True
    )

    with patch("src.utils.storage.pd.DataFrame.to_csv", side_effect=OSError("disk full")):
        with pytest.raises(OSError, match="disk full"):
            orchestrator.run(SAMPLE)

    assert os.listdir(tmp_path) == []
