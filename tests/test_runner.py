import threading
from datetime import date
from unittest.mock import MagicMock

from deprecation_watch.engine.runner import run_all
from deprecation_watch.models import EvaluationResult, Outcome, Stage
from deprecation_watch.tools import default_tools

FEEDS = {
    "https://endoflife.date/api/node.json": [
        {"cycle": "20", "latest": "20.5.0", "eol": "2026-04-30", "latestReleaseDate": "2025-11-12", "lts": True},
    ],
    "https://endoflife.date/api/python.json": [
        {"cycle": "3.10", "latest": "3.10.19", "eol": "2026-10-31", "latestReleaseDate": "2025-10-09", "lts": False},
    ],
    "https://endoflife.date/api/go.json": [
        {"cycle": "1.21", "latest": "1.21.0", "eol": False, "latestReleaseDate": "2025-08-01"},
        {"cycle": "1.20", "latest": "1.20.0", "eol": False, "latestReleaseDate": "2025-01-01"},
    ],
}
MANIFESTS = {"node-versions": ["20.5.0"], "python-versions": ["3.10.19"], "go-versions": ["1.20.0"]}


def test_python_manifest_failure_is_isolated(make_engine, tracker):
    engine = make_engine(FEEDS, MANIFESTS, today=date(2026, 1, 1), broken={"python-versions"})

    report = run_all(engine, default_tools())

    outcomes = {r.tool: r.outcome for r in report.results}
    assert outcomes == {
        "Node": Outcome.NOTIFY_CREATED,
        "Python": Outcome.FAILED,
        "Go": Outcome.NOTIFY_CREATED,
    }
    assert not report.ok
    assert [r.tool for r in report.failed] == ["Python"]
    assert len(tracker.created) == 2


def test_all_tools_succeeding_makes_a_clean_run(make_engine):
    engine = make_engine(FEEDS, MANIFESTS, today=date(2026, 1, 1))

    report = run_all(engine, default_tools())

    assert report.ok
    assert [r.tool for r in report.results] == ["Node", "Python", "Go"]


def test_unexpected_exception_becomes_a_failed_result():
    tools = default_tools()
    engine = MagicMock()

    def evaluate(tool):
        if tool.name == "Go":
            raise RuntimeError("boom")
        return EvaluationResult(tool=tool.name, outcome=Outcome.NO_ACTION_NEEDED, stage=Stage.POLICY_PATH)

    engine.evaluate.side_effect = evaluate

    report = run_all(engine, tools)

    assert [r.outcome for r in report.results] == [
        Outcome.NO_ACTION_NEEDED,
        Outcome.NO_ACTION_NEEDED,
        Outcome.FAILED,
    ]
    assert isinstance(report.results[2].error, RuntimeError)


def test_evaluations_run_concurrently():
    tools = default_tools()
    barrier = threading.Barrier(len(tools), timeout=5)
    engine = MagicMock()

    def evaluate(tool):
        # Deadlocks (and times out) unless all three are in flight together.
        barrier.wait()
        return EvaluationResult(tool=tool.name, outcome=Outcome.NO_ACTION_NEEDED, stage=Stage.POLICY_PATH)

    engine.evaluate.side_effect = evaluate

    report = run_all(engine, tools)

    assert report.ok
