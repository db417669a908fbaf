from datetime import date

import pytest

from deprecation_watch.engine.composer import compose_intent
from deprecation_watch.models import Category


def test_mismatch_intent():
    intent = compose_intent(Category.MANIFEST_MISMATCH, "Python", "3.12.1", manifest_version="3.12.0")

    assert intent.title == "[AUTOMATIC MESSAGE] Python version `3.12.1` is not in the manifest"
    assert "`3.12.1`" in intent.body and "`3.12.0`" in intent.body
    assert "updating the manifest" in intent.body
    assert intent.labels == ["manifest-version-mismatch"]


def test_deprecation_intent():
    intent = compose_intent(Category.DEPRECATION_NOTICE, "Node", "20.5.0", eol_date=date(2026, 4, 30))

    assert intent.title == "[AUTOMATIC MESSAGE] Node version `20.5.0` is losing support on 2026-04-30"
    assert "ending on 2026-04-30" in intent.body
    assert "upgrading to a newer version of Node" in intent.body
    assert intent.labels == ["deprecation-notice"]


def test_titles_are_stable_across_calls():
    first = compose_intent(Category.DEPRECATION_NOTICE, "Go", "1.20.0", eol_date=date(2025, 7, 1))
    second = compose_intent(Category.DEPRECATION_NOTICE, "Go", "1.20.0", eol_date=date(2025, 7, 1))
    assert first.title == second.title


def test_titles_differ_per_tool_version_and_situation():
    titles = {
        compose_intent(Category.MANIFEST_MISMATCH, "Node", "20.5.0").title,
        compose_intent(Category.MANIFEST_MISMATCH, "Node", "20.6.0").title,
        compose_intent(Category.MANIFEST_MISMATCH, "Python", "20.5.0").title,
        compose_intent(Category.DEPRECATION_NOTICE, "Node", "20.5.0", eol_date=date(2026, 4, 30)).title,
    }
    assert len(titles) == 4


def test_missing_manifest_version_is_reported_as_none():
    intent = compose_intent(Category.MANIFEST_MISMATCH, "Go", "1.22.0")
    assert "`none`" in intent.body


def test_deprecation_needs_a_date():
    with pytest.raises(ValueError):
        compose_intent(Category.DEPRECATION_NOTICE, "Node", "20.5.0")
