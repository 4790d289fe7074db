"""Shared test fixtures for issue-to-project tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from issue_to_project.contracts.issue import IssueSnapshot


@pytest.fixture
def sample_issue() -> IssueSnapshot:
    """The issue from the README walkthrough."""
    return IssueSnapshot(
        number=42,
        html_url="https://github.com/x/y/issues/42",
        title="Bug",
        body="It crashes",
        node_id="I_kwDOissue42",
        labels=["bug"],
    )


@pytest.fixture
def issue_payload() -> dict[str, Any]:
    """A trimmed ``issues`` webhook payload."""
    return {
        "action": "opened",
        "issue": {
            "number": 42,
            "node_id": "I_kwDOissue42",
            "html_url": "https://github.com/x/y/issues/42",
            "title": "Bug",
            "body": "It crashes",
            "labels": [{"name": "Bug"}, {"name": "Needs-Triage"}],
        },
        "repository": {"full_name": "x/y", "owner": {"login": "x"}},
    }


@pytest.fixture
def event_file(tmp_path: Path, issue_payload: dict[str, Any]) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(issue_payload), encoding="utf-8")
    return path
