"""Load the triggering workflow event."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from issue_to_project.contracts.exceptions import ConfigError
from issue_to_project.contracts.issue import IssueSnapshot, RepositoryContext

_LOG = logging.getLogger(__name__)


class EventContext(BaseModel):
    issue: IssueSnapshot
    repository: RepositoryContext

    model_config = {"frozen": True}


def _label_names(raw_labels: Any) -> list[str]:
    if not isinstance(raw_labels, list):
        return []
    names: list[str] = []
    for label in raw_labels:
        name = label.get("name") if isinstance(label, dict) else label
        if isinstance(name, str):
            names.append(name.lower())
    return names


def issue_from_payload(payload: Mapping[str, Any]) -> IssueSnapshot:
    issue = payload.get("issue")
    if not isinstance(issue, dict):
        raise ConfigError("event payload does not contain an issue")
    try:
        return IssueSnapshot(
            number=issue.get("number"),
            html_url=issue.get("html_url"),
            title=issue.get("title"),
            body=issue.get("body"),
            node_id=issue.get("node_id"),
            labels=_label_names(issue.get("labels")),
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid issue in event payload: {exc}") from exc


def repository_from_payload(payload: Mapping[str, Any]) -> RepositoryContext:
    repository = payload.get("repository")
    if not isinstance(repository, dict):
        return RepositoryContext()
    owner = repository.get("owner")
    owner_login = owner.get("login") if isinstance(owner, dict) else None
    full_name = repository.get("full_name")
    return RepositoryContext(
        owner_login=owner_login if isinstance(owner_login, str) else None,
        full_name=full_name if isinstance(full_name, str) else None,
    )


def load_event(path: str | Path | None = None, *, environ: Mapping[str, str] | None = None) -> EventContext:
    """Read the event JSON from *path*, falling back to ``GITHUB_EVENT_PATH``."""
    env = os.environ if environ is None else environ
    raw_path = path if path is not None else env.get("GITHUB_EVENT_PATH", "")
    if not str(raw_path).strip():
        raise ConfigError("no event payload: pass --event-path or set GITHUB_EVENT_PATH")

    event_path = Path(raw_path).expanduser()
    try:
        payload: Any = json.loads(event_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading event payload: {event_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in event payload: {event_path}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"event payload is not a JSON object: {event_path}")

    context = EventContext(issue=issue_from_payload(payload), repository=repository_from_payload(payload))
    _LOG.debug(
        "Event issue #%d in %s (labels: %s)",
        context.issue.number,
        context.repository.full_name or "<unknown repository>",
        ", ".join(context.issue.labels) or "none",
    )
    return context
