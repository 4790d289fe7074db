"""Issue payload contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IssueSnapshot(BaseModel):
    """Read-only view of the issue that triggered the run.

    Optional fields stay ``None`` when the event payload omits them; the
    body renderer and draft creator substitute their own defaults.
    """

    number: int
    html_url: str | None = None
    title: str | None = None
    body: str | None = None
    node_id: str | None = None
    labels: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class RepositoryContext(BaseModel):
    owner_login: str | None = None
    full_name: str | None = None

    model_config = {"frozen": True}
