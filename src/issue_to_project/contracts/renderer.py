"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from issue_to_project.contracts.issue import IssueSnapshot


class BodyRenderer(ABC):
    @abstractmethod
    def render(self, issue: IssueSnapshot) -> str: ...  # pragma: no cover
