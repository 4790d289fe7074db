"""Markdown renderer for draft item bodies."""

from __future__ import annotations

from issue_to_project.contracts.issue import IssueSnapshot
from issue_to_project.contracts.renderer import BodyRenderer

DESCRIPTION_PLACEHOLDER = "_Add a description of the work here._"
TASK_PLACEHOLDERS = ("Task 1", "Task 2", "Task 3")
DIVIDER = "---"


def checklist(items: tuple[str, ...] | list[str]) -> str:
    return "\n".join(f"- [ ] {item}" for item in items)


def issue_link(issue: IssueSnapshot) -> str:
    return f"> Created from issue [#{issue.number}]({issue.html_url or ''})"


class MarkdownRenderer(BodyRenderer):
    """Fixed five-block draft body.

    The original issue body is appended verbatim, without escaping.
    """

    def render(self, issue: IssueSnapshot) -> str:
        sections: list[str] = [
            issue_link(issue),
            f"## Description\n\n{DESCRIPTION_PLACEHOLDER}",
            f"## Tasks\n\n{checklist(TASK_PLACEHOLDERS)}",
            DIVIDER,
            f"## Original Description\n\n{issue.body or ''}",
        ]
        return "\n\n".join(sections)
