"""Project board target parsing."""

from issue_to_project.targets.github_project import (
    ProjectUrlParts,
    build_project_reference,
    owner_kind_from_segment,
    parse_project_url,
    split_project_url,
)

__all__ = [
    "ProjectUrlParts",
    "build_project_reference",
    "owner_kind_from_segment",
    "parse_project_url",
    "split_project_url",
]
