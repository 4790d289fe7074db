"""Exception hierarchy for issue-to-project."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from issue_to_project.contracts.project import ProjectReference


class IssueToProjectError(Exception):
    """Base exception for all issue-to-project errors."""


class ConfigError(IssueToProjectError):
    """Required input missing or unreadable."""


class ProjectURLError(IssueToProjectError):
    """Project board URL cannot be turned into a project reference."""


class InvalidProjectUrlError(ProjectURLError):
    """Project URL does not have the ``/{orgs|users}/<owner>/projects/<number>`` shape."""


class UnsupportedOwnerTypeError(ProjectURLError):
    """Owner segment of the project URL is neither ``orgs`` nor ``users``."""

    def __init__(self, owner_type: str | None) -> None:
        super().__init__(f"Unsupported ownerType: {owner_type}. Must be one of 'orgs' or 'users'")
        self.owner_type = owner_type


class ProviderError(IssueToProjectError):
    """Base remote operation failure."""


class TransportError(ProviderError):
    """Network, authentication or GraphQL-level failure."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: list[Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = list(errors or [])
        self.data = data


class BoardNotFoundError(ProviderError):
    """Board lookup succeeded but returned no project node."""

    def __init__(self, reference: ProjectReference) -> None:
        super().__init__(
            f"Project board not found: {reference.url} "
            "(check that the board exists and the token can read it)"
        )
        self.reference = reference


class DraftCreationError(ProviderError):
    """Draft issue mutation returned no project item."""

    def __init__(self, message: str, *, project_id: str) -> None:
        super().__init__(message)
        self.project_id = project_id
