"""Public contracts for issue-to-project."""

from issue_to_project.contracts.config import DEFAULT_API_URL, ActionConfig
from issue_to_project.contracts.exceptions import (
    BoardNotFoundError,
    ConfigError,
    DraftCreationError,
    InvalidProjectUrlError,
    IssueToProjectError,
    ProjectURLError,
    ProviderError,
    TransportError,
    UnsupportedOwnerTypeError,
)
from issue_to_project.contracts.executor import GraphQLExecutor
from issue_to_project.contracts.issue import IssueSnapshot, RepositoryContext
from issue_to_project.contracts.link import LinkStage
from issue_to_project.contracts.project import BoardHandle, DraftItem, OwnerKind, ProjectReference
from issue_to_project.contracts.renderer import BodyRenderer

__all__ = [
    "DEFAULT_API_URL",
    "ActionConfig",
    "BoardHandle",
    "BoardNotFoundError",
    "BodyRenderer",
    "ConfigError",
    "DraftCreationError",
    "DraftItem",
    "GraphQLExecutor",
    "InvalidProjectUrlError",
    "IssueSnapshot",
    "IssueToProjectError",
    "LinkStage",
    "OwnerKind",
    "ProjectReference",
    "ProjectURLError",
    "ProviderError",
    "RepositoryContext",
    "TransportError",
    "UnsupportedOwnerTypeError",
]
