"""Public API surface for issue-to-project."""

from issue_to_project.config import load_config
from issue_to_project.contracts import (
    DEFAULT_API_URL,
    ActionConfig,
    BoardHandle,
    BoardNotFoundError,
    BodyRenderer,
    ConfigError,
    DraftCreationError,
    DraftItem,
    GraphQLExecutor,
    InvalidProjectUrlError,
    IssueSnapshot,
    IssueToProjectError,
    LinkStage,
    OwnerKind,
    ProjectReference,
    ProjectURLError,
    ProviderError,
    RepositoryContext,
    TransportError,
    UnsupportedOwnerTypeError,
)
from issue_to_project.event import EventContext, load_event
from issue_to_project.providers.github import GitHubGraphQLClient, open_graphql_client
from issue_to_project.renderers import MarkdownRenderer
from issue_to_project.sdk import IssueLinker, link_issue
from issue_to_project.targets import parse_project_url

__all__ = [
    "DEFAULT_API_URL",
    "ActionConfig",
    "BoardHandle",
    "BoardNotFoundError",
    "BodyRenderer",
    "ConfigError",
    "DraftCreationError",
    "DraftItem",
    "EventContext",
    "GitHubGraphQLClient",
    "GraphQLExecutor",
    "InvalidProjectUrlError",
    "IssueLinker",
    "IssueSnapshot",
    "IssueToProjectError",
    "LinkStage",
    "MarkdownRenderer",
    "OwnerKind",
    "ProjectReference",
    "ProjectURLError",
    "ProviderError",
    "RepositoryContext",
    "TransportError",
    "UnsupportedOwnerTypeError",
    "link_issue",
    "load_config",
    "load_event",
    "open_graphql_client",
    "parse_project_url",
]
