"""GitHub Projects (v2) implementation."""

from issue_to_project.providers.github.board import resolve_board
from issue_to_project.providers.github.draft import DEFAULT_TITLE, create_draft_item
from issue_to_project.providers.github.github_gql import GitHubGraphQLClient, open_graphql_client

__all__ = [
    "DEFAULT_TITLE",
    "GitHubGraphQLClient",
    "create_draft_item",
    "open_graphql_client",
    "resolve_board",
]
