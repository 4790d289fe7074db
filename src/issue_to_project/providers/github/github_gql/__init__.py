"""httpx-backed GraphQL client for the GitHub API."""

from issue_to_project.providers.github.github_gql.client import GitHubGraphQLClient, open_graphql_client

__all__ = ["GitHubGraphQLClient", "open_graphql_client"]
