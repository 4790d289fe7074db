"""GraphQL executor over an ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx

from issue_to_project.contracts.config import ActionConfig
from issue_to_project.contracts.exceptions import TransportError
from issue_to_project.contracts.executor import GraphQLExecutor

_LOG = logging.getLogger(__name__)

USER_AGENT = "issue-to-project"


class GitHubGraphQLClient(GraphQLExecutor):
    """Posts GraphQL documents to *url* using a caller-owned ``httpx.AsyncClient``.

    Failures are never retried; every one surfaces as :class:`TransportError`.
    """

    def __init__(self, *, url: str, http_client: httpx.AsyncClient) -> None:
        self._url = url
        self._http_client = http_client

    async def execute_query(self, document: str, variables: Mapping[str, Any]) -> dict[str, Any]:
        return self.get_data(await self.execute(document, variables=variables))

    async def execute_mutation(self, document: str, variables: Mapping[str, Any]) -> dict[str, Any]:
        return self.get_data(await self.execute(document, variables=variables))

    async def execute(
        self,
        document: str,
        *,
        variables: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload = {"query": document, "variables": dict(variables or {})}

        try:
            response = await self._http_client.post(self._url, json=payload)
        except httpx.HTTPError as exc:
            raise TransportError(f"GitHub GraphQL request failed: {exc}") from exc

        if response.is_error:
            raise TransportError(
                f"GitHub GraphQL request failed with HTTP {response.status_code}: {response.text.strip()}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportError(
                "GitHub GraphQL response is not valid JSON", status_code=response.status_code
            ) from exc
        if not isinstance(body, dict):
            raise TransportError("GitHub GraphQL response is not a JSON object", status_code=response.status_code)
        return body

    @staticmethod
    def get_data(response: dict[str, Any]) -> dict[str, Any]:
        errors = response.get("errors") or []
        if errors:
            messages = [
                str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors
            ]
            data = response.get("data")
            raise TransportError(
                f"GraphQL returned errors: {'; '.join(messages)}",
                errors=errors,
                data=data if isinstance(data, dict) else None,
            )

        data = response.get("data")
        if not isinstance(data, dict):
            raise TransportError("GraphQL response missing data payload")
        return data


@asynccontextmanager
async def open_graphql_client(
    config: ActionConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[GitHubGraphQLClient]:
    """Yield an authenticated client for ``config.api_url``; closes the HTTP pool on exit."""
    _LOG.debug("Opening GraphQL client for %s", config.api_url)
    async with httpx.AsyncClient(
        headers={
            "Authorization": f"Bearer {config.github_token}",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        },
        timeout=httpx.Timeout(30.0),
        transport=transport,
    ) as http_client:
        yield GitHubGraphQLClient(url=config.api_url, http_client=http_client)
