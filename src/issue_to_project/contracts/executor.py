"""GraphQL executor contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class GraphQLExecutor(ABC):
    """Authenticated GraphQL transport.

    Both methods return the response ``data`` object and raise
    :class:`~issue_to_project.contracts.exceptions.TransportError` on any
    network, HTTP or GraphQL-level failure.
    """

    @abstractmethod
    async def execute_query(
        self, document: str, variables: Mapping[str, Any]
    ) -> dict[str, Any]: ...  # pragma: no cover

    @abstractmethod
    async def execute_mutation(
        self, document: str, variables: Mapping[str, Any]
    ) -> dict[str, Any]: ...  # pragma: no cover
