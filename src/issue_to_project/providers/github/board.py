"""Resolve a project reference to the board's node id."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from issue_to_project.contracts.exceptions import BoardNotFoundError, TransportError
from issue_to_project.contracts.executor import GraphQLExecutor
from issue_to_project.contracts.project import BoardHandle, ProjectReference
from issue_to_project.providers.github.models import BOARD_LOOKUPS

_LOG = logging.getLogger(__name__)

NOT_FOUND = "NOT_FOUND"


def is_missing_board(error: TransportError, reference: ProjectReference) -> bool:
    """Whether *error* only reports the owner or its board as unresolvable.

    GitHub answers a lookup for an unknown login or board number with partial
    ``data`` and ``NOT_FOUND`` errors whose ``path`` starts at the owner field.
    """
    if not error.errors:
        return False
    owner_field = reference.owner_kind.value
    for item in error.errors:
        if not isinstance(item, dict) or item.get("type") != NOT_FOUND:
            return False
        path = item.get("path")
        if not isinstance(path, list) or not path or path[0] != owner_field:
            return False
    return True


async def resolve_board(executor: GraphQLExecutor, reference: ProjectReference) -> BoardHandle:
    """Look up the board's node id under ``organization`` or ``user``.

    Owner name and board number go in as query variables.

    Raises:
        BoardNotFoundError: If the owner or board cannot be resolved, or the
            response carries no ``projectV2.id``.
        TransportError: Propagated unchanged from *executor* for any other failure.
    """
    lookup = BOARD_LOOKUPS[reference.owner_kind]
    try:
        data = await executor.execute_query(
            lookup.document,
            {"projectOwnerName": reference.owner_name, "projectNumber": reference.board_number},
        )
    except TransportError as exc:
        if is_missing_board(exc, reference):
            _LOG.debug("Board lookup reported NOT_FOUND: %s", exc)
            raise BoardNotFoundError(reference) from exc
        raise

    try:
        response = lookup.response_model.model_validate(data)
    except ValidationError as exc:
        _LOG.debug("Unexpected board lookup response shape: %s", exc)
        raise BoardNotFoundError(reference) from exc

    node_id = response.project_id()
    if node_id is None:
        raise BoardNotFoundError(reference)
    return BoardHandle(node_id=node_id)
