"""Create draft issues on a project board."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from issue_to_project.contracts.exceptions import DraftCreationError
from issue_to_project.contracts.executor import GraphQLExecutor
from issue_to_project.contracts.project import BoardHandle, DraftItem
from issue_to_project.providers.github.models import AddDraftIssueResponse
from issue_to_project.providers.github.queries import CREATE_DRAFT_ISSUE

_LOG = logging.getLogger(__name__)

DEFAULT_TITLE = "Unknown Issue"


async def create_draft_item(
    executor: GraphQLExecutor,
    board: BoardHandle,
    *,
    title: str | None,
    body: str,
) -> DraftItem:
    """Add a draft issue to *board* and return the new project item.

    A missing or blank *title* is replaced by ``DEFAULT_TITLE``.
    """
    item_title = title or DEFAULT_TITLE
    data = await executor.execute_mutation(
        CREATE_DRAFT_ISSUE,
        {"projectId": board.node_id, "itemTitle": item_title, "itemBody": body},
    )

    try:
        response = AddDraftIssueResponse.model_validate(data)
    except ValidationError as exc:
        raise DraftCreationError(
            f"Unexpected addProjectV2DraftIssue response for project {board.node_id}: {exc}",
            project_id=board.node_id,
        ) from exc

    item_id = response.item_id()
    if item_id is None:
        raise DraftCreationError(
            f"addProjectV2DraftIssue returned no project item for project {board.node_id}",
            project_id=board.node_id,
        )
    _LOG.debug("Created draft item %s titled %r", item_id, item_title)
    return DraftItem(id=item_id)
