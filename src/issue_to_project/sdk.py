"""SDK composition root for issue-to-project."""

from __future__ import annotations

import logging

from issue_to_project.contracts.executor import GraphQLExecutor
from issue_to_project.contracts.issue import IssueSnapshot
from issue_to_project.contracts.link import LinkStage
from issue_to_project.contracts.project import DraftItem
from issue_to_project.contracts.renderer import BodyRenderer
from issue_to_project.providers.github.board import resolve_board
from issue_to_project.providers.github.draft import create_draft_item
from issue_to_project.renderers.markdown import MarkdownRenderer
from issue_to_project.targets.github_project import build_project_reference, split_project_url

_LOG = logging.getLogger(__name__)


class IssueLinker:
    """Turns an issue into a draft item on a GitHub project board.

    Runs the stages in :class:`LinkStage` order. The first error stops the
    run and propagates unchanged; nothing is rolled back, because the only
    write is the final mutation. Every call creates a new draft item, even
    for an issue that is already on the board.
    """

    def __init__(self, *, executor: GraphQLExecutor, renderer: BodyRenderer | None = None) -> None:
        self._executor = executor
        self._renderer = renderer or MarkdownRenderer()
        self.stage = LinkStage.START

    async def link(self, project_url: str, issue: IssueSnapshot) -> DraftItem:
        self._advance(LinkStage.START)
        try:
            return await self._link(project_url, issue)
        except Exception:
            _LOG.debug("Linking issue #%s failed after stage %s", issue.number, self.stage)
            self.stage = LinkStage.FAILED
            raise

    async def _link(self, project_url: str, issue: IssueSnapshot) -> DraftItem:
        _LOG.debug("Project URL: %s", project_url)
        parts = split_project_url(project_url)
        self._advance(LinkStage.URL_RESOLVED)

        reference = build_project_reference(parts)
        self._advance(LinkStage.OWNER_TYPE_MAPPED)
        _LOG.debug("Project owner: %s", reference.owner_name)
        _LOG.debug("Project number: %d", reference.board_number)
        _LOG.debug("Project owner type: %s", reference.owner_kind)

        board = await resolve_board(self._executor, reference)
        self._advance(LinkStage.BOARD_RESOLVED)
        _LOG.debug("Project node ID: %s", board.node_id)
        _LOG.debug("Content ID: %s", issue.node_id)

        body = self._renderer.render(issue)
        self._advance(LinkStage.BODY_GENERATED)

        item = await create_draft_item(self._executor, board, title=issue.title, body=body)
        self._advance(LinkStage.ITEM_CREATED)
        return item

    def _advance(self, stage: LinkStage) -> None:
        self.stage = stage
        _LOG.debug("Stage: %s", stage)


async def link_issue(
    project_url: str,
    issue: IssueSnapshot,
    *,
    executor: GraphQLExecutor,
    renderer: BodyRenderer | None = None,
) -> DraftItem:
    """Create a draft item for *issue* on the board at *project_url*."""
    return await IssueLinker(executor=executor, renderer=renderer).link(project_url, issue)
