"""Typed views over GitHub GraphQL responses."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel, Field

from issue_to_project.contracts.project import OwnerKind
from issue_to_project.providers.github.queries import GET_ORGANIZATION_PROJECT, GET_USER_PROJECT


class ProjectV2Node(BaseModel):
    id: str | None = None


class ProjectOwnerNode(BaseModel):
    project_v2: ProjectV2Node | None = Field(default=None, alias="projectV2")

    model_config = {"populate_by_name": True}


class BoardLookupResponse(BaseModel, ABC):
    @abstractmethod
    def owner(self) -> ProjectOwnerNode | None: ...  # pragma: no cover

    def project_id(self) -> str | None:
        owner = self.owner()
        if owner is None or owner.project_v2 is None:
            return None
        return owner.project_v2.id or None


class OrganizationProjectResponse(BoardLookupResponse):
    organization: ProjectOwnerNode | None = None

    def owner(self) -> ProjectOwnerNode | None:
        return self.organization


class UserProjectResponse(BoardLookupResponse):
    user: ProjectOwnerNode | None = None

    def owner(self) -> ProjectOwnerNode | None:
        return self.user


@dataclass(frozen=True)
class BoardLookup:
    document: str
    response_model: type[BoardLookupResponse]


BOARD_LOOKUPS: dict[OwnerKind, BoardLookup] = {
    OwnerKind.ORGANIZATION: BoardLookup(GET_ORGANIZATION_PROJECT, OrganizationProjectResponse),
    OwnerKind.USER: BoardLookup(GET_USER_PROJECT, UserProjectResponse),
}


class ProjectItemNode(BaseModel):
    id: str | None = None


class DraftIssuePayload(BaseModel):
    project_item: ProjectItemNode | None = Field(default=None, alias="projectItem")

    model_config = {"populate_by_name": True}


class AddDraftIssueResponse(BaseModel):
    add_project_v2_draft_issue: DraftIssuePayload | None = Field(default=None, alias="addProjectV2DraftIssue")

    model_config = {"populate_by_name": True}

    def item_id(self) -> str | None:
        payload = self.add_project_v2_draft_issue
        if payload is None or payload.project_item is None:
            return None
        return payload.project_item.id or None
