"""Project board contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

DEFAULT_HOST = "github.com"


class OwnerKind(StrEnum):
    """Who owns a board. The value is the GraphQL root field that looks it up."""

    ORGANIZATION = "organization"
    USER = "user"

    @property
    def url_segment(self) -> str:
        return "orgs" if self is OwnerKind.ORGANIZATION else "users"


class ProjectReference(BaseModel):
    owner_kind: OwnerKind
    owner_name: str = Field(min_length=1)
    board_number: int = Field(gt=0)
    host: str = Field(default=DEFAULT_HOST, min_length=1)

    model_config = {"frozen": True}

    @property
    def url(self) -> str:
        return f"https://{self.host}/{self.owner_kind.url_segment}/{self.owner_name}/projects/{self.board_number}"


class BoardHandle(BaseModel):
    node_id: str = Field(min_length=1)

    model_config = {"frozen": True}


class DraftItem(BaseModel):
    id: str = Field(min_length=1)

    model_config = {"frozen": True}
