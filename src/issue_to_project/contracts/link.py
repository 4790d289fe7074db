"""Issue linking stages."""

from __future__ import annotations

from enum import StrEnum


class LinkStage(StrEnum):
    START = "start"
    URL_RESOLVED = "url-resolved"
    OWNER_TYPE_MAPPED = "owner-type-mapped"
    BOARD_RESOLVED = "board-resolved"
    BODY_GENERATED = "body-generated"
    ITEM_CREATED = "item-created"
    FAILED = "failed"
