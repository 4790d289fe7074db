"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://api.github.com/graphql"


class ActionConfig(BaseModel):
    project_url: str
    github_token: str = Field(repr=False)
    api_url: str = DEFAULT_API_URL

    model_config = {"frozen": True}

    @field_validator("project_url", "github_token", "api_url", mode="before")
    @classmethod
    def strip_value(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("project_url", "github_token", "api_url")
    @classmethod
    def require_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value
