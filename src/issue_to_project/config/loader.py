"""Build the run configuration from CLI flags and GitHub Actions inputs."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import ValidationError

from issue_to_project.contracts.config import DEFAULT_API_URL, ActionConfig
from issue_to_project.contracts.exceptions import ConfigError

REQUIRED_INPUTS = ("project-url", "github-token")


def action_input(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Read a workflow input the way the Actions runner exposes it (``INPUT_<NAME>``)."""
    env = os.environ if environ is None else environ
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return env.get(key, "").strip()


def load_config(
    *,
    project_url: str | None = None,
    github_token: str | None = None,
    api_url: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ActionConfig:
    """Explicit arguments win over ``INPUT_*`` variables.

    Raises:
        ConfigError: If a required input is missing or blank.
    """
    env = os.environ if environ is None else environ
    values = {
        "project-url": project_url if project_url is not None else action_input("project-url", env),
        "github-token": github_token if github_token is not None else action_input("github-token", env),
    }
    for name in REQUIRED_INPUTS:
        if not values[name].strip():
            raise ConfigError(f"Input required and not supplied: {name}")

    resolved_api_url = api_url or env.get("GITHUB_GRAPHQL_URL") or DEFAULT_API_URL
    try:
        return ActionConfig(
            project_url=values["project-url"],
            github_token=values["github-token"],
            api_url=resolved_api_url,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
