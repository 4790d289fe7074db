"""GitHub Actions workflow-command helpers."""

from __future__ import annotations

import os
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path

OUTPUT_ITEM_ID = "project-v2-item-id"


def is_github_actions(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("GITHUB_ACTIONS") == "true"


def is_runner_debug(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("RUNNER_DEBUG") == "1"


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_output(name: str, value: str, *, environ: Mapping[str, str] | None = None) -> None:
    """Append a step output to ``$GITHUB_OUTPUT``, or print it when running outside Actions."""
    env = os.environ if environ is None else environ
    output_path = env.get("GITHUB_OUTPUT", "").strip()
    if not output_path:
        sys.stdout.write(format_output(name, value))
        return
    with Path(output_path).open("a", encoding="utf-8") as handle:
        handle.write(format_output(name, value))


def report_failure(message: str, *, environ: Mapping[str, str] | None = None) -> None:
    if is_github_actions(environ):
        print(f"::error::{escape_data(message)}")
    else:
        print(f"error: {message}", file=sys.stderr)
