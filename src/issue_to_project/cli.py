"""Command-line interface for issue-to-project."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.text import Text

from issue_to_project.actions import OUTPUT_ITEM_ID, is_runner_debug, report_failure, set_output
from issue_to_project.config import load_config
from issue_to_project.contracts.config import ActionConfig
from issue_to_project.contracts.exceptions import ConfigError, ProjectURLError, ProviderError
from issue_to_project.contracts.issue import IssueSnapshot
from issue_to_project.contracts.project import DraftItem
from issue_to_project.event import load_event
from issue_to_project.providers.github.github_gql import open_graphql_client
from issue_to_project.sdk import link_issue


def _package_version() -> str:
    try:
        return version("issue-to-project")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issue-to-project",
        description="Create a draft item on a GitHub project board for the triggering issue.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--project-url", help="Board URL (default: INPUT_PROJECT-URL)")
    parser.add_argument("--github-token", help="Token with project access (default: INPUT_GITHUB-TOKEN)")
    parser.add_argument("--api-url", help="GraphQL endpoint (default: GITHUB_GRAPHQL_URL or api.github.com)")
    parser.add_argument("--event-path", help="Event payload JSON (default: GITHUB_EVENT_PATH)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


async def _run_link(args: argparse.Namespace) -> DraftItem:
    config = load_config(project_url=args.project_url, github_token=args.github_token, api_url=args.api_url)
    event = load_event(args.event_path)

    async with open_graphql_client(config) as client:
        item = await link_issue(config.project_url, event.issue, executor=client)

    set_output(OUTPUT_ITEM_ID, item.id)
    Console(stderr=True).print(_format_summary(item, event.issue, config), soft_wrap=True, highlight=False)
    return item


def _format_summary(item: DraftItem, issue: IssueSnapshot, config: ActionConfig) -> Text:
    return Text.assemble(
        ("issue-to-project", "bold"),
        " - linked ",
        (f"#{issue.number}", "cyan"),
        f" to {config.project_url} as draft item ",
        (item.id, "green"),
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose or is_runner_debug():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        asyncio.run(_run_link(args))
        return 0
    except (ConfigError, ProjectURLError) as exc:
        report_failure(str(exc))
        return 3
    except ProviderError as exc:
        report_failure(str(exc))
        return 4
    except Exception as exc:  # pragma: no cover
        report_failure(str(exc))
        return 1
