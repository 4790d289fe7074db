"""GitHub project URL parsing utilities."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from issue_to_project.contracts.exceptions import InvalidProjectUrlError, UnsupportedOwnerTypeError
from issue_to_project.contracts.project import DEFAULT_HOST, OwnerKind, ProjectReference

_PROJECTS_MARKER = "projects"

_OWNER_SEGMENTS: dict[str, OwnerKind] = {
    "orgs": OwnerKind.ORGANIZATION,
    "users": OwnerKind.USER,
}


@dataclass(frozen=True)
class ProjectUrlParts:
    owner_segment: str
    owner_name: str
    board_number: int
    host: str = DEFAULT_HOST


def owner_kind_from_segment(segment: str | None) -> OwnerKind:
    """Map the ``orgs``/``users`` URL segment to an :class:`OwnerKind`.

    Raises:
        UnsupportedOwnerTypeError: For any other value, including ``None``.
    """
    if segment is None or segment not in _OWNER_SEGMENTS:
        raise UnsupportedOwnerTypeError(segment)
    return _OWNER_SEGMENTS[segment]


def _invalid(url: str) -> InvalidProjectUrlError:
    return InvalidProjectUrlError(
        f"Invalid project URL: {url}. Project URL should match the format "
        "<GitHub server domain name>/<orgs-or-users>/<ownerName>/projects/<projectNumber>"
    )


def _host_and_segments(url: str) -> tuple[str, list[str]]:
    parts = urlsplit(url)
    if parts.scheme or parts.netloc:
        return parts.netloc, parts.path.split("/")
    # "github.com/orgs/acme/projects/1": without a scheme the host stays in the path
    return "", url.split("?", 1)[0].split("#", 1)[0].split("/")


def split_project_url(url: str) -> ProjectUrlParts:
    """Split ``<host>/<owner-segment>/<owner>/projects/<number>`` into its parts.

    The owner segment is returned as-is; :func:`owner_kind_from_segment`
    decides whether it is supported. Segments after the board number
    (``/views/2`` and the like) are ignored. A URL without a host is
    assumed to point at github.com.

    Raises:
        InvalidProjectUrlError: If the URL does not have that shape or the
            board number is not a positive base-10 integer.
    """
    raw = url.strip()
    host, segments = _host_and_segments(raw)

    for index, segment in enumerate(segments):
        if segment != _PROJECTS_MARKER or index < 2 or index + 1 >= len(segments):
            continue
        owner_segment = segments[index - 2]
        owner_name = segments[index - 1]
        number_text = segments[index + 1]
        if not owner_segment or not owner_name:
            continue
        if not number_text.isascii() or not number_text.isdigit():
            raise _invalid(raw)

        board_number = int(number_text, 10)
        if board_number <= 0:
            raise _invalid(raw)
        if not host and index > 2:
            host = segments[0]
        return ProjectUrlParts(
            owner_segment=owner_segment,
            owner_name=owner_name,
            board_number=board_number,
            host=host or DEFAULT_HOST,
        )

    raise _invalid(raw)


def build_project_reference(parts: ProjectUrlParts) -> ProjectReference:
    """Map the owner segment and freeze *parts* into a :class:`ProjectReference`.

    Raises:
        UnsupportedOwnerTypeError: If the owner segment is not ``orgs`` or ``users``.
    """
    return ProjectReference(
        owner_kind=owner_kind_from_segment(parts.owner_segment),
        owner_name=parts.owner_name,
        board_number=parts.board_number,
        host=parts.host,
    )


def parse_project_url(url: str) -> ProjectReference:
    """Parse a project board URL into a :class:`ProjectReference`.

    Raises:
        InvalidProjectUrlError: If the URL does not have the expected shape.
        UnsupportedOwnerTypeError: If the owner segment is not ``orgs`` or ``users``.
    """
    return build_project_reference(split_project_url(url))
