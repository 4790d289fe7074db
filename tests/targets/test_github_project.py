import pytest

from issue_to_project.contracts.exceptions import InvalidProjectUrlError, ProjectURLError, UnsupportedOwnerTypeError
from issue_to_project.contracts.project import OwnerKind, ProjectReference
from issue_to_project.targets.github_project import (
    ProjectUrlParts,
    owner_kind_from_segment,
    parse_project_url,
    split_project_url,
)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        (
            "https://github.com/orgs/acme/projects/7",
            ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner_name="acme", board_number=7),
        ),
        (
            "https://github.com/users/floholz/projects/1",
            ProjectReference(owner_kind=OwnerKind.USER, owner_name="floholz", board_number=1),
        ),
        (
            "https://github.com/orgs/acme/projects/7/",
            ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner_name="acme", board_number=7),
        ),
        (
            "https://github.com/orgs/acme/projects/12/views/3",
            ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner_name="acme", board_number=12),
        ),
        (
            "https://github.com/orgs/acme/projects/7?query=is%3Aopen#board",
            ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner_name="acme", board_number=7),
        ),
        (
            "https://ghe.example.com/users/octo-cat/projects/205",
            ProjectReference(
                owner_kind=OwnerKind.USER, owner_name="octo-cat", board_number=205, host="ghe.example.com"
            ),
        ),
        (
            "github.com/users/floholz/projects/1",
            ProjectReference(owner_kind=OwnerKind.USER, owner_name="floholz", board_number=1),
        ),
        (
            "  https://github.com/orgs/acme/projects/7\n",
            ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner_name="acme", board_number=7),
        ),
        (
            "https://github.com/orgs/projects/projects/3",
            ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner_name="projects", board_number=3),
        ),
    ],
)
def test_parse_project_url_extracts_owner_and_number(url: str, expected: ProjectReference) -> None:
    assert parse_project_url(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "https://github.com/orgs/acme",
        "https://github.com/orgs/acme/projects",
        "https://github.com/orgs/acme/projects/",
        "https://github.com/orgs/acme/projects/abc",
        "https://github.com/orgs/acme/projects/1e3",
        "https://github.com/orgs/acme/projects/-1",
        "https://github.com/orgs/acme/projects/0",
        "https://github.com/orgs//projects/1",
        "https://github.com/acme/projects/1",
        "https://github.com/projects/1",
        "https://github.com/orgs/acme/boards/1",
    ],
)
def test_parse_project_url_rejects_malformed_urls(url: str) -> None:
    with pytest.raises(InvalidProjectUrlError, match="Invalid project URL"):
        parse_project_url(url)


def test_parse_project_url_rejects_non_ascii_digits() -> None:
    with pytest.raises(InvalidProjectUrlError):
        parse_project_url("https://github.com/orgs/acme/projects/٣")


@pytest.mark.parametrize("segment", ["teams", "enterprises", "Orgs", "org"])
def test_parse_project_url_rejects_unknown_owner_segment(segment: str) -> None:
    with pytest.raises(UnsupportedOwnerTypeError) as exc_info:
        parse_project_url(f"https://github.com/{segment}/acme/projects/1")

    assert exc_info.value.owner_type == segment
    assert f"Unsupported ownerType: {segment}" in str(exc_info.value)


def test_split_project_url_keeps_raw_owner_segment() -> None:
    parts = split_project_url("https://github.com/teams/acme/projects/1")

    assert parts == ProjectUrlParts(owner_segment="teams", owner_name="acme", board_number=1)


def test_owner_kind_from_segment_maps_both_owner_kinds() -> None:
    assert owner_kind_from_segment("orgs") is OwnerKind.ORGANIZATION
    assert owner_kind_from_segment("users") is OwnerKind.USER


def test_owner_kind_from_segment_rejects_missing_value() -> None:
    with pytest.raises(UnsupportedOwnerTypeError) as exc_info:
        owner_kind_from_segment(None)

    assert exc_info.value.owner_type is None
    assert isinstance(exc_info.value, ProjectURLError)


def test_reference_url_parses_back_to_same_reference() -> None:
    reference = ProjectReference(owner_kind=OwnerKind.USER, owner_name="floholz", board_number=1)

    assert reference.url == "https://github.com/users/floholz/projects/1"
    assert parse_project_url(reference.url) == reference


@pytest.mark.parametrize(
    ("url", "host"),
    [
        ("https://ghe.example.com/orgs/acme/projects/3", "ghe.example.com"),
        ("https://ghe.example.com:8443/orgs/acme/projects/3/views/1", "ghe.example.com:8443"),
        ("ghe.example.com/orgs/acme/projects/3", "ghe.example.com"),
        ("/orgs/acme/projects/3", "github.com"),
        ("orgs/acme/projects/3", "github.com"),
    ],
)
def test_split_project_url_keeps_server_host(url: str, host: str) -> None:
    assert split_project_url(url).host == host


def test_enterprise_reference_url_names_its_own_host() -> None:
    reference = parse_project_url("ghe.example.com/users/octo-cat/projects/205")

    assert reference.url == "https://ghe.example.com/users/octo-cat/projects/205"
