from issue_to_project.contracts.exceptions import (
    BoardNotFoundError,
    ConfigError,
    DraftCreationError,
    InvalidProjectUrlError,
    IssueToProjectError,
    ProjectURLError,
    ProviderError,
    TransportError,
    UnsupportedOwnerTypeError,
)
from issue_to_project.contracts.project import OwnerKind, ProjectReference


def test_exception_hierarchy() -> None:
    assert issubclass(ConfigError, IssueToProjectError)
    assert issubclass(ProjectURLError, IssueToProjectError)
    assert issubclass(InvalidProjectUrlError, ProjectURLError)
    assert issubclass(UnsupportedOwnerTypeError, ProjectURLError)
    assert issubclass(ProviderError, IssueToProjectError)
    assert issubclass(TransportError, ProviderError)
    assert issubclass(BoardNotFoundError, ProviderError)
    assert issubclass(DraftCreationError, ProviderError)
    assert not issubclass(ConfigError, (ProjectURLError, ProviderError))


def test_transport_error_exposes_status_and_errors() -> None:
    err = TransportError("boom", status_code=502, errors=[{"message": "bad gateway"}])

    assert str(err) == "boom"
    assert err.status_code == 502
    assert err.errors == [{"message": "bad gateway"}]


def test_transport_error_defaults() -> None:
    err = TransportError("boom")

    assert err.status_code is None
    assert err.errors == []
    assert err.data is None


def test_board_not_found_error_names_board() -> None:
    reference = ProjectReference(owner_kind=OwnerKind.ORGANIZATION, owner_name="acme", board_number=7)

    err = BoardNotFoundError(reference)

    assert err.reference == reference
    assert "https://github.com/orgs/acme/projects/7" in str(err)


def test_draft_creation_error_exposes_project_id() -> None:
    err = DraftCreationError("no item", project_id="PVT_abc")

    assert err.project_id == "PVT_abc"
