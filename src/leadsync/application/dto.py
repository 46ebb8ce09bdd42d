"""Application DTOs: request input and the result types of each stage."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Stage(str, Enum):
    """Stages of one find-or-create run, in visiting order."""

    VALIDATING = "validating"
    RESOLVING_CREDENTIALS = "resolving_credentials"
    LOCATING = "locating"
    FOUND = "found"
    CREATING = "creating"
    RESPONDING = "responding"


@dataclass(frozen=True)
class FindOrCreateRequest:
    """Raw inbound request. Fields are unvalidated; blanks count as missing."""

    client_id: str | None = None
    phone: str | None = None
    email: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class CredentialRecord:
    """One row of the credential store. Token or location may be missing."""

    client_id: str
    api_token: str | None = field(default=None, repr=False)
    location_id: str | None = None


@dataclass(frozen=True)
class InvalidRequest:
    reason: str


@dataclass(frozen=True)
class CredentialLookupFailure:
    """Credentials could not be resolved. kind: not_found, multiple, lookup_error, misconfigured."""

    kind: str
    reason: str


@dataclass(frozen=True)
class ContactFound:
    """Search hit: first result of the CRM search."""

    contact_id: str
    contact: dict[str, Any]


@dataclass(frozen=True)
class ContactNotFound:
    """Search miss. status_code is set when the search call itself was rejected."""

    status_code: int | None = None


@dataclass(frozen=True)
class ContactCreated:
    """New contact. contact_id is None when the CRM accepted the create without echoing an id."""

    contact_id: str | None
    contact: dict[str, Any]


@dataclass(frozen=True)
class DuplicateContact:
    """Creation was rejected because the contact already exists; only its id is known."""

    contact_id: str


@dataclass(frozen=True)
class CreateFailed:
    status_code: int
    body: str


@dataclass(frozen=True)
class ParseFailure:
    """A response body that is not a JSON object."""

    reason: str
    raw: str = ""


SearchResult = ContactFound | ContactNotFound
CreateResult = ContactCreated | DuplicateContact | CreateFailed
Resolution = ContactFound | ContactCreated | DuplicateContact


@dataclass(frozen=True)
class Outcome:
    """Final result of a run plus the stages it went through."""

    result: InvalidRequest | CredentialLookupFailure | Resolution | CreateFailed
    path: tuple[Stage, ...] = ()

    @property
    def ok(self) -> bool:
        return isinstance(self.result, (ContactFound, ContactCreated, DuplicateContact))
