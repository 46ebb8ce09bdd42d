"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from leadsync.application.contact_service import FindOrCreateService
from leadsync.application.credentials import CredentialResolver
from leadsync.application.dto import (
    ContactCreated,
    ContactFound,
    ContactNotFound,
    CreateFailed,
    CredentialLookupFailure,
    CredentialRecord,
    DuplicateContact,
    FindOrCreateRequest,
    InvalidRequest,
    Outcome,
    ParseFailure,
    Stage,
)
from leadsync.application.ports import (
    ContactGateway,
    CredentialStore,
    CredentialStoreError,
)

__all__ = [
    "ContactCreated",
    "ContactFound",
    "ContactGateway",
    "ContactNotFound",
    "CreateFailed",
    "CredentialLookupFailure",
    "CredentialRecord",
    "CredentialResolver",
    "CredentialStore",
    "CredentialStoreError",
    "DuplicateContact",
    "FindOrCreateRequest",
    "FindOrCreateService",
    "InvalidRequest",
    "Outcome",
    "ParseFailure",
    "Stage",
]
