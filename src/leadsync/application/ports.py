"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from leadsync.application.dto import CreateResult, CredentialRecord, SearchResult
from leadsync.domain import ContactQuery, TenantCredentials


class CredentialStoreError(Exception):
    """The credential store could not be queried (transport or driver error)."""


class CredentialStore(Protocol):
    """Read-only access to tenant CRM credentials."""

    def find_by_client_id(self, client_id: str) -> list[CredentialRecord]:
        """Return every record stored for client_id (normally zero or one).

        Raises CredentialStoreError when the store is unreachable.
        """
        ...


class ContactGateway(Protocol):
    """Contact search and creation against the CRM, scoped by tenant credentials."""

    def find_contact(
        self, credentials: TenantCredentials, query: ContactQuery
    ) -> SearchResult:
        """Return the first matching contact, or ContactNotFound (also on rejected searches)."""
        ...

    def create_contact(
        self, credentials: TenantCredentials, query: ContactQuery
    ) -> CreateResult:
        """Create the contact; a duplicate conflict comes back as DuplicateContact."""
        ...
