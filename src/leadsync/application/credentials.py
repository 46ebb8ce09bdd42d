"""Resolve a tenant id to its CRM credentials. No caching: every call hits the store."""

import logging

from leadsync.application.dto import CredentialLookupFailure
from leadsync.application.ports import CredentialStore, CredentialStoreError
from leadsync.domain import TenantCredentials

logger = logging.getLogger(__name__)

NOT_FOUND = "not_found"
MULTIPLE = "multiple"
LOOKUP_ERROR = "lookup_error"
MISCONFIGURED = "misconfigured"


class CredentialResolver:
    """Looks up exactly one credential record per tenant."""

    def __init__(self, store: CredentialStore) -> None:
        self._store = store

    def resolve(self, client_id: str) -> TenantCredentials | CredentialLookupFailure:
        client_id = (client_id or "").strip()
        if not client_id:
            return CredentialLookupFailure(kind=NOT_FOUND, reason="client_id is required")

        try:
            records = self._store.find_by_client_id(client_id)
        except CredentialStoreError as exc:
            logger.warning("Credential lookup failed for client %s: %s", client_id, exc)
            return CredentialLookupFailure(
                kind=LOOKUP_ERROR, reason=f"Credential lookup failed: {exc}"
            )

        if not records:
            return CredentialLookupFailure(
                kind=NOT_FOUND, reason=f"Unknown client_id: {client_id}"
            )
        if len(records) > 1:
            return CredentialLookupFailure(
                kind=MULTIPLE,
                reason=f"Multiple credential records for client_id: {client_id}",
            )

        record = records[0]
        try:
            return TenantCredentials(
                client_id=client_id,
                api_token=record.api_token or "",
                location_id=record.location_id or "",
            )
        except ValueError:
            return CredentialLookupFailure(
                kind=MISCONFIGURED,
                reason=f"Missing CRM token or location for client_id: {client_id}",
            )
