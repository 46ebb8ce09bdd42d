"""LeadConnector (HighLevel API v2) contacts client.

Search: GET {base}/contacts/?locationId=...&phone=... (or &email=...)
Create: POST {base}/contacts/ with {locationId, phone, email, name}

The location scope always travels as the locationId query parameter / body
field; the v1 LocationId header is never sent.
"""

import json
import logging
from typing import Any

import httpx

from leadsync.application.dto import (
    ContactCreated,
    ContactFound,
    ContactNotFound,
    CreateFailed,
    CreateResult,
    DuplicateContact,
    ParseFailure,
    SearchResult,
)
from leadsync.domain import ContactQuery, TenantCredentials

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://services.leadconnectorhq.com"
DEFAULT_API_VERSION = "2021-07-28"
DEFAULT_TIMEOUT_SECONDS = 20.0

# Status the CRM uses for "contact already exists" on create.
DUPLICATE_STATUS = 400


def decode_json_object(text: str) -> dict[str, Any] | ParseFailure:
    """Parse a response body that should be a JSON object."""
    if not text or not text.strip():
        return ParseFailure(reason="empty body")
    try:
        data = json.loads(text)
    except ValueError as exc:
        return ParseFailure(reason=f"invalid JSON: {exc}", raw=text)
    if not isinstance(data, dict):
        return ParseFailure(reason=f"expected object, got {type(data).__name__}", raw=text)
    return data


def _object_or_empty(text: str) -> dict[str, Any]:
    decoded = decode_json_object(text)
    if isinstance(decoded, ParseFailure):
        logger.debug("Response body not usable (%s); using empty object", decoded.reason)
        return {}
    return decoded


def _duplicate_contact_id(body: dict[str, Any]) -> str | None:
    meta = body.get("meta")
    if not isinstance(meta, dict):
        return None
    contact_id = meta.get("contactId")
    return str(contact_id) if contact_id else None


class LeadConnectorClient:
    """Implements ContactGateway over httpx. One instance (and connection pool) per process."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._http = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def _headers(self, credentials: TenantCredentials) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {credentials.api_token}",
            "Version": self._api_version,
            "Accept": "application/json",
        }

    def _contacts_url(self) -> str:
        return f"{self._base_url}/contacts/"

    def find_contact(
        self, credentials: TenantCredentials, query: ContactQuery
    ) -> SearchResult:
        key, value = query.match_key
        response = self._http.get(
            self._contacts_url(),
            params={"locationId": credentials.location_id, key: value},
            headers=self._headers(credentials),
        )
        # Some keys have create scope but not search scope: a rejected
        # search is a miss, not an error.
        if not response.is_success:
            logger.warning(
                "Contact search for client %s returned HTTP %s; treating as not found",
                credentials.client_id,
                response.status_code,
            )
            return ContactNotFound(status_code=response.status_code)

        contacts = _object_or_empty(response.text).get("contacts")
        if not isinstance(contacts, list) or not contacts:
            return ContactNotFound()
        first = contacts[0]
        if not isinstance(first, dict) or not first.get("id"):
            return ContactNotFound()
        return ContactFound(contact_id=str(first["id"]), contact=first)

    def create_contact(
        self, credentials: TenantCredentials, query: ContactQuery
    ) -> CreateResult:
        payload: dict[str, Any] = {"locationId": credentials.location_id}
        if query.phone:
            payload["phone"] = query.phone
        if query.email:
            payload["email"] = query.email
        if query.name:
            payload["name"] = query.name

        response = self._http.post(
            self._contacts_url(),
            json=payload,
            headers=self._headers(credentials),
        )
        body = _object_or_empty(response.text)

        if response.status_code == DUPLICATE_STATUS:
            existing_id = _duplicate_contact_id(body)
            if existing_id:
                logger.info(
                    "Create for client %s hit existing contact %s",
                    credentials.client_id,
                    existing_id,
                )
                return DuplicateContact(contact_id=existing_id)

        if not response.is_success:
            logger.warning(
                "Contact create for client %s failed with HTTP %s",
                credentials.client_id,
                response.status_code,
            )
            return CreateFailed(status_code=response.status_code, body=response.text)

        contact = body.get("contact")
        if not isinstance(contact, dict):
            contact = {}
        contact_id = contact.get("id")
        return ContactCreated(
            contact_id=str(contact_id) if contact_id is not None else None,
            contact=contact,
        )
