"""Unit tests for CredentialResolver. In-memory store only."""

from leadsync.application import (
    CredentialLookupFailure,
    CredentialResolver,
    CredentialStoreError,
)
from leadsync.domain import TenantCredentials
from leadsync.infrastructure import InMemoryCredentialStore


class _BrokenStore:
    def find_by_client_id(self, client_id):
        raise CredentialStoreError("connection refused")


def test_resolves_single_record():
    store = InMemoryCredentialStore()
    store.add("t1", "abc", "loc1")
    creds = CredentialResolver(store).resolve("t1")
    assert isinstance(creds, TenantCredentials)
    assert creds.client_id == "t1"
    assert creds.api_token == "abc"
    assert creds.location_id == "loc1"


def test_unknown_client_is_not_found():
    r = CredentialResolver(InMemoryCredentialStore()).resolve("missing")
    assert isinstance(r, CredentialLookupFailure)
    assert r.kind == "not_found"
    assert "missing" in r.reason


def test_multiple_records_are_rejected():
    store = InMemoryCredentialStore()
    store.add("t1", "abc", "loc1")
    store.add("t1", "def", "loc2")
    r = CredentialResolver(store).resolve("t1")
    assert isinstance(r, CredentialLookupFailure)
    assert r.kind == "multiple"


def test_missing_token_or_location_is_misconfigured():
    store = InMemoryCredentialStore()
    store.add("no-token", None, "loc1")
    store.add("no-location", "abc", "")
    resolver = CredentialResolver(store)
    for client_id in ("no-token", "no-location"):
        r = resolver.resolve(client_id)
        assert isinstance(r, CredentialLookupFailure)
        assert r.kind == "misconfigured"


def test_store_error_is_lookup_error():
    r = CredentialResolver(_BrokenStore()).resolve("t1")
    assert isinstance(r, CredentialLookupFailure)
    assert r.kind == "lookup_error"
    assert "connection refused" in r.reason


def test_blank_client_id_does_not_hit_store():
    store = InMemoryCredentialStore()
    r = CredentialResolver(store).resolve("   ")
    assert isinstance(r, CredentialLookupFailure)
    assert store.lookups == 0


def test_every_call_hits_the_store():
    store = InMemoryCredentialStore()
    store.add("t1", "abc", "loc1")
    resolver = CredentialResolver(store)
    resolver.resolve("t1")
    resolver.resolve("t1")
    assert store.lookups == 2
