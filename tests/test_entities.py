"""Tests for domain entities: credential invariants and contact match key."""

import pytest

from leadsync.domain import ContactQuery, TenantCredentials


def test_credentials_require_token_and_location():
    with pytest.raises(ValueError, match="api_token"):
        TenantCredentials(client_id="t1", api_token="", location_id="loc1")
    with pytest.raises(ValueError, match="location_id"):
        TenantCredentials(client_id="t1", api_token="abc", location_id="  ")


def test_credentials_repr_hides_token():
    creds = TenantCredentials(client_id="t1", api_token="secret-token", location_id="loc1")
    assert "secret-token" not in repr(creds)
    assert "loc1" in repr(creds)


def test_query_prefers_phone_over_email():
    query = ContactQuery(phone="+12025551234", email="ann@example.com", name="Ann")
    assert query.match_key == ("phone", "+12025551234")


def test_query_falls_back_to_email():
    query = ContactQuery(phone="   ", email=" ann@example.com ")
    assert query.phone is None
    assert query.match_key == ("email", "ann@example.com")


def test_query_without_phone_or_email_is_rejected():
    with pytest.raises(ValueError):
        ContactQuery(name="Ann")
    with pytest.raises(ValueError):
        ContactQuery(phone="", email=" ")
