"""Integration tests for Neo4jCredentialStore. Require Docker (testcontainers)."""

import pytest

from leadsync.application import (
    CredentialLookupFailure,
    CredentialResolver,
    CredentialStoreError,
)
from leadsync.domain import TenantCredentials
from leadsync.infrastructure import Neo4jCredentialStore, save_client_credentials


@pytest.fixture(scope="session")
def neo4j_driver():
    from testcontainers.neo4j import Neo4jContainer

    with Neo4jContainer() as neo4j:
        driver = neo4j.get_driver()
        try:
            yield driver
        finally:
            driver.close()


@pytest.fixture
def clean_neo4j(neo4j_driver):
    """Clear the graph before each test so tests are independent."""
    with neo4j_driver.session() as session:
        session.run("MATCH (n) DETACH DELETE n")
    yield neo4j_driver


def test_save_then_find(clean_neo4j):
    save_client_credentials(clean_neo4j, "t1", "abc", "loc1")
    records = Neo4jCredentialStore(clean_neo4j).find_by_client_id("t1")
    assert len(records) == 1
    assert records[0].client_id == "t1"
    assert records[0].api_token == "abc"
    assert records[0].location_id == "loc1"


def test_save_is_idempotent_and_overwrites(clean_neo4j):
    save_client_credentials(clean_neo4j, "t1", "abc", "loc1")
    save_client_credentials(clean_neo4j, "t1", "def", "loc2")
    records = Neo4jCredentialStore(clean_neo4j).find_by_client_id("t1")
    assert len(records) == 1
    assert records[0].api_token == "def"
    assert records[0].location_id == "loc2"


def test_unknown_client_returns_empty(clean_neo4j):
    assert Neo4jCredentialStore(clean_neo4j).find_by_client_id("missing") == []


def test_resolver_over_neo4j(clean_neo4j):
    save_client_credentials(clean_neo4j, "t1", "abc", "loc1")
    save_client_credentials(clean_neo4j, "t2", "abc", "")
    with clean_neo4j.session() as session:
        session.run("CREATE (:Client {id: 't3'}), (:Client {id: 't3'})")

    resolver = CredentialResolver(Neo4jCredentialStore(clean_neo4j))
    assert resolver.resolve("t1") == TenantCredentials(
        client_id="t1", api_token="abc", location_id="loc1"
    )
    assert resolver.resolve("t2").kind == "misconfigured"
    assert resolver.resolve("t3").kind == "multiple"
    assert isinstance(resolver.resolve("t4"), CredentialLookupFailure)


def test_empty_client_id_raises(clean_neo4j):
    with pytest.raises(ValueError, match="client_id"):
        save_client_credentials(clean_neo4j, "  ", "abc", "loc1")


def test_driver_error_becomes_store_error():
    from neo4j import GraphDatabase

    driver = GraphDatabase.driver("bolt://127.0.0.1:1", auth=("neo4j", "password"))
    try:
        with pytest.raises(CredentialStoreError):
            Neo4jCredentialStore(driver).find_by_client_id("t1")
    finally:
        driver.close()
