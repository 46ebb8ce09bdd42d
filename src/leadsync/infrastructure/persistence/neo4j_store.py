"""Neo4j implementation of CredentialStore.
Graph: one (:Client {id, crm_api_token, crm_location_id}) node per tenant.
The service only reads; save_client_credentials is for operator scripts and tests.
"""

from datetime import datetime, timezone

from neo4j.exceptions import DriverError, Neo4jError

from leadsync.application.dto import CredentialRecord
from leadsync.application.ports import CredentialStoreError

_FIND_QUERY = """
MATCH (c:Client { id: $client_id })
RETURN c.id AS client_id, c.crm_api_token AS api_token, c.crm_location_id AS location_id
LIMIT 2
"""

_SAVE_QUERY = """
MERGE (c:Client { id: $client_id })
ON CREATE SET c.created_at = $now
SET c.crm_api_token = $api_token,
    c.crm_location_id = $location_id,
    c.updated_at = $now
RETURN c.id AS client_id
"""


class Neo4jCredentialStore:
    """Reads tenant CRM credentials from Neo4j. The driver is shared across requests."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def find_by_client_id(self, client_id: str) -> list[CredentialRecord]:
        try:
            with self._driver.session() as session:
                result = session.run(_FIND_QUERY, client_id=client_id)
                rows = [
                    CredentialRecord(
                        client_id=record["client_id"],
                        api_token=record["api_token"],
                        location_id=record["location_id"],
                    )
                    for record in result
                ]
        except (DriverError, Neo4jError) as exc:
            raise CredentialStoreError(str(exc) or type(exc).__name__) from exc
        return rows


def save_client_credentials(
    driver,
    client_id: str,
    api_token: str,
    location_id: str,
) -> None:
    """Create or update the Client node for client_id with CRM token and location."""
    client_id = (client_id or "").strip()
    if not client_id:
        raise ValueError("client_id must be non-empty")
    now = datetime.now(timezone.utc).isoformat()
    with driver.session() as session:
        session.run(
            _SAVE_QUERY,
            client_id=client_id,
            api_token=(api_token or "").strip() or None,
            location_id=(location_id or "").strip() or None,
            now=now,
        )
