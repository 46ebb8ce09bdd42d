"""Infrastructure layer: concrete implementations of application ports."""

from leadsync.infrastructure.crm_client import LeadConnectorClient, decode_json_object
from leadsync.infrastructure.memory_store import InMemoryCredentialStore
from leadsync.infrastructure.persistence.neo4j_store import (
    Neo4jCredentialStore,
    save_client_credentials,
)
from leadsync.infrastructure.phone import normalize_phone

__all__ = [
    "InMemoryCredentialStore",
    "LeadConnectorClient",
    "Neo4jCredentialStore",
    "decode_json_object",
    "normalize_phone",
    "save_client_credentials",
]
