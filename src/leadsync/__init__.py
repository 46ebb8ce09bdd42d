"""
LeadSync core: clean-architecture layout.

- domain: entities (TenantCredentials, ContactQuery). No outer dependencies.
- application: use cases (CredentialResolver, FindOrCreateService), ports
  (CredentialStore, ContactGateway), DTOs.
- infrastructure: adapters (InMemoryCredentialStore, Neo4jCredentialStore,
  LeadConnectorClient).
"""

from leadsync.application import (
    ContactCreated,
    ContactFound,
    ContactGateway,
    ContactNotFound,
    CreateFailed,
    CredentialLookupFailure,
    CredentialResolver,
    CredentialStore,
    DuplicateContact,
    FindOrCreateRequest,
    FindOrCreateService,
    InvalidRequest,
    Outcome,
)
from leadsync.domain import ContactQuery, TenantCredentials
from leadsync.infrastructure import (
    InMemoryCredentialStore,
    LeadConnectorClient,
    Neo4jCredentialStore,
)

__all__ = [
    "ContactCreated",
    "ContactFound",
    "ContactGateway",
    "ContactNotFound",
    "ContactQuery",
    "CreateFailed",
    "CredentialLookupFailure",
    "CredentialResolver",
    "CredentialStore",
    "DuplicateContact",
    "FindOrCreateRequest",
    "FindOrCreateService",
    "InMemoryCredentialStore",
    "InvalidRequest",
    "LeadConnectorClient",
    "Neo4jCredentialStore",
    "Outcome",
    "TenantCredentials",
]
