"""Domain layer: entities and value objects. No dependencies on outer layers."""

from leadsync.domain.entities import ContactQuery, TenantCredentials

__all__ = ["ContactQuery", "TenantCredentials"]
