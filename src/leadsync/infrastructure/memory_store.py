"""In-memory implementation of CredentialStore (no DB)."""

from leadsync.application.dto import CredentialRecord


class InMemoryCredentialStore:
    """Holds credential records in memory. Several records per client_id are allowed
    so the resolver's multiple-match path can be exercised."""

    def __init__(self, records: list[CredentialRecord] | None = None) -> None:
        self._records: list[CredentialRecord] = list(records or [])
        self.lookups = 0

    def add(
        self,
        client_id: str,
        api_token: str | None,
        location_id: str | None,
    ) -> None:
        self._records.append(
            CredentialRecord(
                client_id=client_id, api_token=api_token, location_id=location_id
            )
        )

    def find_by_client_id(self, client_id: str) -> list[CredentialRecord]:
        self.lookups += 1
        return [r for r in self._records if r.client_id == client_id]
