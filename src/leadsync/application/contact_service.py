"""Find-or-create orchestration: validate -> resolve credentials -> search -> create.

Each run walks an explicit state machine (see _TRANSITIONS). It stops at the
first failure and never retries; the create call is only issued after the
search came back empty.
"""

from collections.abc import Callable

from leadsync.application.credentials import CredentialResolver
from leadsync.application.dto import (
    ContactFound,
    CredentialLookupFailure,
    FindOrCreateRequest,
    InvalidRequest,
    Outcome,
    Stage,
)
from leadsync.application.ports import ContactGateway
from leadsync.domain import ContactQuery

_TRANSITIONS: dict[Stage, frozenset[Stage]] = {
    Stage.VALIDATING: frozenset({Stage.RESOLVING_CREDENTIALS, Stage.RESPONDING}),
    Stage.RESOLVING_CREDENTIALS: frozenset({Stage.LOCATING, Stage.RESPONDING}),
    Stage.LOCATING: frozenset({Stage.FOUND, Stage.CREATING}),
    Stage.FOUND: frozenset({Stage.RESPONDING}),
    Stage.CREATING: frozenset({Stage.RESPONDING}),
    Stage.RESPONDING: frozenset(),
}


class _Run:
    """Tracks the current stage of one request and rejects illegal transitions."""

    def __init__(self) -> None:
        self.path: list[Stage] = [Stage.VALIDATING]

    @property
    def stage(self) -> Stage:
        return self.path[-1]

    def advance(self, target: Stage) -> None:
        if target not in _TRANSITIONS[self.stage]:
            raise RuntimeError(f"Illegal transition {self.stage.value} -> {target.value}")
        self.path.append(target)

    def finish(self, result) -> Outcome:
        self.advance(Stage.RESPONDING)
        return Outcome(result=result, path=tuple(self.path))


class FindOrCreateService:
    """Core flow: one inbound request -> at most one search and one create call."""

    def __init__(
        self,
        resolver: CredentialResolver,
        gateway: ContactGateway,
        *,
        normalize_phone: Callable[[str], str | None] | None = None,
    ) -> None:
        self._resolver = resolver
        self._gateway = gateway
        self._normalize_phone = normalize_phone

    def _build_query(self, request: FindOrCreateRequest) -> ContactQuery | InvalidRequest:
        phone = (request.phone or "").strip() or None
        email = (request.email or "").strip() or None
        if phone and self._normalize_phone:
            phone = self._normalize_phone(phone) or phone
        try:
            return ContactQuery(phone=phone, email=email, name=request.name)
        except ValueError:
            return InvalidRequest(reason="phone or email is required")

    def find_or_create(self, request: FindOrCreateRequest) -> Outcome:
        """Return the contact for the request, creating it in the CRM when the search misses."""
        run = _Run()

        client_id = (request.client_id or "").strip()
        if not client_id:
            return run.finish(InvalidRequest(reason="client_id is required"))
        query = self._build_query(request)
        if isinstance(query, InvalidRequest):
            return run.finish(query)

        run.advance(Stage.RESOLVING_CREDENTIALS)
        credentials = self._resolver.resolve(client_id)
        if isinstance(credentials, CredentialLookupFailure):
            return run.finish(credentials)

        run.advance(Stage.LOCATING)
        found = self._gateway.find_contact(credentials, query)
        if isinstance(found, ContactFound):
            run.advance(Stage.FOUND)
            return run.finish(found)

        run.advance(Stage.CREATING)
        created = self._gateway.create_contact(credentials, query)
        return run.finish(created)
