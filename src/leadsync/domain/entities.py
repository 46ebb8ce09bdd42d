"""Domain entities: TenantCredentials and ContactQuery."""

from dataclasses import dataclass, field

PHONE = "phone"
EMAIL = "email"


@dataclass(frozen=True)
class TenantCredentials:
    """
    CRM credentials of one tenant (client): bearer token and location scope.
    Both must be non-empty before any CRM call is attempted.
    """

    client_id: str
    api_token: str = field(repr=False)
    location_id: str

    def __post_init__(self):
        if not self.api_token or not self.api_token.strip():
            raise ValueError("TenantCredentials api_token must be non-empty.")
        if not self.location_id or not self.location_id.strip():
            raise ValueError("TenantCredentials location_id must be non-empty.")
        object.__setattr__(self, "api_token", self.api_token.strip())
        object.__setattr__(self, "location_id", self.location_id.strip())


@dataclass(frozen=True)
class ContactQuery:
    """
    One find-or-create lookup. Phone is the primary match key when present,
    otherwise email. Name is only sent on creation.
    """

    phone: str | None = None
    email: str | None = None
    name: str | None = None

    def __post_init__(self):
        for attr in ("phone", "email", "name"):
            value = getattr(self, attr)
            if value is not None:
                object.__setattr__(self, attr, value.strip() or None)
        if self.phone is None and self.email is None:
            raise ValueError("ContactQuery needs a phone or an email.")

    @property
    def match_key(self) -> tuple[str, str]:
        """Return (field, value) used to search the CRM: phone wins over email."""
        if self.phone is not None:
            return (PHONE, self.phone)
        return (EMAIL, self.email)
