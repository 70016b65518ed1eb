"""Authenticated principal decoded from the bearer token."""

from dataclasses import dataclass

from backoffice.models.role import UserRole


@dataclass(frozen=True)
class Principal:
    """
    Caller identity extracted from a verified JWT.

    Treated as trusted input once decoded; nothing here is looked up
    in the database.

    Attributes:
        subject_id: The 'sub' claim (auth service user ID)
        role: The caller's role
        agency_id: Agency the caller is bound to (None for superadmin)
        tenant_id: Tenant the caller belongs to, when the token carries one
        email: Caller e-mail, used in log lines only
    """

    subject_id: str
    role: UserRole
    agency_id: int | None = None
    tenant_id: int | None = None
    email: str | None = None

    def is_superadmin(self) -> bool:
        """Superadmin bypasses the ownership axis."""
        return self.role == UserRole.SUPERADMIN

    def __repr__(self) -> str:
        return (
            f"<Principal(sub={self.subject_id}, role={self.role.value}, "
            f"agency_id={self.agency_id}, tenant_id={self.tenant_id})>"
        )
