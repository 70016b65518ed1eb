"""
Two-axis access control for back-office routes.

Role axis: the principal's role must be in the route's allowed set.
Ownership axis: non-superadmin principals may only reach their own
agency, inside the resolved tenant, and only trips of that agency.
"""

import logging
from dataclasses import dataclass
from typing import Mapping

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ForbiddenException
from backoffice.models.principal import Principal
from backoffice.models.role import UserRole
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.agency_repository import AgencyRepository
from backoffice.repositories.trip_repository import TripRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleRule:
    """Allowed roles of a route, plus whether the ownership chain is checked"""

    roles: frozenset[UserRole]
    check_ownership: bool = True

    @classmethod
    def exact(cls, role: UserRole, check_ownership: bool = True) -> "RoleRule":
        return cls(frozenset({role}), check_ownership)

    @classmethod
    def any_of(cls, *roles: UserRole, check_ownership: bool = True) -> "RoleRule":
        return cls(frozenset(roles), check_ownership)

    def allows(self, role: UserRole) -> bool:
        return role in self.roles

    def describe(self) -> str:
        # Stable order for error messages
        ordered = [r.value for r in UserRole if r in self.roles]
        return " or ".join(ordered)


def _int_param(route_params: Mapping[str, object], name: str) -> int | None:
    value = route_params.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ForbiddenException(f"Access denied. Invalid {name}")


class AccessGuard:
    """Evaluates a RoleRule against a principal and the request's route parameters"""

    def __init__(self, db: Session):
        self.db = db
        self.agency_repo = AgencyRepository(db)
        self.trip_repo = TripRepository(db)

    def authorize(
        self,
        principal: Principal,
        tenant: TenantContext | None,
        route_params: Mapping[str, object],
        rule: RoleRule,
    ) -> None:
        """
        Allow or deny a request.

        Args:
            principal: Authenticated caller
            tenant: Tenant resolved for the request (None on exempt routes)
            route_params: Path parameters; agency_id and trip_id are inspected
            rule: Allowed roles for the route

        Raises:
            ForbiddenException: On any role or ownership mismatch
        """
        if not rule.allows(principal.role):
            logger.warning(
                "Access denied: %s (%s) attempted route requiring roles: %s",
                principal.email or principal.subject_id,
                principal.role.value,
                rule.describe(),
            )
            raise ForbiddenException(f"Access denied. Required roles: {rule.describe()}")

        if rule.check_ownership and not principal.is_superadmin():
            self._check_ownership(principal, tenant, route_params)

        logger.debug(
            "Authorization granted: %s (%s) tenant=%s",
            principal.email or principal.subject_id,
            principal.role.value,
            tenant.tenant_slug if tenant else "global",
        )

    def _check_ownership(
        self,
        principal: Principal,
        tenant: TenantContext | None,
        route_params: Mapping[str, object],
    ) -> None:
        if tenant is None:
            logger.warning("Ownership check failed: no tenant in request for %s", principal)
            raise ForbiddenException("Tenant context required for this operation")

        if principal.tenant_id is not None and principal.tenant_id != tenant.tenant_id:
            logger.warning(
                "Tenant ownership violation: %s attempted to access tenant %s",
                principal,
                tenant.tenant_slug,
            )
            raise ForbiddenException(
                "Access denied. You can only access resources from your own agency."
            )

        agency_id = _int_param(route_params, "agency_id")
        if agency_id is None:
            return

        if principal.agency_id is None or principal.agency_id != agency_id:
            logger.warning("Agency ownership violation: %s attempted agency %s", principal, agency_id)
            raise ForbiddenException("Access denied. You can only access your own agency.")

        if self.agency_repo.get_by_id_and_tenant(agency_id, tenant.tenant_id) is None:
            logger.warning(
                "Agency %s is not part of tenant %s (requested by %s)",
                agency_id,
                tenant.tenant_slug,
                principal,
            )
            raise ForbiddenException("Access denied. Agency does not belong to this tenant.")

        trip_id = _int_param(route_params, "trip_id")
        if trip_id is None:
            return

        if self.trip_repo.get_by_id_and_agency(trip_id, agency_id) is None:
            logger.warning("Trip %s is not part of agency %s (requested by %s)", trip_id, agency_id, principal)
            raise ForbiddenException("Access denied. Trip does not belong to this agency.")
