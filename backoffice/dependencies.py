from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from backoffice.config import settings
from backoffice.core.exceptions import NotFoundException, UnauthorizedException
from backoffice.core.security import decode_principal
from backoffice.database import get_db
from backoffice.models.principal import Principal
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.tenant_repository import TenantRepository
from backoffice.services.authorization import AccessGuard, RoleRule
from backoffice.services.tenant_resolver import TenantResolver

# auto_error=False so a missing header goes through UnauthorizedException (401)
security = HTTPBearer(auto_error=False)


async def resolve_request_tenant(request: Request, db: Session = Depends(get_db)) -> None:
    """
    Application-wide dependency resolving the request's tenant.

    Stores the TenantContext (or None on exempt paths) on
    request.state.tenant before any route handler runs.

    Raises:
        NotFoundException: If the tenant is missing on a tenant route or unknown
    """
    resolver = TenantResolver(
        TenantRepository(db).get_by_slug,
        settings.tenant_exempt_prefixes,
    )
    request.state.tenant = resolver.resolve(
        request.headers,
        request.headers.get("host"),
        request.url.path,
    )


async def get_tenant_context(request: Request) -> TenantContext | None:
    return getattr(request.state, "tenant", None)


async def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Principal:
    """
    Validate the bearer JWT and build the caller's Principal.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using shared SECRET_KEY
    3. Read sub / role / agency_id / tenant_id claims

    Raises:
        UnauthorizedException: If the header is missing or the token invalid
    """
    if credentials is None:
        raise UnauthorizedException("Not authenticated")
    return decode_principal(credentials.credentials)


@dataclass(frozen=True)
class RequestContext:
    """Authorized caller plus the tenant the request targets"""

    principal: Principal
    tenant: TenantContext | None

    def require_tenant(self) -> TenantContext:
        if self.tenant is None:
            raise NotFoundException(
                "Tenant not specified. Provide X-Tenant-ID header or use tenant subdomain"
            )
        return self.tenant


def authorize_request(rule: RoleRule):
    """
    Dependency factory guarding one endpoint with a RoleRule.

    Usage:
        ctx: RequestContext = Depends(authorize_request(AGENCY_ADMINS))
    """

    async def dependency(
        request: Request,
        principal: Principal = Depends(get_principal),
        tenant: TenantContext | None = Depends(get_tenant_context),
        db: Session = Depends(get_db),
    ) -> RequestContext:
        AccessGuard(db).authorize(principal, tenant, request.path_params, rule)
        return RequestContext(principal=principal, tenant=tenant)

    return dependency
