"""Request-scoped tenant resolution from X-Tenant-ID or the request host."""

import logging
from typing import Callable, Iterable, Mapping

from backoffice.core.exceptions import NotFoundException
from backoffice.models.tenant import Tenant
from backoffice.models.tenant_context import TenantContext

logger = logging.getLogger(__name__)

TENANT_HEADER = "X-Tenant-ID"
RESERVED_SUBDOMAINS = frozenset({"www", "api"})


def extract_slug_from_host(host: str | None) -> str | None:
    """
    Extract the tenant slug from a Host header value.

    Examples:
        agencia123.example.com    -> "agencia123"
        agencia123.localhost:3000 -> "agencia123"
        localhost:3000            -> None (no subdomain)
        example.com               -> None (no subdomain)
        www.example.com           -> None (reserved)
    """
    if not host:
        return None

    parts = host.split(":")[0].split(".")

    if len(parts) == 2 and parts[1] == "localhost":
        slug = parts[0]
    elif len(parts) <= 2:
        return None
    else:
        slug = parts[0]

    if not slug or slug in RESERVED_SUBDOMAINS:
        return None
    return slug


class TenantResolver:
    """
    Resolves the tenant a request targets.

    Order of precedence:
    1. X-Tenant-ID header (slug)
    2. First label of the Host header
    3. No slug: exempt paths (admin, auth, docs) proceed without a tenant,
       anything else is rejected

    Args:
        lookup: Slug -> Tenant lookup, normally TenantRepository.get_by_slug
        exempt_prefixes: Path prefixes allowed to run without a tenant
    """

    def __init__(self, lookup: Callable[[str], Tenant | None], exempt_prefixes: Iterable[str]):
        self.lookup = lookup
        self.exempt_prefixes = tuple(exempt_prefixes)

    def is_exempt(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.exempt_prefixes)

    def resolve(self, headers: Mapping[str, str], host: str | None, path: str) -> TenantContext | None:
        """
        Resolve the tenant for one request.

        Args:
            headers: Request headers (case-insensitive mapping)
            host: Host header value
            path: Request path without query string

        Returns:
            TenantContext, or None for an exempt path without a slug

        Raises:
            NotFoundException: If no slug is given on a tenant route,
                or the slug does not match any tenant
        """
        slug = headers.get(TENANT_HEADER) or extract_slug_from_host(host)

        if not slug:
            if self.is_exempt(path):
                return None
            raise NotFoundException(
                "Tenant not specified. Provide X-Tenant-ID header or use tenant subdomain"
            )

        tenant = self.lookup(slug)
        if tenant is None:
            logger.warning("Tenant not found: %s", slug)
            raise NotFoundException(f"Tenant not found: {slug}")

        logger.info("Tenant resolved: %s (%s)", tenant.slug, tenant.id)
        return TenantContext(tenant_id=tenant.id, tenant_slug=tenant.slug)
