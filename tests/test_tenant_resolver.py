import pytest
from types import SimpleNamespace

from backoffice.core.exceptions import NotFoundException
from backoffice.services.tenant_resolver import TenantResolver, extract_slug_from_host

EXEMPT = ("/admin/", "/auth/", "/api")


class RecordingLookup:
    """Slug lookup backed by a dict, remembering every slug asked for"""

    def __init__(self, tenants: dict):
        self.tenants = tenants
        self.calls: list[str] = []

    def __call__(self, slug: str):
        self.calls.append(slug)
        return self.tenants.get(slug)


@pytest.fixture
def lookup():
    return RecordingLookup(
        {
            "agencia-test": SimpleNamespace(id=1, slug="agencia-test"),
            "header-tenant": SimpleNamespace(id=2, slug="header-tenant"),
        }
    )


@pytest.fixture
def resolver(lookup):
    return TenantResolver(lookup, EXEMPT)


class TestExtractSlugFromHost:
    @pytest.mark.parametrize(
        "host,expected",
        [
            ("agencia-test.example.com", "agencia-test"),
            ("agencia-test.localhost:3000", "agencia-test"),
            ("agencia-test.localhost", "agencia-test"),
            ("a.b.example.com", "a"),
            ("localhost:3000", None),
            ("localhost", None),
            ("example.com", None),
            ("www.example.com", None),
            ("api.example.com", None),
            ("www.localhost", None),
            ("api.localhost:8000", None),
            ("testserver", None),
            ("", None),
            (None, None),
        ],
    )
    def test_host_rules(self, host, expected):
        assert extract_slug_from_host(host) == expected


class TestTenantResolver:
    def test_header_resolves_tenant(self, resolver, lookup):
        context = resolver.resolve({"X-Tenant-ID": "agencia-test"}, "localhost:3000", "/some-route")

        assert context.tenant_id == 1
        assert context.tenant_slug == "agencia-test"
        assert lookup.calls == ["agencia-test"]

    def test_header_takes_precedence_over_host(self, resolver, lookup):
        context = resolver.resolve(
            {"X-Tenant-ID": "header-tenant"}, "agencia-test.example.com", "/some-route"
        )

        assert context.tenant_slug == "header-tenant"
        assert lookup.calls == ["header-tenant"]

    def test_subdomain_resolves_tenant(self, resolver):
        context = resolver.resolve({}, "agencia-test.example.com", "/some-route")
        assert context.tenant_id == 1

    def test_subdomain_with_port(self, resolver):
        context = resolver.resolve({}, "agencia-test.localhost:3000", "/some-route")
        assert context.tenant_slug == "agencia-test"

    def test_unknown_slug_is_not_found(self, resolver):
        with pytest.raises(NotFoundException, match="Tenant not found: non-existent"):
            resolver.resolve({"X-Tenant-ID": "non-existent"}, None, "/some-route")

    def test_unknown_slug_rejected_even_on_exempt_path(self, resolver):
        """An explicit slug is always validated"""
        with pytest.raises(NotFoundException):
            resolver.resolve({"X-Tenant-ID": "non-existent"}, None, "/admin/tenants")

    @pytest.mark.parametrize(
        "path", ["/admin/tenants", "/auth/login", "/api", "/api/docs", "/api/health"]
    )
    def test_exempt_paths_resolve_to_none(self, resolver, lookup, path):
        assert resolver.resolve({}, "localhost:3000", path) is None
        assert lookup.calls == []

    def test_www_host_on_exempt_path(self, resolver):
        assert resolver.resolve({}, "www.example.com", "/auth/login") is None

    def test_missing_tenant_on_tenant_route(self, resolver, lookup):
        with pytest.raises(NotFoundException, match="Tenant not specified"):
            resolver.resolve({}, "localhost:3000", "/excursions")
        assert lookup.calls == []

    def test_admin_prefix_requires_trailing_slash(self, resolver):
        """"/administration" is not an admin route"""
        with pytest.raises(NotFoundException):
            resolver.resolve({}, None, "/administration")

    def test_empty_header_falls_back_to_host(self, resolver):
        context = resolver.resolve({"X-Tenant-ID": ""}, "agencia-test.example.com", "/x")
        assert context.tenant_slug == "agencia-test"


class TestTenantResolutionOverHttp:
    """Resolution runs for every route before the handler"""

    def test_agency_route_without_tenant(self, client, agency, admin_headers):
        headers = {"Authorization": admin_headers["Authorization"]}

        response = client.get(f"/agencies/{agency.id}", headers=headers)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
        assert "Tenant not specified" in response.json()["detail"]

    def test_tenant_from_subdomain_host(self, client, tenant, agency, admin_headers):
        headers = {"Authorization": admin_headers["Authorization"], "Host": f"{tenant.slug}.example.com"}

        response = client.get(f"/agencies/{agency.id}", headers=headers)

        assert response.status_code == 200
        assert response.json()["id"] == agency.id

    def test_admin_route_without_tenant(self, client, platform_headers):
        response = client.get("/admin/tenants", headers=platform_headers)
        assert response.status_code == 200
