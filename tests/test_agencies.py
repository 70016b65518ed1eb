from backoffice.models import (
    Agency,
    AgencyEmail,
    AgeRange,
    CancellationPolicy,
    CancellationPolicyRule,
    Category,
    Trip,
    TripAgePriceGroup,
    TripImage,
)
from tests.conftest import add_image, create_trip

AGENCY_PAYLOAD = {
    "name": "Serra Aventuras",
    "cadastur": "21.12345.67/0001-01",
    "cnpj": "11.222.333/0001-81",
    "description": "Trilhas e ecoturismo",
}


class TestAgencyCreation:
    def test_create_agency_under_tenant(self, client, tenant, platform_headers):
        response = client.post(
            f"/admin/tenants/{tenant.id}/agencies", headers=platform_headers, json=AGENCY_PAYLOAD
        )

        assert response.status_code == 201
        data = response.json()
        assert data["tenant_id"] == tenant.id
        assert data["cadastur"] == AGENCY_PAYLOAD["cadastur"]

    def test_create_agency_unknown_tenant(self, client, platform_headers):
        response = client.post("/admin/tenants/9999/agencies", headers=platform_headers, json=AGENCY_PAYLOAD)
        assert response.status_code == 404

    def test_duplicate_cadastur(self, client, tenant, agency, platform_headers):
        payload = {**AGENCY_PAYLOAD, "cadastur": agency.cadastur}

        response = client.post(f"/admin/tenants/{tenant.id}/agencies", headers=platform_headers, json=payload)

        assert response.status_code == 409
        assert response.json()["detail"] == "CADASTUR already in use by another agency"

    def test_duplicate_cnpj_across_tenants(self, client, other_tenant, agency, platform_headers):
        payload = {**AGENCY_PAYLOAD, "cnpj": agency.cnpj}

        response = client.post(
            f"/admin/tenants/{other_tenant.id}/agencies", headers=platform_headers, json=payload
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "CNPJ already in use by another agency"

    def test_invalid_cnpj_format(self, client, tenant, platform_headers):
        payload = {**AGENCY_PAYLOAD, "cnpj": "11222333000181"}

        response = client.post(f"/admin/tenants/{tenant.id}/agencies", headers=platform_headers, json=payload)
        assert response.status_code == 422

    def test_list_agencies_of_tenant(self, client, tenant, agency, sibling_agency, foreign_agency, platform_headers):
        response = client.get(f"/admin/tenants/{tenant.id}/agencies", headers=platform_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert {a["id"] for a in data["agencies"]} == {agency.id, sibling_agency.id}


class TestAgencyAccess:
    def test_admin_gets_own_agency(self, client, agency, admin_headers):
        response = client.get(f"/agencies/{agency.id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["name"] == agency.name

    def test_admin_cannot_get_sibling_agency(self, client, sibling_agency, admin_headers):
        response = client.get(f"/agencies/{sibling_agency.id}", headers=admin_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied. You can only access your own agency."

    def test_agent_cannot_get_agency(self, client, agency, agent_headers):
        assert client.get(f"/agencies/{agency.id}", headers=agent_headers).status_code == 403

    def test_superadmin_gets_any_agency_in_tenant(self, client, sibling_agency, superadmin_headers):
        response = client.get(f"/agencies/{sibling_agency.id}", headers=superadmin_headers)
        assert response.status_code == 200

    def test_superadmin_foreign_agency_not_found(self, client, foreign_agency, superadmin_headers):
        response = client.get(f"/agencies/{foreign_agency.id}", headers=superadmin_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Agency not found"

    def test_unknown_tenant(self, client, agency, admin_headers):
        headers = {**admin_headers, "X-Tenant-ID": "ghost"}

        response = client.get(f"/agencies/{agency.id}", headers=headers)
        assert response.status_code == 404

    def test_missing_tenant(self, client, agency, admin_headers):
        headers = {"Authorization": admin_headers["Authorization"]}

        response = client.get(f"/agencies/{agency.id}", headers=headers)

        assert response.status_code == 404
        assert response.json()["detail"].startswith("Tenant not specified")

    def test_tenant_from_subdomain(self, client, agency, admin_headers):
        headers = {"Authorization": admin_headers["Authorization"], "Host": "bora.example.com"}

        response = client.get(f"/agencies/{agency.id}", headers=headers)
        assert response.status_code == 200


class TestAgencyUpdate:
    def test_update_name_and_description(self, client, agency, admin_headers):
        response = client.patch(
            f"/agencies/{agency.id}",
            headers=admin_headers,
            json={"name": "Bora Trilhas", "description": "Novo texto"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Bora Trilhas"
        assert data["description"] == "Novo texto"
        assert data["cadastur"] == agency.cadastur

    def test_clear_description(self, client, agency, admin_headers):
        client.patch(f"/agencies/{agency.id}", headers=admin_headers, json={"description": "x"})

        response = client.patch(f"/agencies/{agency.id}", headers=admin_headers, json={"description": None})
        assert response.json()["description"] is None

    def test_keep_own_cadastur(self, client, agency, admin_headers):
        response = client.patch(f"/agencies/{agency.id}", headers=admin_headers, json={"cadastur": agency.cadastur})
        assert response.status_code == 200

    def test_take_sibling_cnpj(self, client, agency, sibling_agency, admin_headers):
        response = client.patch(f"/agencies/{agency.id}", headers=admin_headers, json={"cnpj": sibling_agency.cnpj})
        assert response.status_code == 409


class TestAgencyDeletion:
    def test_agency_admin_cannot_delete(self, client, agency, admin_headers):
        assert client.delete(f"/agencies/{agency.id}", headers=admin_headers).status_code == 403

    def test_superadmin_deletes_with_catalogue(self, client, db_session, agency, superadmin_headers):
        create_trip(db_session, agency)
        db_session.add(AgeRange(agency_id=agency.id, name="Adulto", min_age=18, max_age=59))
        db_session.commit()

        response = client.delete(f"/agencies/{agency.id}", headers=superadmin_headers)

        assert response.status_code == 204
        db_session.expire_all()
        assert db_session.query(Agency).filter_by(id=agency.id).first() is None
        assert db_session.query(Trip).count() == 0
        assert db_session.query(AgeRange).count() == 0

    def test_delete_removes_stored_images(self, client, db_session, agency, trip, superadmin_headers, fake_storage):
        image = add_image(db_session, trip, "cover", is_main=True)

        response = client.delete(f"/agencies/{agency.id}", headers=superadmin_headers)

        assert response.status_code == 204
        assert fake_storage.deleted == [image.image_url, image.thumbnail_url]
        db_session.expire_all()
        assert db_session.query(TripImage).count() == 0

    def test_storage_failure_does_not_block_delete(self, client, db_session, agency, trip, superadmin_headers, fake_storage):
        add_image(db_session, trip, "cover")
        fake_storage.fail_delete = True

        response = client.delete(f"/agencies/{agency.id}", headers=superadmin_headers)

        assert response.status_code == 204
        db_session.expire_all()
        assert db_session.query(Agency).filter_by(id=agency.id).first() is None
        assert fake_storage.deleted == []

    def test_delete_cascades_to_contacts_and_pricing(self, client, db_session, agency, trip, superadmin_headers):
        age_range = AgeRange(agency_id=agency.id, name="Adulto", min_age=18, max_age=59)
        category = Category(agency_id=agency.id, name="Praia")
        policy = CancellationPolicy(
            agency_id=agency.id,
            name="Flexível",
            rules=[CancellationPolicyRule(days_before_trip=7, refund_percentage=0.5, display_order=1)],
        )
        db_session.add_all([age_range, category, policy, AgencyEmail(agency_id=agency.id, email="a@bora.tur.br")])
        db_session.commit()
        trip.category_id = category.id
        trip.cancellation_policy_id = policy.id
        db_session.add(TripAgePriceGroup(trip_id=trip.id, age_range_id=age_range.id, final_price=300))
        db_session.commit()

        response = client.delete(f"/agencies/{agency.id}", headers=superadmin_headers)

        assert response.status_code == 204
        db_session.expire_all()
        for model in (AgencyEmail, Category, CancellationPolicy, CancellationPolicyRule, TripAgePriceGroup, Trip):
            assert db_session.query(model).count() == 0
