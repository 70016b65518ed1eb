from backoffice.models.category import Category
from tests.conftest import create_trip


def url(agency, suffix="") -> str:
    return f"/agencies/{agency.id}/categories{suffix}"


def add_category(db, agency, name) -> Category:
    category = Category(agency_id=agency.id, name=name)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


class TestCategories:
    def test_create_category(self, client, agency, admin_headers):
        response = client.post(url(agency), headers=admin_headers, json={"name": "Ecoturismo"})

        assert response.status_code == 201
        assert response.json()["name"] == "Ecoturismo"

    def test_name_unique_within_agency(self, client, db_session, agency, admin_headers):
        add_category(db_session, agency, "Praia")

        response = client.post(url(agency), headers=admin_headers, json={"name": "Praia"})
        assert response.status_code == 409

    def test_same_name_in_other_agency(self, client, db_session, agency, sibling_agency, admin_headers):
        add_category(db_session, sibling_agency, "Praia")

        response = client.post(url(agency), headers=admin_headers, json={"name": "Praia"})
        assert response.status_code == 201

    def test_list_sorted_by_name(self, client, db_session, agency, admin_headers):
        add_category(db_session, agency, "Serra")
        add_category(db_session, agency, "Aventura")

        response = client.get(url(agency), headers=admin_headers)
        assert [c["name"] for c in response.json()["categories"]] == ["Aventura", "Serra"]

    def test_agent_denied(self, client, agency, agent_headers):
        assert client.get(url(agency), headers=agent_headers).status_code == 403

    def test_rename(self, client, db_session, agency, admin_headers):
        category = add_category(db_session, agency, "Praia")
        add_category(db_session, agency, "Serra")

        conflict = client.patch(url(agency, f"/{category.id}"), headers=admin_headers, json={"name": "Serra"})
        renamed = client.patch(url(agency, f"/{category.id}"), headers=admin_headers, json={"name": "Litoral"})

        assert conflict.status_code == 409
        assert renamed.json()["name"] == "Litoral"

    def test_delete_unused(self, client, db_session, agency, admin_headers):
        category = add_category(db_session, agency, "Praia")

        assert client.delete(url(agency, f"/{category.id}"), headers=admin_headers).status_code == 204
        assert client.get(url(agency, f"/{category.id}"), headers=admin_headers).status_code == 404

    def test_delete_used_by_trip(self, client, db_session, agency, admin_headers):
        category = add_category(db_session, agency, "Praia")
        trip = create_trip(db_session, agency)
        trip.category_id = category.id
        db_session.commit()

        response = client.delete(url(agency, f"/{category.id}"), headers=admin_headers)
        assert response.status_code == 409
