from backoffice.models.trip_item import TripItem
from tests.conftest import create_trip


def url(agency, trip, item_id=None) -> str:
    base = f"/agencies/{agency.id}/trips/{trip.id}/items"
    return f"{base}/{item_id}" if item_id is not None else base


class TestTripItems:
    def test_create_item(self, client, agency, trip, admin_headers):
        response = client.post(
            url(agency, trip), headers=admin_headers, json={"name": "Travel insurance", "is_included": True}
        )

        assert response.status_code == 201
        assert response.json()["trip_id"] == trip.id
        assert response.json()["is_included"] is True

    def test_name_max_length(self, client, agency, trip, admin_headers):
        response = client.post(url(agency, trip), headers=admin_headers, json={"name": "x" * 201, "is_included": False})
        assert response.status_code == 422

    def test_list_and_get_as_agent(self, client, db_session, agency, trip, agent_headers):
        item = TripItem(trip_id=trip.id, name="Breakfast", is_included=True)
        db_session.add(item)
        db_session.commit()

        listed = client.get(url(agency, trip), headers=agent_headers)
        fetched = client.get(url(agency, trip, item.id), headers=agent_headers)

        assert listed.json()["total"] == 1
        assert fetched.json()["name"] == "Breakfast"

    def test_agent_cannot_create(self, client, agency, trip, agent_headers):
        response = client.post(url(agency, trip), headers=agent_headers, json={"name": "X", "is_included": True})
        assert response.status_code == 403

    def test_update_item(self, client, db_session, agency, trip, admin_headers):
        item = TripItem(trip_id=trip.id, name="Lunch", is_included=True)
        db_session.add(item)
        db_session.commit()

        response = client.patch(url(agency, trip, item.id), headers=admin_headers, json={"is_included": False})

        assert response.status_code == 200
        assert response.json()["is_included"] is False
        assert response.json()["name"] == "Lunch"

    def test_item_of_other_trip_not_found(self, client, db_session, agency, trip, admin_headers):
        other_trip = create_trip(db_session, agency, slug="other")
        item = TripItem(trip_id=other_trip.id, name="Dinner", is_included=False)
        db_session.add(item)
        db_session.commit()

        response = client.get(url(agency, trip, item.id), headers=admin_headers)
        assert response.status_code == 404

    def test_delete_item(self, client, db_session, agency, trip, admin_headers):
        item = TripItem(trip_id=trip.id, name="Guide", is_included=True)
        db_session.add(item)
        db_session.commit()

        assert client.delete(url(agency, trip, item.id), headers=admin_headers).status_code == 204
        assert client.get(url(agency, trip), headers=admin_headers).json()["total"] == 0

    def test_unknown_trip_is_forbidden_for_agency_admin(self, client, agency, admin_headers):
        response = client.get(f"/agencies/{agency.id}/trips/999/items", headers=admin_headers)
        assert response.status_code == 403

    def test_unknown_trip_is_not_found_for_superadmin(self, client, agency, superadmin_headers):
        response = client.get(f"/agencies/{agency.id}/trips/999/items", headers=superadmin_headers)
        assert response.status_code == 404
