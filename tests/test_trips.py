import pytest

from backoffice.models.cancellation_policy import CancellationPolicy
from backoffice.models.category import Category
from backoffice.models.trip_image import TripImage
from tests.conftest import create_trip


def trip_payload(**overrides) -> dict:
    data = {
        "slug": "paraty-2026-03",
        "destination": "Paraty - RJ",
        "description": "Historic center and boat tour",
        "departure_date": "2026-03-10T07:00:00Z",
        "return_date": "2026-03-12T21:00:00Z",
        "total_seats": 44,
    }
    data.update(overrides)
    return data


def url(agency, trip_id=None) -> str:
    base = f"/agencies/{agency.id}/trips"
    return f"{base}/{trip_id}" if trip_id is not None else base


class TestTripCreation:
    def test_create_trip(self, client, agency, admin_headers):
        response = client.post(url(agency), headers=admin_headers, json=trip_payload())

        assert response.status_code == 201
        trip = response.json()
        assert trip["slug"] == "paraty-2026-03"
        assert trip["status"] == "ACTIVE"
        assert trip["main_image_url"] is None
        assert trip["agency_id"] == agency.id

    def test_same_day_return_allowed(self, client, agency, admin_headers):
        payload = trip_payload(departure_date="2026-03-10T07:00:00Z", return_date="2026-03-10T07:00:00Z")
        assert client.post(url(agency), headers=admin_headers, json=payload).status_code == 201

    def test_return_before_departure(self, client, agency, admin_headers):
        payload = trip_payload(return_date="2026-03-09T07:00:00Z")

        response = client.post(url(agency), headers=admin_headers, json=payload)
        assert response.status_code == 400

    def test_duplicate_slug_in_agency(self, client, agency, trip, admin_headers):
        response = client.post(url(agency), headers=admin_headers, json=trip_payload(slug=trip.slug))
        assert response.status_code == 409

    def test_same_slug_in_other_agency(self, client, db_session, agency, sibling_agency, superadmin_headers):
        create_trip(db_session, sibling_agency, slug="paraty-2026-03")

        response = client.post(url(agency), headers=superadmin_headers, json=trip_payload())
        assert response.status_code == 201

    @pytest.mark.parametrize("field,value", [("total_seats", 0), ("status", "OPEN")])
    def test_invalid_fields(self, client, agency, admin_headers, field, value):
        response = client.post(url(agency), headers=admin_headers, json=trip_payload(**{field: value}))
        assert response.status_code == 422


class TestTripRetrieval:
    def test_list_newest_first(self, client, db_session, agency, admin_headers):
        create_trip(db_session, agency, slug="first")
        create_trip(db_session, agency, slug="second")

        response = client.get(url(agency), headers=admin_headers)

        assert [t["slug"] for t in response.json()["trips"]] == ["second", "first"]

    def test_get_trip_of_other_agency(self, client, db_session, agency, sibling_agency, superadmin_headers):
        foreign = create_trip(db_session, sibling_agency, slug="foreign")

        response = client.get(url(agency, foreign.id), headers=superadmin_headers)
        assert response.status_code == 404


class TestTripUpdate:
    def test_partial_update(self, client, agency, trip, admin_headers):
        response = client.patch(url(agency, trip.id), headers=admin_headers, json={"status": "DRAFT"})

        assert response.status_code == 200
        assert response.json()["status"] == "DRAFT"
        assert response.json()["destination"] == trip.destination

    def test_update_return_date_before_stored_departure(self, client, agency, trip, admin_headers):
        response = client.patch(
            url(agency, trip.id), headers=admin_headers, json={"return_date": "2026-09-19T08:00:00Z"}
        )
        assert response.status_code == 400

    def test_update_slug_to_taken(self, client, db_session, agency, trip, admin_headers):
        create_trip(db_session, agency, slug="taken")

        response = client.patch(url(agency, trip.id), headers=admin_headers, json={"slug": "taken"})
        assert response.status_code == 409

    def test_main_image_fields_not_writable(self, client, agency, trip, admin_headers):
        response = client.patch(
            url(agency, trip.id), headers=admin_headers, json={"main_image_url": "https://evil/x.jpg"}
        )

        assert response.status_code == 200
        assert response.json()["main_image_url"] is None


class TestTripLinks:
    def test_create_with_category_and_policy(self, client, db_session, agency, admin_headers):
        category = Category(agency_id=agency.id, name="Praia")
        policy = CancellationPolicy(agency_id=agency.id, name="Flexível")
        db_session.add_all([category, policy])
        db_session.commit()

        response = client.post(
            url(agency),
            headers=admin_headers,
            json=trip_payload(category_id=category.id, cancellation_policy_id=policy.id),
        )

        assert response.status_code == 201
        assert response.json()["category_id"] == category.id
        assert response.json()["cancellation_policy_id"] == policy.id

    def test_category_of_other_agency(self, client, db_session, agency, sibling_agency, admin_headers):
        category = Category(agency_id=sibling_agency.id, name="Praia")
        db_session.add(category)
        db_session.commit()

        response = client.post(url(agency), headers=admin_headers, json=trip_payload(category_id=category.id))

        assert response.status_code == 404
        assert response.json()["detail"] == "Category not found in this agency"

    def test_unset_category(self, client, db_session, agency, trip, admin_headers):
        category = Category(agency_id=agency.id, name="Praia")
        db_session.add(category)
        db_session.commit()
        client.patch(url(agency, trip.id), headers=admin_headers, json={"category_id": category.id})

        response = client.patch(url(agency, trip.id), headers=admin_headers, json={"category_id": None})

        assert response.status_code == 200
        assert response.json()["category_id"] is None


class TestTripDeletion:
    def test_delete_removes_stored_images(self, client, db_session, agency, trip, admin_headers, fake_storage):
        db_session.add(
            TripImage(trip_id=trip.id, image_url="https://f/a.jpg", thumbnail_url="https://f/a-t.jpg")
        )
        db_session.commit()

        response = client.delete(url(agency, trip.id), headers=admin_headers)

        assert response.status_code == 204
        assert fake_storage.deleted == ["https://f/a.jpg", "https://f/a-t.jpg"]
        assert db_session.query(TripImage).count() == 0

    def test_agent_cannot_delete(self, client, agency, trip, agent_headers):
        response = client.delete(url(agency, trip.id), headers=agent_headers)
        assert response.status_code == 403
