import io
import json

from PIL import Image

from backoffice.models.trip_image import TripImage
from backoffice.repositories.trip_image_repository import TripImageRepository
from tests.conftest import create_trip


def make_png() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), (30, 120, 200)).save(buffer, format="PNG")
    return buffer.getvalue()


PNG_BYTES = make_png()


def url(agency, trip, image_id=None) -> str:
    base = f"/agencies/{agency.id}/trips/{trip.id}/images"
    return f"{base}/{image_id}" if image_id is not None else base


def upload(client, headers, agency, trip, is_main=False, display_order=0, operation_type="ADD", file=True):
    data = {"display_order": display_order, "is_main": is_main, "operation_type": operation_type}
    files = {"file": ("photo.png", PNG_BYTES, "image/png")} if file else None
    return client.post(url(agency, trip), headers=headers, data={"data": json.dumps(data)}, files=files)


def get_trip(client, headers, agency, trip) -> dict:
    return client.get(f"/agencies/{agency.id}/trips/{trip.id}", headers=headers).json()


def main_images(db_session, trip) -> list[TripImage]:
    db_session.expire_all()
    return TripImageRepository(db_session).get_main_by_trip(trip.id)


class TestImageUpload:
    def test_upload_regular_image(self, client, db_session, agency, trip, admin_headers, fake_storage):
        response = upload(client, admin_headers, agency, trip, display_order=2)

        assert response.status_code == 201
        image = response.json()
        assert image["is_main"] is False
        assert image["display_order"] == 2
        assert image["image_url"] == fake_storage.stored[0].full_url
        assert image["thumbnail_url"] == fake_storage.stored[0].thumbnail_url
        assert f"trips/{trip.id}/" in image["image_url"]
        assert get_trip(client, admin_headers, agency, trip)["main_image_url"] is None

    def test_upload_main_image_mirrors_to_trip(self, client, agency, trip, admin_headers):
        image = upload(client, admin_headers, agency, trip, is_main=True).json()

        trip_data = get_trip(client, admin_headers, agency, trip)
        assert trip_data["main_image_url"] == image["image_url"]
        assert trip_data["main_image_thumbnail_url"] == image["thumbnail_url"]

    def test_new_main_replaces_previous(self, client, db_session, agency, trip, admin_headers):
        first = upload(client, admin_headers, agency, trip, is_main=True).json()
        second = upload(client, admin_headers, agency, trip, is_main=True).json()

        mains = main_images(db_session, trip)
        assert [m.id for m in mains] == [second["id"]]
        assert first["id"] != second["id"]
        assert get_trip(client, admin_headers, agency, trip)["main_image_url"] == second["image_url"]

    def test_main_images_of_other_trips_untouched(self, client, db_session, agency, trip, admin_headers):
        other_trip = create_trip(db_session, agency, slug="other")
        upload(client, admin_headers, agency, other_trip, is_main=True)

        upload(client, admin_headers, agency, trip, is_main=True)

        assert len(main_images(db_session, other_trip)) == 1

    def test_upload_requires_file(self, client, agency, trip, admin_headers, fake_storage):
        response = upload(client, admin_headers, agency, trip, file=False)

        assert response.status_code == 400
        assert fake_storage.stored == []

    def test_upload_requires_add_operation(self, client, agency, trip, admin_headers, fake_storage):
        response = upload(client, admin_headers, agency, trip, operation_type="UPDATE")

        assert response.status_code == 400
        assert fake_storage.stored == []

    def test_upload_rejects_undecodable_file(self, client, agency, trip, admin_headers, fake_storage):
        response = client.post(
            url(agency, trip),
            headers=admin_headers,
            data={"data": json.dumps({"operation_type": "ADD"})},
            files={"file": ("photo.png", b"plain text", "image/png")},
        )

        assert response.status_code == 400
        assert fake_storage.stored == []

    def test_bad_json_in_data(self, client, agency, trip, admin_headers):
        response = client.post(
            url(agency, trip),
            headers=admin_headers,
            data={"data": "{not json"},
            files={"file": ("photo.png", PNG_BYTES, "image/png")},
        )
        assert response.status_code == 400

    def test_agent_cannot_upload(self, client, agency, trip, agent_headers):
        assert upload(client, agent_headers, agency, trip).status_code == 403


class TestImageUpdate:
    def test_promote_to_main(self, client, db_session, agency, trip, admin_headers):
        old_main = upload(client, admin_headers, agency, trip, is_main=True).json()
        other = upload(client, admin_headers, agency, trip).json()

        response = client.patch(
            url(agency, trip, other["id"]), headers=admin_headers, data={"data": json.dumps({"is_main": True})}
        )

        assert response.status_code == 200
        assert [m.id for m in main_images(db_session, trip)] == [other["id"]]
        assert old_main["id"] != other["id"]
        assert get_trip(client, admin_headers, agency, trip)["main_image_url"] == other["image_url"]

    def test_unmark_main_clears_trip_mirror(self, client, db_session, agency, trip, admin_headers):
        image = upload(client, admin_headers, agency, trip, is_main=True).json()

        response = client.patch(
            url(agency, trip, image["id"]), headers=admin_headers, data={"data": json.dumps({"is_main": False})}
        )

        assert response.json()["is_main"] is False
        assert main_images(db_session, trip) == []
        trip_data = get_trip(client, admin_headers, agency, trip)
        assert trip_data["main_image_url"] is None
        assert trip_data["main_image_thumbnail_url"] is None

    def test_display_order_only(self, client, agency, trip, admin_headers):
        image = upload(client, admin_headers, agency, trip, is_main=True).json()

        response = client.patch(
            url(agency, trip, image["id"]), headers=admin_headers, data={"data": json.dumps({"display_order": 5})}
        )

        assert response.json()["display_order"] == 5
        assert response.json()["is_main"] is True
        assert get_trip(client, admin_headers, agency, trip)["main_image_url"] == image["image_url"]

    def test_replace_file_of_main_image(self, client, agency, trip, admin_headers, fake_storage):
        image = upload(client, admin_headers, agency, trip, is_main=True).json()

        response = client.patch(
            url(agency, trip, image["id"]),
            headers=admin_headers,
            data={"data": json.dumps({"operation_type": "UPDATE"})},
            files={"file": ("new.png", PNG_BYTES, "image/png")},
        )

        updated = response.json()
        assert response.status_code == 200
        assert fake_storage.deleted == [image["image_url"], image["thumbnail_url"]]
        assert updated["image_url"] == fake_storage.stored[-1].full_url
        assert get_trip(client, admin_headers, agency, trip)["main_image_url"] == updated["image_url"]

    def test_replace_file_requires_update_operation(self, client, agency, trip, admin_headers, fake_storage):
        image = upload(client, admin_headers, agency, trip).json()

        response = client.patch(
            url(agency, trip, image["id"]),
            headers=admin_headers,
            data={"data": json.dumps({"operation_type": "ADD"})},
            files={"file": ("new.png", PNG_BYTES, "image/png")},
        )

        assert response.status_code == 400
        assert fake_storage.deleted == []

    def test_undecodable_replacement_keeps_old_files(self, client, db_session, agency, trip, admin_headers, fake_storage):
        image = upload(client, admin_headers, agency, trip, is_main=True).json()

        response = client.patch(
            url(agency, trip, image["id"]),
            headers=admin_headers,
            data={"data": json.dumps({"operation_type": "UPDATE"})},
            files={"file": ("new.png", b"not an image at all", "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid image file"
        assert fake_storage.deleted == []
        assert len(fake_storage.stored) == 1
        db_session.expire_all()
        stored = TripImageRepository(db_session).get_by_id_and_trip(image["id"], trip.id)
        assert stored.image_url == image["image_url"]
        assert stored.thumbnail_url == image["thumbnail_url"]

    def test_image_of_other_trip_not_found(self, client, db_session, agency, trip, admin_headers):
        other_trip = create_trip(db_session, agency, slug="other")
        image = upload(client, admin_headers, agency, other_trip).json()

        response = client.patch(
            url(agency, trip, image["id"]), headers=admin_headers, data={"data": json.dumps({"is_main": True})}
        )
        assert response.status_code == 404


class TestImageRemoval:
    def test_remove_main_clears_mirror_without_promotion(self, client, db_session, agency, trip, admin_headers, fake_storage):
        main = upload(client, admin_headers, agency, trip, is_main=True).json()
        upload(client, admin_headers, agency, trip)

        response = client.delete(url(agency, trip, main["id"]), headers=admin_headers)

        assert response.status_code == 204
        assert fake_storage.deleted == [main["image_url"], main["thumbnail_url"]]
        assert main_images(db_session, trip) == []
        assert get_trip(client, admin_headers, agency, trip)["main_image_url"] is None

    def test_remove_regular_image_keeps_mirror(self, client, agency, trip, admin_headers):
        main = upload(client, admin_headers, agency, trip, is_main=True).json()
        other = upload(client, admin_headers, agency, trip).json()

        client.delete(url(agency, trip, other["id"]), headers=admin_headers)

        assert get_trip(client, admin_headers, agency, trip)["main_image_url"] == main["image_url"]

    def test_failed_file_delete_still_removes_record(self, client, agency, trip, admin_headers, fake_storage):
        image = upload(client, admin_headers, agency, trip).json()
        fake_storage.fail_delete = True

        response = client.delete(url(agency, trip, image["id"]), headers=admin_headers)

        assert response.status_code == 204
        assert client.get(url(agency, trip, image["id"]), headers=admin_headers).status_code == 404


class TestImageListing:
    def test_list_by_display_order(self, client, agency, trip, agent_headers, admin_headers):
        upload(client, admin_headers, agency, trip, display_order=3)
        upload(client, admin_headers, agency, trip, display_order=1)

        response = client.get(url(agency, trip), headers=agent_headers)

        assert response.status_code == 200
        assert [i["display_order"] for i in response.json()["images"]] == [1, 3]
