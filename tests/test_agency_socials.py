from backoffice.models.agency_social import AgencySocial, SocialPlatform


def url(agency, suffix="") -> str:
    return f"/agencies/{agency.id}/socials{suffix}"


def add_social(db, agency, platform=SocialPlatform.INSTAGRAM, link="https://instagram.com/bora") -> AgencySocial:
    social = AgencySocial(agency_id=agency.id, type=platform, url=link)
    db.add(social)
    db.commit()
    db.refresh(social)
    return social


class TestSocialCreation:
    def test_superadmin_creates_profile(self, client, agency, superadmin_headers):
        response = client.post(
            url(agency), headers=superadmin_headers, json={"type": "instagram", "url": "https://instagram.com/bora"}
        )

        assert response.status_code == 201
        assert response.json()["url"] == "https://instagram.com/bora"

    def test_invalid_url(self, client, agency, superadmin_headers):
        response = client.post(
            url(agency), headers=superadmin_headers, json={"type": "facebook", "url": "facebook.com bora"}
        )
        assert response.status_code == 422

    def test_unknown_platform(self, client, agency, superadmin_headers):
        response = client.post(
            url(agency), headers=superadmin_headers, json={"type": "orkut", "url": "https://orkut.com/bora"}
        )
        assert response.status_code == 422

    def test_one_profile_per_platform(self, client, db_session, agency, superadmin_headers):
        add_social(db_session, agency)

        response = client.post(
            url(agency), headers=superadmin_headers, json={"type": "instagram", "url": "https://instagram.com/bora2"}
        )

        assert response.status_code == 409

    def test_same_platform_in_other_agency(self, client, db_session, agency, sibling_agency, superadmin_headers):
        add_social(db_session, sibling_agency)

        response = client.post(
            url(agency), headers=superadmin_headers, json={"type": "instagram", "url": "https://instagram.com/bora"}
        )
        assert response.status_code == 201


class TestSocialRetrieval:
    def test_get_by_platform(self, client, db_session, agency, admin_headers):
        add_social(db_session, agency)
        youtube = add_social(db_session, agency, SocialPlatform.YOUTUBE, "https://youtube.com/@bora")

        response = client.get(url(agency, "/platform/youtube"), headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["id"] == youtube.id

    def test_platform_missing(self, client, agency, admin_headers):
        assert client.get(url(agency, "/platform/tiktok"), headers=admin_headers).status_code == 404

    def test_active_lists_every_profile(self, client, db_session, agency, admin_headers):
        add_social(db_session, agency)
        add_social(db_session, agency, SocialPlatform.FACEBOOK, "https://facebook.com/bora")

        response = client.get(url(agency, "/active"), headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["total"] == 2


class TestSocialUpdateAndDelete:
    def test_change_platform_to_taken_one(self, client, db_session, agency, admin_headers):
        add_social(db_session, agency)
        facebook = add_social(db_session, agency, SocialPlatform.FACEBOOK, "https://facebook.com/bora")

        response = client.patch(url(agency, f"/{facebook.id}"), headers=admin_headers, json={"type": "instagram"})
        assert response.status_code == 409

    def test_update_url(self, client, db_session, agency, admin_headers):
        social = add_social(db_session, agency)

        response = client.patch(
            url(agency, f"/{social.id}"), headers=admin_headers, json={"url": "https://instagram.com/bora.oficial"}
        )

        assert response.status_code == 200
        assert response.json()["url"] == "https://instagram.com/bora.oficial"
        assert response.json()["type"] == "instagram"

    def test_delete_requires_superadmin(self, client, db_session, agency, admin_headers, superadmin_headers):
        social = add_social(db_session, agency)

        assert client.delete(url(agency, f"/{social.id}"), headers=admin_headers).status_code == 403
        assert client.delete(url(agency, f"/{social.id}"), headers=superadmin_headers).status_code == 204
