from backoffice.models.trip import Trip
from tests.conftest import create_trip

RULES = [
    {"days_before_trip": 30, "refund_percentage": 1, "display_order": 1},
    {"days_before_trip": 7, "refund_percentage": 0.5, "display_order": 2},
]


def url(agency, suffix="") -> str:
    return f"/agencies/{agency.id}/cancellation-policies{suffix}"


def create_policy(client, headers, agency, name="Flexível", is_default=False, rules=None):
    payload = {"name": name, "is_default": is_default, "rules": RULES if rules is None else rules}
    return client.post(url(agency), headers=headers, json=payload)


class TestPolicyCreation:
    def test_create_with_rules(self, client, agency, admin_headers):
        response = create_policy(client, admin_headers, agency)

        assert response.status_code == 201
        data = response.json()
        assert data["is_default"] is False
        assert [(r["days_before_trip"], r["refund_percentage"]) for r in data["rules"]] == [(30, 1.0), (7, 0.5)]

    def test_rules_required(self, client, agency, admin_headers):
        response = create_policy(client, admin_headers, agency, rules=[])

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_input"

    def test_duplicate_days(self, client, agency, admin_headers):
        rules = [
            {"days_before_trip": 7, "refund_percentage": 0.5, "display_order": 1},
            {"days_before_trip": 7, "refund_percentage": 0.2, "display_order": 2},
        ]
        assert create_policy(client, admin_headers, agency, rules=rules).status_code == 409

    def test_increasing_refund_rejected(self, client, agency, admin_headers):
        rules = [
            {"days_before_trip": 30, "refund_percentage": 0.1, "display_order": 1},
            {"days_before_trip": 2, "refund_percentage": 0.9, "display_order": 2},
        ]
        assert create_policy(client, admin_headers, agency, rules=rules).status_code == 400

    def test_refund_above_one(self, client, agency, admin_headers):
        rules = [{"days_before_trip": 30, "refund_percentage": 1.5, "display_order": 1}]
        assert create_policy(client, admin_headers, agency, rules=rules).status_code == 422

    def test_name_unique_within_agency(self, client, agency, admin_headers):
        create_policy(client, admin_headers, agency)
        assert create_policy(client, admin_headers, agency).status_code == 409

    def test_agent_denied(self, client, agency, agent_headers):
        assert create_policy(client, agent_headers, agency).status_code == 403


class TestDefaultPolicy:
    def test_new_default_replaces_previous(self, client, agency, admin_headers):
        first = create_policy(client, admin_headers, agency, "Padrão", is_default=True).json()
        second = create_policy(client, admin_headers, agency, "Nova", is_default=True).json()

        default = client.get(url(agency, "/default"), headers=admin_headers)
        old = client.get(url(agency, f"/{first['id']}"), headers=admin_headers)

        assert default.json()["id"] == second["id"]
        assert old.json()["is_default"] is False

    def test_update_to_default(self, client, agency, admin_headers):
        first = create_policy(client, admin_headers, agency, "Padrão", is_default=True).json()
        second = create_policy(client, admin_headers, agency, "Rígida").json()

        response = client.patch(url(agency, f"/{second['id']}"), headers=admin_headers, json={"is_default": True})

        assert response.json()["is_default"] is True
        assert client.get(url(agency, f"/{first['id']}"), headers=admin_headers).json()["is_default"] is False

    def test_default_missing(self, client, agency, admin_headers):
        create_policy(client, admin_headers, agency)
        assert client.get(url(agency, "/default"), headers=admin_headers).status_code == 404

    def test_list_default_first(self, client, agency, admin_headers):
        create_policy(client, admin_headers, agency, "A")
        default = create_policy(client, admin_headers, agency, "B", is_default=True).json()
        create_policy(client, admin_headers, agency, "C")

        response = client.get(url(agency), headers=admin_headers)

        names = [p["name"] for p in response.json()["policies"]]
        assert names[0] == default["name"]
        assert names[1:] == ["A", "C"]

    def test_default_is_per_agency(self, client, agency, sibling_agency, superadmin_headers):
        create_policy(client, superadmin_headers, sibling_agency, "Irmã", is_default=True)
        create_policy(client, superadmin_headers, agency, "Nossa", is_default=True)

        response = client.get(url(sibling_agency, "/default"), headers=superadmin_headers)
        assert response.json()["name"] == "Irmã"


class TestPolicyUpdateAndDelete:
    def test_rules_replaced(self, client, agency, admin_headers):
        policy = create_policy(client, admin_headers, agency).json()
        new_rules = [{"days_before_trip": 10, "refund_percentage": 0.7, "display_order": 1}]

        response = client.patch(url(agency, f"/{policy['id']}"), headers=admin_headers, json={"rules": new_rules})

        assert response.status_code == 200
        assert [r["days_before_trip"] for r in response.json()["rules"]] == [10]

    def test_update_without_rules_keeps_them(self, client, agency, admin_headers):
        policy = create_policy(client, admin_headers, agency).json()

        response = client.patch(url(agency, f"/{policy['id']}"), headers=admin_headers, json={"description": "Até 7 dias"})

        assert response.json()["description"] == "Até 7 dias"
        assert len(response.json()["rules"]) == 2

    def test_invalid_replacement_rules(self, client, agency, admin_headers):
        policy = create_policy(client, admin_headers, agency).json()

        response = client.patch(url(agency, f"/{policy['id']}"), headers=admin_headers, json={"rules": []})
        assert response.status_code == 400

    def test_delete_detaches_trips(self, client, db_session, agency, admin_headers):
        policy = create_policy(client, admin_headers, agency).json()
        trip = create_trip(db_session, agency)
        trip.cancellation_policy_id = policy["id"]
        db_session.commit()

        response = client.delete(url(agency, f"/{policy['id']}"), headers=admin_headers)

        assert response.status_code == 204
        db_session.expire_all()
        assert db_session.get(Trip, trip.id).cancellation_policy_id is None
