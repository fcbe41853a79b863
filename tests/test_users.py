from tests.helpers import add_reservation, add_slot, add_user, client


def test_user_list_filters():
    add_user("verified@example.com", name="Ana", verified=True)
    add_user("pending@example.com", name="Ben")
    with client() as c:
        everyone = c.get("/user-list").json()
        assert [u["name"] for u in everyone] == ["Ana", "Ben"]

        verified = c.get("/user-list", params={"filter": "verified"}).json()
        assert [u["email"] for u in verified] == ["verified@example.com"]

        pending = c.get("/user-list", params={"filter": "not-verified"}).json()
        assert [u["email"] for u in pending] == ["pending@example.com"]

        by_email = c.get("/user-list", params={"email": "PENDING@example.com", "filter": "verified"}).json()
        assert [u["name"] for u in by_email] == ["Ben"]


def test_user_list_empty_is_404():
    with client() as c:
        resp = c.get("/user-list")
        assert resp.status_code == 404
        assert resp.json() == {"message": "No users found"}


def test_verify_user_and_count():
    add_user("pending@example.com")
    with client() as c:
        assert c.get("/user-count").json() == {"count": 1}
        resp = c.put("/verify-user", json={"email": "pending@example.com"})
        assert resp.status_code == 200
        assert resp.json()["user"]["verified"] is True
        assert c.put("/verify-user", json={"email": "ghost@example.com"}).status_code == 404


def test_pending_table_joins_users_on_email():
    add_user("driver@example.com", name="Carla")
    add_slot(1)
    add_slot(2)
    add_reservation(slot=1, user_id="driver@example.com")
    add_reservation(slot=2, user_id="driver@example.com", arrived=True, license_plate="ARR001")
    with client() as c:
        data = c.get("/api/data").json()
        assert len(data) == 1
        assert [r["slot"] for r in data[0]["reservations"]] == [1]

        parked = c.get("/api/parked").json()
        assert sorted(r["slot"] for r in parked[0]["reservations"]) == [1, 2]


def test_history_table_joins_users():
    add_user("driver@example.com", name="Carla")
    add_user("other@example.com", name="Dan")
    add_slot(1)
    add_reservation(slot=1, user_id="driver@example.com")
    with client() as c:
        c.get("/reservation/history")
        data = c.get("/api/reservation-history").json()
        by_name = {entry["name"]: entry["reservations"] for entry in data}
        assert len(by_name["Carla"]) == 1
        assert "exit_id" not in by_name["Carla"][0]
        assert by_name["Dan"] == []
