from parklot.core.db import SessionLocal
from parklot.core.security import hash_password
from parklot.models.admin import Admin
from tests.helpers import client


def _register(c, username="staff1", email="staff1@example.com", password="secret123"):
    return c.post(
        "/register",
        json={
            "username": username,
            "email": email,
            "password": password,
            "first_name": "Staff",
            "last_name": "Member",
        },
    )


def _create_superadmin(username="root", password="rootpass1") -> None:
    with SessionLocal() as db:
        db.add(
            Admin(
                username=username,
                email=f"{username}@example.com",
                password_hash=hash_password(password),
                first_name="Super",
                last_name="Admin",
                is_superadmin=True,
            )
        )
        db.commit()


def test_register_and_login():
    with client() as c:
        resp = _register(c)
        assert resp.status_code == 201
        assert resp.json() == {"message": "Admin registered successfully"}

        login = c.post("/login", json={"username": "staff1", "password": "secret123"})
        assert login.status_code == 200
        body = login.json()
        assert body["token_type"] == "bearer"
        assert body["access_token"]
        assert body["user"]["is_superadmin"] is False

        bad = c.post("/login", json={"username": "staff1", "password": "wrong-pass"})
        assert bad.status_code == 401


def test_register_duplicate_and_invalid():
    with client() as c:
        assert _register(c).status_code == 201
        dup = _register(c, email="other@example.com")
        assert dup.status_code == 409
        assert _register(c, username="has space", email="x@example.com").status_code == 400
        invalid = _register(c, username="staff2", email="not-an-email")
        assert invalid.status_code == 400
        assert invalid.json()["message"] == "Validation failed"


def test_admin_list_requires_superadmin():
    _create_superadmin()
    with client() as c:
        _register(c)
        denied = c.get("/admin-list", params={"username": "staff1"})
        assert denied.status_code == 403

        listed = c.get("/admin-list", params={"username": "root"})
        assert listed.status_code == 200
        assert listed.json() == [{"username": "staff1", "email": "staff1@example.com"}]
        assert c.get("/admin-count").json() == {"count": 1}


def test_delete_admin_rules():
    _create_superadmin()
    with client() as c:
        _register(c)
        assert c.delete("/delete-admin").status_code == 400
        assert c.delete("/delete-admin", params={"username": "ghost"}).status_code == 404
        assert c.delete("/delete-admin", params={"username": "root"}).status_code == 403
        resp = c.delete("/delete-admin", params={"username": "staff1"})
        assert resp.status_code == 200
        assert c.get("/admin-count").json() == {"count": 0}


def test_profile_view_and_edit():
    with client() as c:
        _register(c)
        profile = c.get("/admin", params={"username": "staff1"}).json()
        assert profile["first_name"] == "Staff"
        assert profile["job"] == "N/A"

        resp = c.put("/edit-profile", json={"username": "staff1", "job": "Attendant", "first_name": None})
        assert resp.status_code == 200
        updated = resp.json()["updated_admin"]
        assert updated["job"] == "Attendant"
        assert updated["first_name"] == "Staff"

        assert c.get("/admin", params={"username": "nobody"}).status_code == 404
