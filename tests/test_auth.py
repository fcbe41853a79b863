from parklot.core.db import SessionLocal
from parklot.core.security import create_admin_token, decode_admin_token, hash_password, verify_password
from parklot.models.admin import Admin
from tests.helpers import client


def _create_admin(username: str, password: str, *, superadmin: bool = False) -> None:
    with SessionLocal() as db:
        db.add(
            Admin(
                username=username,
                email=f"{username}@example.com",
                password_hash=hash_password(password),
                first_name="Gate",
                last_name="Keeper",
                is_superadmin=superadmin,
            )
        )
        db.commit()


def test_password_hash_roundtrip():
    encoded = hash_password("hunter22")
    assert encoded.startswith("pbkdf2_sha256$")
    assert verify_password("hunter22", encoded)
    assert not verify_password("hunter23", encoded)
    assert not verify_password("hunter22", "garbage")


def test_token_claims():
    token = create_admin_token(username="ops", admin_id="a1", is_superadmin=True)
    claims = decode_admin_token(token)
    assert claims["sub"] == "ops"
    assert claims["superadmin"] is True


def test_auth_disabled_allows_dashboard(monkeypatch):
    monkeypatch.setenv("PARKLOT_AUTH_DISABLED", "true")
    with client() as c:
        assert c.get("/get-parking-slots").status_code == 200


def test_auth_enabled_blocks_missing_token(monkeypatch):
    monkeypatch.setenv("PARKLOT_AUTH_DISABLED", "false")
    with client() as c:
        resp = c.get("/get-parking-slots")
        assert resp.status_code == 401
        assert resp.json() == {"message": "Missing bearer token"}
        assert c.get("/get-parking-slots", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_auth_enabled_accepts_login_token(monkeypatch):
    monkeypatch.setenv("PARKLOT_AUTH_DISABLED", "false")
    _create_admin("ops", "opspass1")
    with client() as c:
        token = c.post("/login", json={"username": "ops", "password": "opspass1"}).json()["access_token"]
        headers = {"Authorization": f"Bearer {token}"}
        assert c.get("/get-parking-slots", headers=headers).status_code == 200
        # Identity comes from the token, not the query string.
        profile = c.get("/admin", params={"username": "someone-else"}, headers=headers)
        assert profile.status_code == 200
        assert profile.json()["email"] == "ops@example.com"
        assert c.get("/admin-list", headers=headers).status_code == 403


def test_gates_stay_public_with_auth_enabled(monkeypatch):
    monkeypatch.setenv("PARKLOT_AUTH_DISABLED", "false")
    with client() as c:
        resp = c.get("/api/validate-exit-id/unknown")
        assert resp.status_code == 404
