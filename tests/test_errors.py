import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from parklot.core import errors


def test_error_body_shapes():
    assert errors.error_body("Slot not found") == {"message": "Slot not found"}
    assert errors.error_body({"valid": False, "message": "ID not found"}) == {"valid": False, "message": "ID not found"}
    assert errors.error_body({"valid": False}) == {"valid": False, "message": "Request failed"}


def test_log_exception_includes_context(caplog):
    logger = logging.getLogger("test_errors")
    caplog.set_level(logging.ERROR)
    errors.log_exception(logger, "Sweep failed", extra={"slot": 4, "skipped": None}, exc=RuntimeError("boom"))
    assert any("Sweep failed slot=4: boom" in rec.message for rec in caplog.records)


def test_unhandled_error_returns_500_with_message(caplog):
    app = FastAPI()
    errors.install_exception_handlers(app)

    @app.get("/explode")
    def _explode():
        raise RuntimeError("database went away")

    caplog.set_level(logging.ERROR)
    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/explode")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error", "error": "database went away"}
    assert any("Unhandled error" in rec.message for rec in caplog.records)
