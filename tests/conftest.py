import os
import tempfile

# Lightweight local DB and no background threads during tests.
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+pysqlite:///{os.path.join(tempfile.gettempdir(), 'parklot_test.db')}",
)
os.environ.setdefault("AUTO_CREATE_DB", "true")
os.environ.setdefault("AUTO_RUN_MIGRATIONS", "false")
os.environ.setdefault("AUTO_SEED_ADMIN_USER", "false")
os.environ.setdefault("ENABLE_RESERVATION_SWEEPER", "false")
os.environ.setdefault("PARKLOT_AUTH_DISABLED", "true")
os.environ.setdefault("PARKLOT_JWT_SECRET", "test-jwt-secret-strong-value-123456")
os.environ.setdefault("PARKLOT_PASSWORD_HASH_ROUNDS", "1000")

import pytest

from parklot.core.db import SessionLocal, engine
from parklot.models import Base


@pytest.fixture(autouse=True)
def clean_tables():
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
    yield
