import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine.base import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.update({"JWT_SECRET_KEY": "supersecretkey"})

from tests.fakes import InMemoryObjectStore  # noqa: E402


@pytest.fixture(scope="function")
def engine() -> Generator[Engine]:
    """In-memory SQLite engine with every table created, one per test."""
    from gallerygate.db import Base
    from gallerygate.models import SignHistory, User  # noqa: F401

    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine: Engine) -> Generator[Session]:
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture(scope="function")
def fake_store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture(scope="function")
def client(db_session: Session, fake_store: InMemoryObjectStore) -> Generator[TestClient]:
    """FastAPI test client backed by SQLite and the in-memory object store."""
    from gallerygate.db import get_db
    from gallerygate.dependencies import get_object_store
    from gallerygate.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_store] = lambda: fake_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_user_data() -> dict[str, str]:
    return {"username": "alice", "password": "testpassword123", "name": "Alice", "email": "alice@example.com"}


@pytest.fixture(scope="function")
def authenticated_client(client: TestClient, test_user_data: dict[str, str]) -> Generator[TestClient]:
    """Test client with a registered user's bearer token preset."""
    from tests.helpers import register_and_login

    token = register_and_login(client, **test_user_data)
    client.headers.update({"Authorization": f"Bearer {token}"})
    yield client
    client.headers.clear()
