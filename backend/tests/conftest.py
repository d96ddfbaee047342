import pytest
from fastapi.testclient import TestClient

from main import create_app
from store import SessionStore
from tests.fakes import FakeFactory


@pytest.fixture
def factory() -> FakeFactory:
    return FakeFactory()


@pytest.fixture
def store(factory) -> SessionStore:
    return SessionStore(factory)


@pytest.fixture
def client(factory, store) -> TestClient:
    return TestClient(create_app(chat_factory=factory, store=store))


@pytest.fixture
def unconfigured_client() -> TestClient:
    return TestClient(create_app(chat_factory=None, store=SessionStore()))
