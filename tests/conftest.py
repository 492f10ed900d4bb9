import pytest
from fastapi.testclient import TestClient

from lotto_backend.app import create_app
from lotto_backend.store import RoomStore

ADMIN_PASSWORD = "s3cret-test"
HOUR = 60 * 60


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return RoomStore(clock=clock, ttl=24 * HOUR)


@pytest.fixture
def app(clock):
    return create_app(clock=clock, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
