from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from numbergate.api.deps import get_clock
from numbergate.api.server import app
from numbergate.core.clock import FixedClock


class BrokenClock:
    def now(self):
        raise RuntimeError("clock unavailable")


@pytest.fixture
def frozen_clock():
    # 14 + 5 + 30 = 49
    return FixedClock(datetime(2024, 1, 1, 14, 5, 30))


@pytest.fixture
def client(frozen_clock):
    app.dependency_overrides[get_clock] = lambda: frozen_clock
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    with TestClient(app, raise_server_exceptions=False) as c:
        app.dependency_overrides[get_clock] = lambda: BrokenClock()
        yield c
    app.dependency_overrides.clear()
