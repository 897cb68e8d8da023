import pytest
from datetime import date, datetime
from httpx import ASGITransport, AsyncClient

from autoquote.main import app
from autoquote.core.catalog import get_vehicle_catalog
from autoquote.schemas.vehicle import VehicleModel
from autoquote.services.vehicles import VehicleCatalog


EVALUATION_DATE = date(2025, 1, 1)


class FakeClock:
    """Manually advanced stand-in for time.time"""

    def __init__(self, start: float):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingFetcher:
    """Remote catalog double that counts calls and either answers or fails"""

    def __init__(self, records=None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.calls = []

    async def __call__(self, make_name: str, year: int):
        self.calls.append((make_name, year))
        if self.error is not None:
            raise self.error
        return [
            VehicleModel(id=model_id, name=name, make_name=make_name)
            for model_id, name in self.records
        ]


@pytest.fixture
def evaluation_date():
    return EVALUATION_DATE


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 6, 1, 12, 0).timestamp())


@pytest.fixture
def fetcher_factory():
    return RecordingFetcher


@pytest.fixture
def failing_fetcher():
    return RecordingFetcher(error=ConnectionError("catalog unreachable"))


@pytest.fixture
def fetcher():
    return RecordingFetcher(records=[
        (2001, "Wrangler"),
        (2002, "Cherokee"),
        (2003, "  "),
        (2004, "Wrangler"),
        (2005, "Compass"),
        (2006, ""),
        (2007, "Gladiator"),
    ])


@pytest.fixture
def catalog(fetcher, clock):
    return VehicleCatalog(fetch_models=fetcher, clock=clock, ttl=3600)


@pytest.fixture
def valid_quote_data():
    return {
        "date_of_birth": "1994-06-01",
        "state": "WY",
        "vehicle_year": 2023,
        "vehicle_make": "Toyota",
        "coverage_type": "STANDARD",
        "liability_limit": 100000,
        "deductible": 1000,
    }


@pytest.fixture
async def test_client(catalog):
    app.dependency_overrides[get_vehicle_catalog] = lambda: catalog
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to premium rating"
    )
    config.addinivalue_line(
        "markers", "vehicles: marks tests related to vehicle reference data"
    )
