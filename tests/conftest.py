import os

import pytest
from fastapi.testclient import TestClient

from ngphone.telco.service import PhoneService


@pytest.fixture
def service() -> PhoneService:
    """A fresh service with its own cache, independent of the process-wide one."""
    return PhoneService(capacity=16)


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, service: PhoneService) -> TestClient:
    monkeypatch.setenv("PHONE_CACHE_CAPACITY", "16")

    from ngphone.core.settings import get_settings
    from ngphone.telco.service import get_phone_service

    get_settings.cache_clear()
    get_phone_service.cache_clear()

    from ngphone.api.deps import get_service
    from ngphone.main import app

    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

    get_settings.cache_clear()
    get_phone_service.cache_clear()
    os.environ.pop("PHONE_CACHE_CAPACITY", None)
