"""FastAPI dependency injection: phone service factory."""
from __future__ import annotations

from ngphone.telco.service import PhoneService, get_phone_service


def get_service() -> PhoneService:
    """Return the process-wide PhoneService configured from settings."""
    return get_phone_service()
