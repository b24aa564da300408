"""Phone number routes.

Validation failures on the throwing operations map to HTTP 422 with the
error code from ``ngphone.telco.errors.ErrorCode``.  Info, batch and
validation routes never fail on bad numbers; the outcome is in the body.
"""
from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from ngphone.api.deps import get_service
from ngphone.core.settings import get_settings
from ngphone.telco.display import DisplayStyle, format_for_display
from ngphone.telco.errors import PhoneValidationError
from ngphone.telco.service import PhoneService, all_providers, provider_info
from ngphone.telco.types import PhoneParts, PhoneResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/phones", tags=["phones"])

FormatName = Literal["local", "international", "e164"]


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class NormalizeBody(BaseModel):
    number: str
    format: FormatName | None = None


class SplitBody(BaseModel):
    number: str


class BatchBody(BaseModel):
    numbers: list[str] = Field(default_factory=list)
    format: FormatName | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _validation_error(exc: PhoneValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": str(exc), "code": exc.code.value},
    )


def _serialize_result(result: PhoneResult[str]) -> dict:
    return {"ok": result.ok, "value": result.value, "error": result.error}


def _serialize_parts(parts: PhoneParts) -> dict:
    return {
        "prefix": parts.prefix,
        "provider": parts.provider.value if parts.provider else None,
        "number": parts.number,
    }


def _format_or_default(fmt: FormatName | None) -> FormatName:
    return fmt or get_settings().default_format


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/normalize", summary="Normalize one number")
def normalize(body: NormalizeBody, service: PhoneService = Depends(get_service)):
    try:
        normalized = service.normalize(body.number, _format_or_default(body.format))
    except PhoneValidationError as exc:
        raise _validation_error(exc)
    return {"normalized": normalized}


@router.get("/info", summary="Derived info for one number")
def info(number: str, service: PhoneService = Depends(get_service)):
    return service.get_info(number).to_dict()


@router.get("/display", summary="Group one number for display")
def display(number: str, style: DisplayStyle = "national"):
    try:
        rendered = format_for_display(number, style)
    except PhoneValidationError as exc:
        raise _validation_error(exc)
    return {"display": rendered, "style": style}


@router.post("/split", summary="Split a number into prefix, provider and subscriber digits")
def split(body: SplitBody, service: PhoneService = Depends(get_service)):
    try:
        parts = service.split_parts(body.number)
    except PhoneValidationError as exc:
        raise _validation_error(exc)
    return _serialize_parts(parts)


@router.post("/batch/normalize", summary="Normalize many numbers")
def batch_normalize(body: BatchBody, service: PhoneService = Depends(get_service)):
    results = service.batch_normalize(body.numbers, _format_or_default(body.format))
    return [_serialize_result(r) for r in results]


@router.post("/batch/detect", summary="Detect the provider of many numbers")
def batch_detect(body: BatchBody, service: PhoneService = Depends(get_service)):
    return [p.value if p else None for p in service.batch_detect_provider(body.numbers)]


@router.post("/batch/validate", summary="Validate many numbers")
def batch_validate(body: BatchBody, service: PhoneService = Depends(get_service)):
    return service.batch_validate(body.numbers)


@router.get("/random", summary="Generate a random valid number")
def random_number(
    provider: str | None = None,
    service: PhoneService = Depends(get_service),
):
    try:
        number = service.generate_random(provider)
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown provider: {provider!r}")
    detected = service.detect_provider(number)
    return {"number": str(number), "provider": detected.value if detected else None}


@router.get("/providers", summary="List providers and their prefixes")
def providers():
    result = []
    for provider in all_providers():
        meta = provider_info(provider)
        result.append({
            "provider": meta.provider.value,
            "description": meta.description,
            "prefixes": list(meta.prefixes),
        })
    return result


@router.get("/cache", summary="Cache diagnostics")
def cache_stats(service: PhoneService = Depends(get_service)):
    stats = service.cache_stats()
    return {
        "cache_size": stats.cache_size,
        "cache_capacity": stats.cache_capacity,
        "pattern_cache_size": stats.pattern_cache_size,
        "prefix_map_size": stats.prefix_map_size,
    }


@router.delete("/cache", status_code=204, summary="Clear service caches")
def clear_cache(service: PhoneService = Depends(get_service)) -> Response:
    service.clear_caches()
    logger.info("phones api: caches cleared on request")
    return Response(status_code=204)
