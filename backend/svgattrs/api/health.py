"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from svgattrs import __version__
from svgattrs.attributes.ids import Attribute
from svgattrs.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        attributes_registered=len(Attribute),
    )
