"""Attribute vocabulary, name resolution and SVG scanning endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, Query

from svgattrs.attributes.ids import Attribute
from svgattrs.attributes.resolver import NameTable
from svgattrs.config import Settings
from svgattrs.dependencies import get_settings, get_table
from svgattrs.models.requests import ScanRequest
from svgattrs.models.responses import (
    AttributeInfo,
    AttributeListResponse,
    ResolveResponse,
    ScannedAttribute,
    ScannedElementInfo,
    ScanResponse,
)
from svgattrs.svg.scanner import scan_svg

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/attributes")


@router.get("", response_model=AttributeListResponse)
async def list_attributes() -> AttributeListResponse:
    infos = [AttributeInfo.from_attribute(attr) for attr in Attribute]
    return AttributeListResponse(count=len(infos), attributes=infos)


@router.get("/resolve", response_model=ResolveResponse)
async def resolve_name(
    name: str = Query(..., description="Attribute name exactly as written in markup"),
    table: NameTable = Depends(get_table),
) -> ResolveResponse:
    attr = table.lookup(name)
    if attr is None:
        return ResolveResponse(name=name, recognized=False)
    return ResolveResponse(name=name, recognized=True, attribute=AttributeInfo.from_attribute(attr))


@router.post("/scan", response_model=ScanResponse)
async def scan(req: ScanRequest, settings: Settings = Depends(get_settings)) -> ScanResponse:
    """Resolve the attributes of every element; unknown attributes are reported, not rejected."""
    start = time.perf_counter()

    try:
        size = len(req.svg.encode("utf-8"))
    except UnicodeEncodeError as e:
        logger.warning("Rejected SVG with unencodable text at offset %d", e.start)
        return ScanResponse(error=f"SVG contains an unpaired surrogate at offset {e.start}")
    if size > settings.max_svg_bytes:
        logger.warning("Rejected SVG of %d bytes (limit %d)", size, settings.max_svg_bytes)
        return ScanResponse(error=f"SVG is {size} bytes; limit is {settings.max_svg_bytes}")

    elements: list[ScannedElementInfo] = []
    recognized = unrecognized = 0
    for element in scan_svg(req.svg):
        bag = element.properties
        attributes = [
            ScannedAttribute(**AttributeInfo.from_attribute(attr).model_dump(), value=value)
            for _, attr, value in bag
        ]
        elements.append(
            ScannedElementInfo(
                tag=element.tag,
                attributes=attributes,
                unrecognized=bag.unrecognized,
                href=bag.href,
            )
        )
        recognized += len(attributes)
        unrecognized += len(bag.unrecognized)

    elapsed = (time.perf_counter() - start) * 1000
    return ScanResponse(
        elements=elements,
        recognized_count=recognized,
        unrecognized_count=unrecognized,
        processing_time_ms=round(elapsed, 2),
    )
