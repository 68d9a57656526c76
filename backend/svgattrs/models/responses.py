"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgattrs.attributes.ids import Attribute
from svgattrs.attributes.kinds import attribute_kind


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    attributes_registered: int = 0


class AttributeInfo(BaseModel):
    id: int
    identifier: str
    name: str
    kind: str

    @classmethod
    def from_attribute(cls, attr: Attribute) -> AttributeInfo:
        return cls(
            id=int(attr),
            identifier=attr.name,
            name=attr.canonical_name,
            kind=attribute_kind(attr).name.lower(),
        )


class AttributeListResponse(BaseModel):
    count: int = 0
    attributes: list[AttributeInfo] = Field(default_factory=list)


class ResolveResponse(BaseModel):
    name: str
    recognized: bool = False
    attribute: AttributeInfo | None = None


class ScannedAttribute(AttributeInfo):
    value: str = ""


class ScannedElementInfo(BaseModel):
    tag: str
    attributes: list[ScannedAttribute] = Field(default_factory=list)
    unrecognized: list[str] = Field(default_factory=list)
    href: str | None = None


class ScanResponse(BaseModel):
    elements: list[ScannedElementInfo] = Field(default_factory=list)
    recognized_count: int = 0
    unrecognized_count: int = 0
    processing_time_ms: float = 0.0
    error: str = ""
