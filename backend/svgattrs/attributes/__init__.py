"""Attribute identifier set and name resolution."""

from svgattrs.attributes.ids import Attribute
from svgattrs.attributes.kinds import AttributeKind, attribute_kind, is_presentation
from svgattrs.attributes.resolver import NameTable, get_name_table, resolve

__all__ = [
    "Attribute",
    "AttributeKind",
    "attribute_kind",
    "is_presentation",
    "NameTable",
    "get_name_table",
    "resolve",
]
