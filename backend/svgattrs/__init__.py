"""svgattrs — SVG attribute name resolution."""

from svgattrs.attributes import Attribute, NameTable, resolve
from svgattrs.property_bag import PropertyBag

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "NameTable",
    "PropertyBag",
    "resolve",
]
