"""Handling of ``xlink:href`` and ``href``.

SVG 1.1 links with ``xlink:href``; SVG 2 uses plain ``href``. When an element
has both, ``href`` wins no matter which one comes first.
"""

from __future__ import annotations

from typing import TypeVar

from svgattrs.attributes.ids import Attribute

T = TypeVar("T")


def is_href(attr: Attribute) -> bool:
    return attr is Attribute.HREF or attr is Attribute.XLINK_HREF


def set_href(attr: Attribute, current: T | None, href: T) -> T | None:
    """New slot value after seeing ``href`` under ``attr``.

    ``xlink:href`` only fills an empty slot; ``href`` always replaces.
    """
    if current is None or attr is not Attribute.XLINK_HREF:
        return href
    return current
