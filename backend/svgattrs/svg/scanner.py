"""SVG start-tag scanner — regex facade that feeds PropertyBags.

Finds every element start tag in a raw SVG string and resolves its attributes.
This is not a validating XML parser: comments are stripped, processing
instructions, doctypes and end tags are skipped, and everything else is read
tag by tag. Unquoted and value-less attributes do not drop their element; a
tag opening that still cannot be read is logged at DEBUG and skipped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from svgattrs.property_bag import PropertyBag

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_CDATA_RE = re.compile(r"<!\[CDATA\[.*?\]\]>", re.DOTALL)
_START_TAG_RE = re.compile(
    r"""<([A-Za-z_][\w:.-]*)((?:\s+[^\s=/<>"']+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`/]+))?)*)\s*/?>"""
)
_TAG_OPENING_RE = re.compile(r"<([A-Za-z_][\w:.-]*)")


@dataclass
class ScannedElement:
    tag: str
    properties: PropertyBag = field(default_factory=PropertyBag)
    source_span: tuple[int, int] = (0, 0)


def scan_svg(svg_text: str) -> list[ScannedElement]:
    """Scan raw SVG text into one ScannedElement per start tag, in document order."""
    # Blank out comments and CDATA, keeping offsets stable for source_span.
    text = _COMMENT_RE.sub(lambda m: " " * len(m.group(0)), svg_text)
    text = _CDATA_RE.sub(lambda m: " " * len(m.group(0)), text)

    elements: list[ScannedElement] = []
    for match in _START_TAG_RE.finditer(text):
        elements.append(
            ScannedElement(
                tag=match.group(1),
                properties=PropertyBag.from_tag(match.group(2)),
                source_span=(match.start(), match.end()),
            )
        )

    _log_skipped_openings(text, [el.source_span for el in elements])

    unrecognized = sum(len(el.properties.unrecognized) for el in elements)
    logger.info("Scanned SVG: %d elements, %d unrecognized attributes", len(elements), unrecognized)
    return elements


def _log_skipped_openings(text: str, spans: list[tuple[int, int]]) -> None:
    """Log ``<tag`` openings that lie outside every scanned element."""
    i = 0
    for m in _TAG_OPENING_RE.finditer(text):
        pos = m.start()
        while i < len(spans) and spans[i][1] <= pos:
            i += 1
        if i < len(spans) and spans[i][0] <= pos:
            continue
        logger.debug("Skipping unreadable <%s> start tag at offset %d", m.group(1), pos)
