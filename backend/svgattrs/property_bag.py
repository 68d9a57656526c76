"""Resolved attributes of a single element.

The bag resolves every raw ``(name, value)`` pair once. Recognized entries are
kept in document order as ``(key, attr, value)``; unrecognized names are kept
aside and otherwise ignored, so foreign or vendor attributes never stop a
document from being read. Values are stored with character and entity
references decoded (``&amp;`` becomes ``&``).
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Iterable, Iterator

from svgattrs.attributes.ids import Attribute
from svgattrs.attributes.resolver import resolve
from svgattrs.href import is_href, set_href

logger = logging.getLogger(__name__)

# name="value", name='value' or name=value; names may carry a prefix (xlink:href).
# A name with no value is matched so that it can be skipped on its own.
_ATTR_RE = re.compile(r"""([^\s=/<>"']+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`/]+)))?""")
_TAG_OPEN_RE = re.compile(r"^\s*<[^\s/>]*")


class PropertyBag:
    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._entries: list[tuple[str, Attribute, str]] = []
        self._unrecognized: list[str] = []

        for key, value in pairs:
            attr = resolve(key)
            if attr is None:
                logger.debug("Ignoring unknown attribute %r", key)
                self._unrecognized.append(key)
                continue
            self._entries.append((key, attr, value))

    @classmethod
    def from_tag(cls, tag_text: str) -> PropertyBag:
        """Build a bag from the attribute list of a start tag's text."""
        return cls(_extract_pairs(_TAG_OPEN_RE.sub("", tag_text, count=1)))

    def __iter__(self) -> Iterator[tuple[str, Attribute, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, attr: object) -> bool:
        return any(a is attr for _, a, _ in self._entries)

    def get(self, attr: Attribute, default: str | None = None) -> str | None:
        for _, a, value in self._entries:
            if a is attr:
                return value
        return default

    @property
    def unrecognized(self) -> list[str]:
        return list(self._unrecognized)

    @property
    def href(self) -> str | None:
        """Effective link target; ``href`` overrides ``xlink:href``."""
        result: str | None = None
        for _, attr, value in self._entries:
            if is_href(attr):
                result = set_href(attr, result, value)
        return result

    def __repr__(self) -> str:
        return f"PropertyBag({len(self._entries)} recognized, {len(self._unrecognized)} unrecognized)"


def _extract_pairs(tag_text: str) -> list[tuple[str, str]]:
    """Pairs in order, with character and entity references decoded."""
    pairs: list[tuple[str, str]] = []
    for m in _ATTR_RE.finditer(tag_text):
        quoted_or_bare = [v for v in m.group(2, 3, 4) if v is not None]
        if not quoted_or_bare:
            logger.debug("Skipping attribute %r without a value", m.group(1))
            continue
        pairs.append((m.group(1), html.unescape(quoted_or_bare[0])))
    return pairs
