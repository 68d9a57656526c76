"""Attribute name resolution.

``resolve()`` is called once per attribute per element while a document is
scanned, so it is a single hash lookup against a table built at import time.
An unrecognized name is ordinary data (``None``), never an exception; the
caller decides whether to ignore the attribute.

Matching is exact and case-sensitive: ``"viewBox"`` resolves, ``"viewbox"``
and ``" viewBox"`` do not.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from svgattrs.attributes.ids import Attribute


class NameTable(Mapping[str, Attribute]):
    """Immutable canonical-name → Attribute mapping.

    Built once; safe for unsynchronized concurrent reads.
    """

    __slots__ = ("_by_name",)

    def __init__(self, entries: Iterable[tuple[str, Attribute]]) -> None:
        by_name: dict[str, Attribute] = {}
        seen: set[Attribute] = set()
        for name, attr in entries:
            if name in by_name:
                raise ValueError(f"Duplicate canonical name: {name!r}")
            if attr in seen:
                raise ValueError(f"Duplicate attribute identifier: {attr.name}")
            by_name[name] = attr
            seen.add(attr)
        self._by_name = MappingProxyType(by_name)

    @classmethod
    def from_enum(cls, enum_cls: type[Attribute] = Attribute) -> NameTable:
        return cls((member.canonical_name, member) for member in enum_cls)

    def lookup(self, name: str) -> Attribute | None:
        return self._by_name.get(name)

    def canonical_names(self) -> list[str]:
        """Names in identifier order."""
        return [attr.canonical_name for attr in sorted(self._by_name.values())]

    def __getitem__(self, name: str) -> Attribute:
        return self._by_name[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        return f"NameTable({len(self)} names)"


# Built during module import; the import lock orders this before any lookup.
_TABLE = NameTable.from_enum(Attribute)


def get_name_table() -> NameTable:
    return _TABLE


def resolve(name: str) -> Attribute | None:
    """Attribute whose canonical name is exactly ``name``, else None."""
    return _TABLE.lookup(name)
