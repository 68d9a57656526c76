"""Surface generation and cross-surface consistency check.

Every place the attribute identifier set is materialized is rendered from
``svgattrs.attributes.vocabulary.VOCABULARY``:

- ``svgattrs/attributes/ids.py`` — the ``Attribute`` IntEnum used by Python code
- ``include/svgattrs-attributes.h`` — the C declaration used by native glue

``check`` parses each surface back into ordered ``(identifier, value, name)``
rows and compares them against the vocabulary. A numeric identifier must mean
the same attribute on every surface.

The tool works on a source checkout: the C header lives in backend/include and
is not installed with the package.

Usage:
    python -m svgattrs.codegen generate [--output-dir DIR]
    python -m svgattrs.codegen check [--header PATH]
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from itertools import zip_longest
from pathlib import Path
from typing import NamedTuple

from svgattrs.attributes.vocabulary import VOCABULARY

logger = logging.getLogger(__name__)

ENUM_FILENAME = "ids.py"
HEADER_FILENAME = "svgattrs-attributes.h"

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_ENUM_PATH = PACKAGE_DIR / "attributes" / ENUM_FILENAME
# Source tree only: backend/include is not part of the installed package.
DEFAULT_HEADER_PATH = PACKAGE_DIR.parent / "include" / HEADER_FILENAME

C_PREFIX = "SVGATTRS_ATTRIBUTE_"

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_HEADER_ENTRY_RE = re.compile(
    r"^\s*" + C_PREFIX + r'([A-Z0-9_]+)\s*=\s*(\d+)\s*,\s*/\*\s*"([^"]*)"\s*\*/',
    re.MULTILINE,
)

_ENUM_TEMPLATE = '''"""Attribute identifiers.

Generated by ``python -m svgattrs.codegen generate`` from
svgattrs/attributes/vocabulary.py. Do not edit by hand.
"""

from __future__ import annotations

import enum


class Attribute(enum.IntEnum):
    """Closed set of recognized SVG attributes; each member knows its markup name."""

    canonical_name: str

    def __new__(cls, value: int, canonical_name: str) -> Attribute:
        member = int.__new__(cls, value)
        member._value_ = value
        member.canonical_name = canonical_name
        return member

{members}
'''

_HEADER_TEMPLATE = """/* Generated by `python -m svgattrs.codegen generate` from
 * svgattrs/attributes/vocabulary.py. Do not edit by hand.
 */

#ifndef SVGATTRS_ATTRIBUTES_H
#define SVGATTRS_ATTRIBUTES_H

#include <glib.h>

typedef enum {{
{members}
}} SvgattrsAttribute;

#define SVGATTRS_ATTRIBUTE_COUNT {count}

G_GNUC_INTERNAL
gboolean svgattrs_attribute_from_name (const char *name, SvgattrsAttribute *out_attr);

#endif /* SVGATTRS_ATTRIBUTES_H */
"""


class SurfaceEntry(NamedTuple):
    identifier: str
    value: int
    name: str


@dataclass(frozen=True)
class Divergence:
    """One row where a surface disagrees with the vocabulary."""

    surface: str
    index: int
    expected: SurfaceEntry | None
    actual: SurfaceEntry | None

    def __str__(self) -> str:
        return f"{self.surface}[{self.index}]: expected {self.expected}, found {self.actual}"


def derive_identifier(name: str) -> str:
    """Identifier spelling for a canonical name: ``stroke-width`` → ``STROKE_WIDTH``."""
    snake = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", name)
    return snake.replace("-", "_").replace(":", "_").upper()


def vocabulary_entries(
    vocabulary: tuple[tuple[str, str], ...] = VOCABULARY,
) -> list[SurfaceEntry]:
    return [SurfaceEntry(ident, i, name) for i, (ident, name) in enumerate(vocabulary)]


def validate_vocabulary(vocabulary: tuple[tuple[str, str], ...] = VOCABULARY) -> list[str]:
    """Problems with the canonical list itself: duplicates and off-convention identifiers."""
    problems: list[str] = []
    seen_idents: set[str] = set()
    seen_names: set[str] = set()
    for ident, name in vocabulary:
        if ident in seen_idents:
            problems.append(f"duplicate identifier {ident}")
        if name in seen_names:
            problems.append(f"duplicate canonical name {name!r}")
        if derive_identifier(name) != ident:
            problems.append(f"identifier {ident} does not match name {name!r} (expected {derive_identifier(name)})")
        seen_idents.add(ident)
        seen_names.add(name)
    return problems


# ── Rendering ──────────────────────────────────────────────────────────────


def render_enum_module(vocabulary: tuple[tuple[str, str], ...] = VOCABULARY) -> str:
    members = "\n".join(
        f'    {entry.identifier} = {entry.value}, "{entry.name}"' for entry in vocabulary_entries(vocabulary)
    )
    return _ENUM_TEMPLATE.format(members=members)


def render_c_header(vocabulary: tuple[tuple[str, str], ...] = VOCABULARY) -> str:
    members = "\n".join(
        f'    {C_PREFIX}{entry.identifier} = {entry.value}, /* "{entry.name}" */'
        for entry in vocabulary_entries(vocabulary)
    )
    return _HEADER_TEMPLATE.format(members=members, count=len(vocabulary))


def generate(
    enum_path: Path = DEFAULT_ENUM_PATH,
    header_path: Path = DEFAULT_HEADER_PATH,
    vocabulary: tuple[tuple[str, str], ...] = VOCABULARY,
) -> None:
    problems = validate_vocabulary(vocabulary)
    if problems:
        raise ValueError("Invalid vocabulary: " + "; ".join(problems))

    for path, text in ((enum_path, render_enum_module(vocabulary)), (header_path, render_c_header(vocabulary))):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s (%d attributes)", path, len(vocabulary))


# ── Parsing surfaces back ──────────────────────────────────────────────────


def parse_c_header(text: str) -> list[SurfaceEntry]:
    return [SurfaceEntry(m.group(1), int(m.group(2)), m.group(3)) for m in _HEADER_ENTRY_RE.finditer(text)]


def enum_entries(enum_cls=None) -> list[SurfaceEntry]:
    if enum_cls is None:
        from svgattrs.attributes.ids import Attribute

        enum_cls = Attribute
    return [SurfaceEntry(member.name, int(member), member.canonical_name) for member in enum_cls]


def compare_surfaces(
    surface: str,
    actual: list[SurfaceEntry],
    expected: list[SurfaceEntry] | None = None,
) -> list[Divergence]:
    if expected is None:
        expected = vocabulary_entries()
    return [
        Divergence(surface, i, exp, act)
        for i, (exp, act) in enumerate(zip_longest(expected, actual))
        if exp != act
    ]


def check_surfaces(header_path: Path = DEFAULT_HEADER_PATH, enum_cls=None) -> list[Divergence]:
    """Compare every materialized surface against the vocabulary."""
    divergences = compare_surfaces("Attribute", enum_entries(enum_cls))
    if header_path.exists():
        divergences.extend(compare_surfaces(header_path.name, parse_c_header(header_path.read_text(encoding="utf-8"))))
    else:
        logger.error("Header %s not found; run `python -m svgattrs.codegen generate`", header_path)
        divergences.append(Divergence(header_path.name, 0, vocabulary_entries()[0], None))
    return divergences


# ── CLI ────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate and check attribute identifier surfaces (run from a source checkout)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Render every surface from the vocabulary")
    gen.add_argument("--output-dir", type=Path, help=f"Write {ENUM_FILENAME} and {HEADER_FILENAME} under DIR")
    gen.add_argument("--enum-out", type=Path, default=DEFAULT_ENUM_PATH, help="Python enum module path")
    gen.add_argument("--header-out", type=Path, default=DEFAULT_HEADER_PATH, help="C header path")

    chk = sub.add_parser("check", help="Fail if any surface diverges from the vocabulary")
    chk.add_argument("--header", type=Path, default=DEFAULT_HEADER_PATH, help="C header path")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "generate":
        if args.output_dir is not None:
            generate(args.output_dir / ENUM_FILENAME, args.output_dir / HEADER_FILENAME)
        else:
            generate(args.enum_out, args.header_out)
        return 0

    if not args.header.exists():
        # The header ships with the source tree, not with installed wheels.
        logger.error(
            "Header %s not found; run check from a source checkout or pass --header PATH",
            args.header,
        )
        return 2

    problems = validate_vocabulary()
    for problem in problems:
        logger.error("Vocabulary: %s", problem)
    divergences = check_surfaces(args.header)
    for divergence in divergences:
        logger.error("%s", divergence)
    if problems or divergences:
        return 1
    logger.info("All surfaces agree (%d attributes)", len(VOCABULARY))
    return 0


if __name__ == "__main__":
    sys.exit(main())
