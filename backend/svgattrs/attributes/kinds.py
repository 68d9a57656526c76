"""Classification of every attribute identifier.

Each kind lists its members explicitly; there is no fallback kind. Adding an
identifier to the vocabulary without placing it here fails at import.
"""

from __future__ import annotations

import enum

from svgattrs.attributes.ids import Attribute


class AttributeKind(enum.IntEnum):
    CORE = 0
    CONDITIONAL = 1
    LINK = 2
    PRESENTATION = 3
    ELEMENT = 4


_CORE = frozenset({
    Attribute.CLASS,
    Attribute.ID,
    Attribute.STYLE,
    Attribute.XML_LANG,
    Attribute.XML_SPACE,
})

# Conditional processing (<switch>)
_CONDITIONAL = frozenset({
    Attribute.REQUIRED_EXTENSIONS,
    Attribute.REQUIRED_FEATURES,
    Attribute.SYSTEM_LANGUAGE,
})

_LINK = frozenset({
    Attribute.HREF,
    Attribute.XLINK_HREF,
})

# Presentation attributes: same name and grammar as a CSS property, may also
# appear inside ``style``.
_PRESENTATION = frozenset({
    Attribute.BASELINE_SHIFT,
    Attribute.CLIP_PATH,
    Attribute.CLIP_RULE,
    Attribute.COLOR,
    Attribute.COMP_OP,
    Attribute.DIRECTION,
    Attribute.DISPLAY,
    Attribute.ENABLE_BACKGROUND,
    Attribute.FILL,
    Attribute.FILL_OPACITY,
    Attribute.FILL_RULE,
    Attribute.FILTER,
    Attribute.FLOOD_COLOR,
    Attribute.FLOOD_OPACITY,
    Attribute.FONT_FAMILY,
    Attribute.FONT_SIZE,
    Attribute.FONT_STRETCH,
    Attribute.FONT_STYLE,
    Attribute.FONT_VARIANT,
    Attribute.FONT_WEIGHT,
    Attribute.LETTER_SPACING,
    Attribute.LIGHTING_COLOR,
    Attribute.MARKER,
    Attribute.MARKER_END,
    Attribute.MARKER_MID,
    Attribute.MARKER_START,
    Attribute.MASK,
    Attribute.OPACITY,
    Attribute.OVERFLOW,
    Attribute.SHAPE_RENDERING,
    Attribute.STOP_COLOR,
    Attribute.STOP_OPACITY,
    Attribute.STROKE,
    Attribute.STROKE_DASHARRAY,
    Attribute.STROKE_DASHOFFSET,
    Attribute.STROKE_LINECAP,
    Attribute.STROKE_LINEJOIN,
    Attribute.STROKE_MITERLIMIT,
    Attribute.STROKE_OPACITY,
    Attribute.STROKE_WIDTH,
    Attribute.TEXT_ANCHOR,
    Attribute.TEXT_DECORATION,
    Attribute.TEXT_RENDERING,
    Attribute.UNICODE_BIDI,
    Attribute.VISIBILITY,
    Attribute.WRITING_MODE,
})

# Element-specific: geometry, units, gradients, patterns, markers, filters, text.
_ELEMENT = frozenset({
    Attribute.ALTERNATE,
    Attribute.AMPLITUDE,
    Attribute.AZIMUTH,
    Attribute.BASE_FREQUENCY,
    Attribute.BIAS,
    Attribute.CLIP_PATH_UNITS,
    Attribute.CX,
    Attribute.CY,
    Attribute.D,
    Attribute.DIFFUSE_CONSTANT,
    Attribute.DIVISOR,
    Attribute.DX,
    Attribute.DY,
    Attribute.EDGE_MODE,
    Attribute.ELEVATION,
    Attribute.ENCODING,
    Attribute.EXPONENT,
    Attribute.FILTER_UNITS,
    Attribute.FX,
    Attribute.FY,
    Attribute.GRADIENT_TRANSFORM,
    Attribute.GRADIENT_UNITS,
    Attribute.HEIGHT,
    Attribute.IN,
    Attribute.IN2,
    Attribute.INTERCEPT,
    Attribute.K1,
    Attribute.K2,
    Attribute.K3,
    Attribute.K4,
    Attribute.KERNEL_MATRIX,
    Attribute.KERNEL_UNIT_LENGTH,
    Attribute.LIMITING_CONE_ANGLE,
    Attribute.MARKER_HEIGHT,
    Attribute.MARKER_UNITS,
    Attribute.MARKER_WIDTH,
    Attribute.MASK_CONTENT_UNITS,
    Attribute.MASK_UNITS,
    Attribute.MODE,
    Attribute.NUM_OCTAVES,
    Attribute.OFFSET,
    Attribute.OPERATOR,
    Attribute.ORDER,
    Attribute.ORIENT,
    Attribute.PARSE,
    Attribute.PATH,
    Attribute.PATTERN_CONTENT_UNITS,
    Attribute.PATTERN_TRANSFORM,
    Attribute.PATTERN_UNITS,
    Attribute.POINTS,
    Attribute.POINTS_AT_X,
    Attribute.POINTS_AT_Y,
    Attribute.POINTS_AT_Z,
    Attribute.PRESERVE_ALPHA,
    Attribute.PRESERVE_ASPECT_RATIO,
    Attribute.PRIMITIVE_UNITS,
    Attribute.R,
    Attribute.RADIUS,
    Attribute.REF_X,
    Attribute.REF_Y,
    Attribute.RESULT,
    Attribute.RX,
    Attribute.RY,
    Attribute.SCALE,
    Attribute.SEED,
    Attribute.SLOPE,
    Attribute.SPECULAR_CONSTANT,
    Attribute.SPECULAR_EXPONENT,
    Attribute.SPREAD_METHOD,
    Attribute.STD_DEVIATION,
    Attribute.STITCH_TILES,
    Attribute.SURFACE_SCALE,
    Attribute.TABLE_VALUES,
    Attribute.TARGET_X,
    Attribute.TARGET_Y,
    Attribute.TRANSFORM,
    Attribute.TYPE,
    Attribute.VALUES,
    Attribute.VERTS,
    Attribute.VIEW_BOX,
    Attribute.WIDTH,
    Attribute.X,
    Attribute.X1,
    Attribute.X2,
    Attribute.X_CHANNEL_SELECTOR,
    Attribute.Y,
    Attribute.Y1,
    Attribute.Y2,
    Attribute.Y_CHANNEL_SELECTOR,
    Attribute.Z,
})

MEMBERS_BY_KIND: dict[AttributeKind, frozenset[Attribute]] = {
    AttributeKind.CORE: _CORE,
    AttributeKind.CONDITIONAL: _CONDITIONAL,
    AttributeKind.LINK: _LINK,
    AttributeKind.PRESENTATION: _PRESENTATION,
    AttributeKind.ELEMENT: _ELEMENT,
}


def _build_kind_index(members_by_kind: dict[AttributeKind, frozenset[Attribute]]) -> dict[Attribute, AttributeKind]:
    index: dict[Attribute, AttributeKind] = {}
    for kind, members in members_by_kind.items():
        for attr in members:
            if attr in index:
                raise ValueError(f"{attr.name} classified as both {index[attr].name} and {kind.name}")
            index[attr] = kind
    missing = [attr.name for attr in Attribute if attr not in index]
    if missing:
        raise ValueError(f"Attributes without a kind: {', '.join(missing)}")
    return index


_KIND_BY_ATTRIBUTE = _build_kind_index(MEMBERS_BY_KIND)


def attribute_kind(attr: Attribute) -> AttributeKind:
    return _KIND_BY_ATTRIBUTE[attr]


def is_presentation(attr: Attribute) -> bool:
    return _KIND_BY_ATTRIBUTE[attr] is AttributeKind.PRESENTATION
