"""Canonical attribute vocabulary — the one list every surface is derived from.

Each entry is ``(identifier, canonical_name)``. An identifier's numeric value is
its position in ``VOCABULARY``, so entries are only ever appended or reordered
together with a regeneration of the derived surfaces:

    python -m svgattrs.codegen generate

Canonical names are the exact markup spellings, case-sensitive, including the
``xlink:`` and ``xml:`` prefixed names.
"""

from __future__ import annotations

VOCABULARY: tuple[tuple[str, str], ...] = (
    ("ALTERNATE", "alternate"),
    ("AMPLITUDE", "amplitude"),
    ("AZIMUTH", "azimuth"),
    ("BASE_FREQUENCY", "baseFrequency"),
    ("BASELINE_SHIFT", "baseline-shift"),
    ("BIAS", "bias"),
    ("CLASS", "class"),
    ("CLIP_PATH", "clip-path"),
    ("CLIP_RULE", "clip-rule"),
    ("CLIP_PATH_UNITS", "clipPathUnits"),
    ("COLOR", "color"),
    ("COMP_OP", "comp-op"),
    ("CX", "cx"),
    ("CY", "cy"),
    ("D", "d"),
    ("DIFFUSE_CONSTANT", "diffuseConstant"),
    ("DIRECTION", "direction"),
    ("DISPLAY", "display"),
    ("DIVISOR", "divisor"),
    ("DX", "dx"),
    ("DY", "dy"),
    ("EDGE_MODE", "edgeMode"),
    ("ELEVATION", "elevation"),
    ("ENABLE_BACKGROUND", "enable-background"),
    ("ENCODING", "encoding"),
    ("EXPONENT", "exponent"),
    ("FILL", "fill"),
    ("FILL_OPACITY", "fill-opacity"),
    ("FILL_RULE", "fill-rule"),
    ("FILTER", "filter"),
    ("FILTER_UNITS", "filterUnits"),
    ("FLOOD_COLOR", "flood-color"),
    ("FLOOD_OPACITY", "flood-opacity"),
    ("FONT_FAMILY", "font-family"),
    ("FONT_SIZE", "font-size"),
    ("FONT_STRETCH", "font-stretch"),
    ("FONT_STYLE", "font-style"),
    ("FONT_VARIANT", "font-variant"),
    ("FONT_WEIGHT", "font-weight"),
    ("FX", "fx"),
    ("FY", "fy"),
    ("GRADIENT_TRANSFORM", "gradientTransform"),
    ("GRADIENT_UNITS", "gradientUnits"),
    ("HEIGHT", "height"),
    ("HREF", "href"),
    ("ID", "id"),
    ("IN", "in"),
    ("IN2", "in2"),
    ("INTERCEPT", "intercept"),
    ("K1", "k1"),
    ("K2", "k2"),
    ("K3", "k3"),
    ("K4", "k4"),
    ("KERNEL_MATRIX", "kernelMatrix"),
    ("KERNEL_UNIT_LENGTH", "kernelUnitLength"),
    ("LETTER_SPACING", "letter-spacing"),
    ("LIGHTING_COLOR", "lighting-color"),
    ("LIMITING_CONE_ANGLE", "limitingConeAngle"),
    ("MARKER", "marker"),
    ("MARKER_END", "marker-end"),
    ("MARKER_MID", "marker-mid"),
    ("MARKER_START", "marker-start"),
    ("MARKER_HEIGHT", "markerHeight"),
    ("MARKER_UNITS", "markerUnits"),
    ("MARKER_WIDTH", "markerWidth"),
    ("MASK", "mask"),
    ("MASK_CONTENT_UNITS", "maskContentUnits"),
    ("MASK_UNITS", "maskUnits"),
    ("MODE", "mode"),
    ("NUM_OCTAVES", "numOctaves"),
    ("OFFSET", "offset"),
    ("OPACITY", "opacity"),
    ("OPERATOR", "operator"),
    ("ORDER", "order"),
    ("ORIENT", "orient"),
    ("OVERFLOW", "overflow"),
    ("PARSE", "parse"),
    ("PATH", "path"),
    ("PATTERN_CONTENT_UNITS", "patternContentUnits"),
    ("PATTERN_TRANSFORM", "patternTransform"),
    ("PATTERN_UNITS", "patternUnits"),
    ("POINTS", "points"),
    ("POINTS_AT_X", "pointsAtX"),
    ("POINTS_AT_Y", "pointsAtY"),
    ("POINTS_AT_Z", "pointsAtZ"),
    ("PRESERVE_ALPHA", "preserveAlpha"),
    ("PRESERVE_ASPECT_RATIO", "preserveAspectRatio"),
    ("PRIMITIVE_UNITS", "primitiveUnits"),
    ("R", "r"),
    ("RADIUS", "radius"),
    ("REF_X", "refX"),
    ("REF_Y", "refY"),
    ("REQUIRED_EXTENSIONS", "requiredExtensions"),
    ("REQUIRED_FEATURES", "requiredFeatures"),
    ("RESULT", "result"),
    ("RX", "rx"),
    ("RY", "ry"),
    ("SCALE", "scale"),
    ("SEED", "seed"),
    ("SHAPE_RENDERING", "shape-rendering"),
    ("SLOPE", "slope"),
    ("SPECULAR_CONSTANT", "specularConstant"),
    ("SPECULAR_EXPONENT", "specularExponent"),
    ("SPREAD_METHOD", "spreadMethod"),
    ("STD_DEVIATION", "stdDeviation"),
    ("STITCH_TILES", "stitchTiles"),
    ("STOP_COLOR", "stop-color"),
    ("STOP_OPACITY", "stop-opacity"),
    ("STROKE", "stroke"),
    ("STROKE_DASHARRAY", "stroke-dasharray"),
    ("STROKE_DASHOFFSET", "stroke-dashoffset"),
    ("STROKE_LINECAP", "stroke-linecap"),
    ("STROKE_LINEJOIN", "stroke-linejoin"),
    ("STROKE_MITERLIMIT", "stroke-miterlimit"),
    ("STROKE_OPACITY", "stroke-opacity"),
    ("STROKE_WIDTH", "stroke-width"),
    ("STYLE", "style"),
    ("SURFACE_SCALE", "surfaceScale"),
    ("SYSTEM_LANGUAGE", "systemLanguage"),
    ("TABLE_VALUES", "tableValues"),
    ("TARGET_X", "targetX"),
    ("TARGET_Y", "targetY"),
    ("TEXT_ANCHOR", "text-anchor"),
    ("TEXT_DECORATION", "text-decoration"),
    ("TEXT_RENDERING", "text-rendering"),
    ("TRANSFORM", "transform"),
    ("TYPE", "type"),
    ("UNICODE_BIDI", "unicode-bidi"),
    ("VALUES", "values"),
    ("VERTS", "verts"),
    ("VIEW_BOX", "viewBox"),
    ("VISIBILITY", "visibility"),
    ("WIDTH", "width"),
    ("WRITING_MODE", "writing-mode"),
    ("X", "x"),
    ("X1", "x1"),
    ("Y1", "y1"),
    ("X2", "x2"),
    ("Y2", "y2"),
    ("X_CHANNEL_SELECTOR", "xChannelSelector"),
    ("XLINK_HREF", "xlink:href"),
    ("XML_LANG", "xml:lang"),
    ("XML_SPACE", "xml:space"),
    ("Y", "y"),
    ("Y_CHANNEL_SELECTOR", "yChannelSelector"),
    ("Z", "z"),
)


def canonical_names() -> list[str]:
    """Canonical names in identifier order."""
    return [name for _, name in VOCABULARY]
