"""Attribute identifiers.

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

    ALTERNATE = 0, "alternate"
    AMPLITUDE = 1, "amplitude"
    AZIMUTH = 2, "azimuth"
    BASE_FREQUENCY = 3, "baseFrequency"
    BASELINE_SHIFT = 4, "baseline-shift"
    BIAS = 5, "bias"
    CLASS = 6, "class"
    CLIP_PATH = 7, "clip-path"
    CLIP_RULE = 8, "clip-rule"
    CLIP_PATH_UNITS = 9, "clipPathUnits"
    COLOR = 10, "color"
    COMP_OP = 11, "comp-op"
    CX = 12, "cx"
    CY = 13, "cy"
    D = 14, "d"
    DIFFUSE_CONSTANT = 15, "diffuseConstant"
    DIRECTION = 16, "direction"
    DISPLAY = 17, "display"
    DIVISOR = 18, "divisor"
    DX = 19, "dx"
    DY = 20, "dy"
    EDGE_MODE = 21, "edgeMode"
    ELEVATION = 22, "elevation"
    ENABLE_BACKGROUND = 23, "enable-background"
    ENCODING = 24, "encoding"
    EXPONENT = 25, "exponent"
    FILL = 26, "fill"
    FILL_OPACITY = 27, "fill-opacity"
    FILL_RULE = 28, "fill-rule"
    FILTER = 29, "filter"
    FILTER_UNITS = 30, "filterUnits"
    FLOOD_COLOR = 31, "flood-color"
    FLOOD_OPACITY = 32, "flood-opacity"
    FONT_FAMILY = 33, "font-family"
    FONT_SIZE = 34, "font-size"
    FONT_STRETCH = 35, "font-stretch"
    FONT_STYLE = 36, "font-style"
    FONT_VARIANT = 37, "font-variant"
    FONT_WEIGHT = 38, "font-weight"
    FX = 39, "fx"
    FY = 40, "fy"
    GRADIENT_TRANSFORM = 41, "gradientTransform"
    GRADIENT_UNITS = 42, "gradientUnits"
    HEIGHT = 43, "height"
    HREF = 44, "href"
    ID = 45, "id"
    IN = 46, "in"
    IN2 = 47, "in2"
    INTERCEPT = 48, "intercept"
    K1 = 49, "k1"
    K2 = 50, "k2"
    K3 = 51, "k3"
    K4 = 52, "k4"
    KERNEL_MATRIX = 53, "kernelMatrix"
    KERNEL_UNIT_LENGTH = 54, "kernelUnitLength"
    LETTER_SPACING = 55, "letter-spacing"
    LIGHTING_COLOR = 56, "lighting-color"
    LIMITING_CONE_ANGLE = 57, "limitingConeAngle"
    MARKER = 58, "marker"
    MARKER_END = 59, "marker-end"
    MARKER_MID = 60, "marker-mid"
    MARKER_START = 61, "marker-start"
    MARKER_HEIGHT = 62, "markerHeight"
    MARKER_UNITS = 63, "markerUnits"
    MARKER_WIDTH = 64, "markerWidth"
    MASK = 65, "mask"
    MASK_CONTENT_UNITS = 66, "maskContentUnits"
    MASK_UNITS = 67, "maskUnits"
    MODE = 68, "mode"
    NUM_OCTAVES = 69, "numOctaves"
    OFFSET = 70, "offset"
    OPACITY = 71, "opacity"
    OPERATOR = 72, "operator"
    ORDER = 73, "order"
    ORIENT = 74, "orient"
    OVERFLOW = 75, "overflow"
    PARSE = 76, "parse"
    PATH = 77, "path"
    PATTERN_CONTENT_UNITS = 78, "patternContentUnits"
    PATTERN_TRANSFORM = 79, "patternTransform"
    PATTERN_UNITS = 80, "patternUnits"
    POINTS = 81, "points"
    POINTS_AT_X = 82, "pointsAtX"
    POINTS_AT_Y = 83, "pointsAtY"
    POINTS_AT_Z = 84, "pointsAtZ"
    PRESERVE_ALPHA = 85, "preserveAlpha"
    PRESERVE_ASPECT_RATIO = 86, "preserveAspectRatio"
    PRIMITIVE_UNITS = 87, "primitiveUnits"
    R = 88, "r"
    RADIUS = 89, "radius"
    REF_X = 90, "refX"
    REF_Y = 91, "refY"
    REQUIRED_EXTENSIONS = 92, "requiredExtensions"
    REQUIRED_FEATURES = 93, "requiredFeatures"
    RESULT = 94, "result"
    RX = 95, "rx"
    RY = 96, "ry"
    SCALE = 97, "scale"
    SEED = 98, "seed"
    SHAPE_RENDERING = 99, "shape-rendering"
    SLOPE = 100, "slope"
    SPECULAR_CONSTANT = 101, "specularConstant"
    SPECULAR_EXPONENT = 102, "specularExponent"
    SPREAD_METHOD = 103, "spreadMethod"
    STD_DEVIATION = 104, "stdDeviation"
    STITCH_TILES = 105, "stitchTiles"
    STOP_COLOR = 106, "stop-color"
    STOP_OPACITY = 107, "stop-opacity"
    STROKE = 108, "stroke"
    STROKE_DASHARRAY = 109, "stroke-dasharray"
    STROKE_DASHOFFSET = 110, "stroke-dashoffset"
    STROKE_LINECAP = 111, "stroke-linecap"
    STROKE_LINEJOIN = 112, "stroke-linejoin"
    STROKE_MITERLIMIT = 113, "stroke-miterlimit"
    STROKE_OPACITY = 114, "stroke-opacity"
    STROKE_WIDTH = 115, "stroke-width"
    STYLE = 116, "style"
    SURFACE_SCALE = 117, "surfaceScale"
    SYSTEM_LANGUAGE = 118, "systemLanguage"
    TABLE_VALUES = 119, "tableValues"
    TARGET_X = 120, "targetX"
    TARGET_Y = 121, "targetY"
    TEXT_ANCHOR = 122, "text-anchor"
    TEXT_DECORATION = 123, "text-decoration"
    TEXT_RENDERING = 124, "text-rendering"
    TRANSFORM = 125, "transform"
    TYPE = 126, "type"
    UNICODE_BIDI = 127, "unicode-bidi"
    VALUES = 128, "values"
    VERTS = 129, "verts"
    VIEW_BOX = 130, "viewBox"
    VISIBILITY = 131, "visibility"
    WIDTH = 132, "width"
    WRITING_MODE = 133, "writing-mode"
    X = 134, "x"
    X1 = 135, "x1"
    Y1 = 136, "y1"
    X2 = 137, "x2"
    Y2 = 138, "y2"
    X_CHANNEL_SELECTOR = 139, "xChannelSelector"
    XLINK_HREF = 140, "xlink:href"
    XML_LANG = 141, "xml:lang"
    XML_SPACE = 142, "xml:space"
    Y = 143, "y"
    Y_CHANNEL_SELECTOR = 144, "yChannelSelector"
    Z = 145, "z"
