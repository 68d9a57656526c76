"""Tests for the attribute identifier set."""

from svgattrs.attributes.ids import Attribute
from svgattrs.attributes.vocabulary import VOCABULARY, canonical_names
from svgattrs.codegen import validate_vocabulary


def test_identifier_count():
    assert len(Attribute) == len(VOCABULARY) == 146


def test_values_follow_vocabulary_order():
    assert [int(attr) for attr in Attribute] == list(range(len(VOCABULARY)))
    for attr, (ident, name) in zip(Attribute, VOCABULARY):
        assert attr.name == ident
        assert attr.canonical_name == name


def test_canonical_names_unique():
    names = [attr.canonical_name for attr in Attribute]
    assert len(set(names)) == len(names)


def test_member_carries_markup_spelling():
    assert Attribute.STROKE_WIDTH.canonical_name == "stroke-width"
    assert Attribute.VIEW_BOX.canonical_name == "viewBox"
    assert Attribute.XLINK_HREF.canonical_name == "xlink:href"
    assert Attribute.XML_SPACE.canonical_name == "xml:space"
    assert Attribute.IN2.canonical_name == "in2"


def test_lookup_by_value():
    assert Attribute(0) is Attribute.ALTERNATE
    assert Attribute(len(Attribute) - 1) is Attribute.Z


def test_int_comparison():
    assert Attribute.WIDTH == int(Attribute.WIDTH)
    assert Attribute.WIDTH != Attribute.HEIGHT


def test_vocabulary_is_well_formed():
    assert validate_vocabulary() == []


def test_canonical_names_helper():
    assert canonical_names() == [attr.canonical_name for attr in Attribute]
