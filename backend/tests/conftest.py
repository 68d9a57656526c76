"""Shared test fixtures."""

from __future__ import annotations

import pytest


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

# Inkscape output: editor-only attributes, comments, an XML declaration
INKSCAPE_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Created with Inkscape (http://www.inkscape.org/) -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" width="100" height="100" inkscape:version="1.3">
  <g inkscape:label="Layer 1" inkscape:groupmode="layer" id="layer1">
    <!-- <rect x="0" y="0" width="5" height="5"/> -->
    <rect x="10" y="10" width="80" height="80" fill="#4ECDC4" data-name="box"/>
  </g>
</svg>'''

# SVG 1.1 and SVG 2 link spellings on the same document
LINKED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">
  <defs><circle id="dot" cx="5" cy="5" r="1"/></defs>
  <use xlink:href="#old" href="#dot"/>
  <use href='#dot' xlink:href='#old'/>
  <use xlink:href="#dot"/>
</svg>'''


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def bar_chart_svg() -> str:
    return BAR_CHART_SVG


@pytest.fixture
def inkscape_svg() -> str:
    return INKSCAPE_SVG


@pytest.fixture
def linked_svg() -> str:
    return LINKED_SVG
