"""Keyword classifier for business category and design hints."""

from config.business import (
    BUSINESS_KEYWORDS,
    COLOR_KEYWORDS,
    INDUSTRIES,
    STYLE_KEYWORDS,
)


def classify(text):
    """Return the business category for a requirements text.

    Categories are checked in a fixed order and the first one with a
    keyword contained in the lowercased text wins. Nothing matching
    (including empty text) gives 'general'.
    """
    lower = (text or "").lower()
    for category, keywords in BUSINESS_KEYWORDS:
        if any(kw in lower for kw in keywords):
            return category
    return "general"


def infer_industry(category):
    return INDUSTRIES.get(category, INDUSTRIES["general"])


def _first_match(text, table, default):
    lower = text.lower()
    for name, keywords in table:
        if any(kw in lower for kw in keywords):
            return name
    return default


def detect_color_scheme(line):
    return _first_match(line, COLOR_KEYWORDS, "blue")


def detect_style(line):
    return _first_match(line, STYLE_KEYWORDS, "modern")


def analyze_design(text):
    """Scan report lines for color scheme, visual style and feature mentions.

    Returns {"color_scheme", "style", "features"}; later matching lines
    override earlier ones for color and style.
    """
    design = {"color_scheme": "blue", "style": "modern", "features": []}
    for raw in (text or "").splitlines():
        line = raw.strip().lower()
        if "color" in line and ("scheme" in line or "palette" in line):
            design["color_scheme"] = detect_color_scheme(line)
        if "style" in line or "aesthetic" in line:
            design["style"] = detect_style(line)
        if "feature" in line or "functionality" in line:
            design["features"].append(raw.strip())
    return design
