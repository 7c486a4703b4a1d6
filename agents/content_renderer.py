"""Business-specific site copy and the component/stylesheet renderers that use it.

No network calls. Copy comes from the category tables in config.business,
optionally refined by a model analysis text; every piece of it is escaped
for the file it lands in.
"""

import json
import re
from dataclasses import dataclass, field

from config.business import COLOR_SCHEMES, DEFAULT_SERVICES, SERVICES
from manager.classifier import infer_industry
from utils.template_engine import jsx_text, render_template

DEFAULT_HERO_TITLE = "Welcome to Our Business"
DEFAULT_HERO_DESCRIPTION = "We provide exceptional solutions for your needs."
DEFAULT_ABOUT = "We are committed to excellence and customer satisfaction."
DEFAULT_CALL_TO_ACTION = "Get Started Today"

_LOOKAHEAD = 5
_MIN_SECTION_LENGTH = 20
_MAX_HEADING_WORDS = 6

# Keywords that introduce each section in a model analysis, and the
# length copy must exceed to be used for it
_SECTIONS = {
    "hero_title": (("headline", "hero title"), 0),
    "hero_description": (("hero description", "subtitle", "tagline"), _MIN_SECTION_LENGTH),
    "about_content": (("about",), _MIN_SECTION_LENGTH),
    "call_to_action": (("call to action", "cta"), 0),
}


@dataclass
class SiteContent:
    business_type: str = "general"
    hero_title: str = DEFAULT_HERO_TITLE
    hero_description: str = DEFAULT_HERO_DESCRIPTION
    about_content: str = DEFAULT_ABOUT
    services: list[dict] = field(default_factory=list)
    call_to_action: str = DEFAULT_CALL_TO_ACTION
    industry: str = ""

    def __post_init__(self):
        if not self.services:
            self.services = services_for(self.business_type)
        if not self.industry:
            self.industry = infer_industry(self.business_type)


def services_for(business_type):
    """Three {title, description} service cards for the category."""
    return [dict(s) for s in SERVICES.get(business_type, DEFAULT_SERVICES)]


def _clean(line):
    return line.strip().lstrip("-*#> ").strip()


def _heading(line, pattern):
    """(is_heading, inline value) for one analysis line."""
    label, sep, rest = _clean(line).partition(":")
    if not pattern.search(label):
        return False, ""
    if not sep and len(label.split()) > _MAX_HEADING_WORDS:
        return False, ""
    return True, rest.strip()


def extract_section(text, keywords, min_length=_MIN_SECTION_LENGTH):
    """Copy introduced by a heading that names one of the keywords.

    A heading is a short line, or the label before a colon, containing a
    keyword as a whole word. The copy is the text after the colon, or else
    the next non-blank line; a line with a colon there is the next heading
    and ends the section. Copy must be longer than min_length. Returns None
    if nothing fits.
    """
    pattern = re.compile(
        r"\b(?:" + "|".join(re.escape(kw) for kw in keywords) + r")\b", re.IGNORECASE,
    )
    lines = (text or "").splitlines()
    for i, line in enumerate(lines):
        is_heading, inline = _heading(line, pattern)
        if not is_heading:
            continue
        if inline:
            if len(inline) > min_length:
                return inline
            continue
        for candidate in lines[i + 1:i + _LOOKAHEAD]:
            candidate = _clean(candidate)
            if not candidate:
                continue
            if ":" not in candidate and len(candidate) > min_length:
                return candidate
            break
    return None


def build_content(business_type, analysis=None):
    """SiteContent for the category, with sections refined from analysis text."""
    content = SiteContent(business_type=business_type)
    if analysis:
        for attr, (keywords, min_length) in _SECTIONS.items():
            found = extract_section(analysis, keywords, min_length)
            if found:
                setattr(content, attr, found)
    return content


def render_hero(content):
    return render_template("site", "Hero.tsx.tpl", {
        "hero_title": jsx_text(content.hero_title),
        "hero_description": jsx_text(content.hero_description),
        "call_to_action": jsx_text(content.call_to_action),
    })


def render_about(content):
    title = "About Us" if content.business_type == "general" else f"About {content.industry}"
    return render_template("site", "About.tsx.tpl", {
        "about_title": jsx_text(title),
        "about_content": jsx_text(content.about_content),
    })


def render_services(content):
    cards = [
        {"title": str(s.get("title", "")), "description": str(s.get("description", ""))}
        for s in content.services
    ]
    subtitle = (
        f"Comprehensive {content.industry.lower()} solutions designed to meet "
        "your specific needs and drive exceptional results."
    )
    return render_template("site", "Services.tsx.tpl", {
        "services_json": json.dumps(cards, indent=2),
        "services_subtitle": jsx_text(subtitle),
    })


def render_stylesheet(color_scheme="blue"):
    colors = COLOR_SCHEMES.get(color_scheme, COLOR_SCHEMES["blue"])
    return render_template("site", "App.css.tpl", colors)


def render_components(content, color_scheme="blue"):
    """(path, content) pairs for the content-driven files."""
    return [
        ("src/components/Hero.tsx", render_hero(content)),
        ("src/components/About.tsx", render_about(content)),
        ("src/components/Services.tsx", render_services(content)),
        ("src/App.css", render_stylesheet(color_scheme)),
    ]
