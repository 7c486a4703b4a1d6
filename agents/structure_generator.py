"""Structure generator — lays out the full component tree and placeholder assets."""

import logging

from agents.base import BaseStage
from agents.content_renderer import build_content, render_about, render_hero, render_services, render_stylesheet
from config.business import COLOR_SCHEMES
from utils.template_engine import html_text, jsx_text, render_template

log = logging.getLogger(__name__)

DEFAULT_TAGLINE = (
    "Building exceptional digital experiences that drive results and engage your audience."
)
CONTACT_LINE = (
    "Ready to get started? We'd love to hear from you. "
    "Send us a message and we'll respond as soon as possible."
)

# (file name, label, color, width, height)
PLACEHOLDER_IMAGES = [
    ("hero-bg.svg", "hero-background", "#f3f4f6", 1200, 600),
    ("service-1.svg", "service-icon", "#3b82f6", 100, 100),
    ("service-2.svg", "service-icon", "#10b981", 100, 100),
    ("service-3.svg", "service-icon", "#f59e0b", 100, 100),
    ("about-image.svg", "about-image", "#6366f1", 400, 300),
]


def placeholder_svg(label, color, width, height):
    return render_template("site", "placeholder.svg.tpl", {
        "width": width,
        "height": height,
        "color": color,
        "x": f"{width / 4:g}",
        "y": f"{height / 4:g}",
        "inner_width": f"{width / 2:g}",
        "inner_height": f"{height / 2:g}",
        "cx": f"{width / 2:g}",
        "cy": f"{height / 2:g}",
        "font_size": f"{min(width, height) / 10:g}",
        "label": html_text(label.replace("-", " ", 1).upper()),
    })


def logo_svg(project_name, color):
    initial = project_name[:1].upper() or "W"
    return render_template("site", "logo.svg.tpl", {
        "color": color,
        "initial": html_text(initial),
    })


def structure_files(state, analysis=None):
    """(path, content) pairs for the complete site layout."""
    name = jsx_text(state.project_name)
    content = build_content(state.business_type, analysis)
    palette = COLOR_SCHEMES.get(state.color_scheme, COLOR_SCHEMES["blue"])
    tagline = state.extracted_info.purpose or DEFAULT_TAGLINE

    files = [
        ("src/App.tsx", render_template("site", "App.tsx.tpl", {})),
        ("src/App.css", render_stylesheet(state.color_scheme)),
        ("src/index.css", render_template("site", "index.css.tpl", {})),
        ("src/components/Header.tsx", render_template("site", "Header.tsx.tpl", {"name": name})),
        ("src/components/Hero.tsx", render_hero(content)),
        ("src/components/About.tsx", render_about(content)),
        ("src/components/Services.tsx", render_services(content)),
        ("src/components/Contact.tsx", render_template("site", "Contact.tsx.tpl", {
            "audience_line": jsx_text(CONTACT_LINE),
        })),
        ("src/components/Footer.tsx", render_template("site", "Footer.tsx.tpl", {
            "name": name,
            "tagline": jsx_text(tagline),
        })),
        ("public/images/logo.svg", logo_svg(state.project_name, palette["primary"])),
    ]
    for filename, label, color, width, height in PLACEHOLDER_IMAGES:
        files.append((f"public/images/{filename}", placeholder_svg(label, color, width, height)))
    return files


class StructureGenerator(BaseStage):
    """Per-file failures are recorded and skipped; the stage still completes."""

    name = "generate-structure"
    description = "Generate the site layout, components and placeholder images"

    def run(self, state):
        state.require("success", "repository_created", "framework_initialized", stage=self.name,
                      message="Framework initialization failed, cannot generate website")
        self.require_identity(state)

        log.info("Generating website structure for: %s", state.project_name)
        fallback = (
            f"Fallback analysis for {state.project_name} "
            f"({state.business_type}, {state.style} style, {state.color_scheme} palette)"
        )
        analysis, used_model = self.analyze(
            "structure_analysis.txt", state.requirements, fallback,
        )
        if used_model:
            log.info("Model analysis completed for website structure")

        result = self.write(state, structure_files(state, analysis if used_model else None))
        for path in result.written:
            if "components/" in path and path not in state.components_created:
                state.components_created.append(path)

        state.mark("website_generated")
        return state
