"""Website finalizer — README, ignore file, robots, manifest and env example."""

import json
import logging

from agents.base import BaseStage
from config.business import COLOR_SCHEMES
from utils.template_engine import markdown_text, render_template

log = logging.getLogger(__name__)

_NOT_SPECIFIED = "Not specified"


def manifest_json(project_name, theme_color):
    return json.dumps({
        "name": project_name,
        "short_name": project_name,
        "description": f"{project_name} - Professional web services",
        "start_url": "/",
        "display": "standalone",
        "background_color": "#ffffff",
        "theme_color": theme_color,
        "icons": [
            {"src": "/images/logo.svg", "sizes": "any", "type": "image/svg+xml"},
        ],
    }, indent=2) + "\n"


def readme(state):
    info = state.extracted_info
    return render_template("site", "README.md.tpl", {
        "title": markdown_text(state.project_name),
        "summary": (
            f"A modern, responsive React website for a {state.industry.lower()} "
            "business, built with Vite and TypeScript."
        ),
        "industry": state.industry,
        "purpose": markdown_text(info.purpose or _NOT_SPECIFIED),
        "audience": markdown_text(info.target_audience or _NOT_SPECIFIED),
        "objectives": markdown_text(info.business_objectives or _NOT_SPECIFIED),
        "repository": state.repository_name,
    })


def final_files(state):
    palette = COLOR_SCHEMES.get(state.color_scheme, COLOR_SCHEMES["blue"])
    return [
        ("README.md", readme(state)),
        (".gitignore", render_template("site", "gitignore.tpl", {})),
        ("public/robots.txt", render_template("site", "robots.txt.tpl", {})),
        ("public/manifest.json", manifest_json(state.project_name, palette["primary"])),
        (".env.example", render_template("site", "env.example.tpl", {})),
    ]


class WebsiteFinalizer(BaseStage):
    name = "finalize-website"
    description = "Add README and deployment configuration files"

    def run(self, state):
        state.require("success", "repository_created", "framework_initialized",
                      "website_generated", "content_generated", "styling_completed",
                      stage=self.name,
                      message="Previous steps failed, cannot finalize website")
        self.require_identity(state)

        log.info("Finalizing website: %s", state.project_name)
        self.write(state, final_files(state), message="Add {path}")
        state.mark("deployment_ready")
        return state
