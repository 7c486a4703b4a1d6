"""Content generator — rewrites hero, about and services copy for the business type."""

import logging

from agents.base import BaseStage
from agents.content_renderer import build_content, render_components

log = logging.getLogger(__name__)


class ContentGenerator(BaseStage):
    name = "generate-content"
    description = "Customize section copy and styling for the business type"

    def run(self, state):
        state.require("success", "repository_created", "framework_initialized", "website_generated",
                      stage=self.name,
                      message="Website generation failed, cannot generate content")
        self.require_identity(state)

        log.info("Generating custom content for: %s", state.project_name)
        components = ", ".join(state.components_created) or "basic components"
        user_message = (
            f"{state.requirements}\n\n"
            f"Business type: {state.business_type} ({state.industry})\n"
            f"Existing components: {components}"
        )
        fallback = f"Fallback content enhancement for {state.project_name}"
        analysis, used_model = self.analyze("content_analysis.txt", user_message, fallback)
        if used_model:
            log.info("Model content analysis completed")

        content = build_content(state.business_type, analysis if used_model else None)
        self.write(
            state,
            render_components(content, state.color_scheme),
            message="Update {path} with custom content",
        )
        state.mark("content_generated", "styling_completed")
        return state
