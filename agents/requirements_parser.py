"""Requirements parser — project identity, extracted fields and business category."""

import logging

from agents.base import BaseStage
from core.errors import InputValidationError
from manager.classifier import analyze_design, classify, infer_industry
from utils.extraction import extract_info, find_explicit_name
from utils.project_naming import generate_project_name, sanitize_project_name

log = logging.getLogger(__name__)


class RequirementsParser(BaseStage):
    """Parses the report once; every later stage reads what this one stored.

    No LLM calls. No network calls.
    """

    name = "parse-requirements"
    description = "Extract project name, purpose, audience and business type"

    def run(self, state):
        report = state.requirements
        if not report or not report.strip():
            raise InputValidationError(
                "Requirements report is required but was not provided or is empty",
                stage=self.name,
            )

        log.info("Parsing website requirements report...")
        info = extract_info(report)

        explicit = find_explicit_name(report)
        if explicit:
            project_name = sanitize_project_name(explicit)
        else:
            project_name = generate_project_name(info.purpose)

        design = analyze_design(report)

        state.project_name = project_name
        state.extracted_info = info
        state.business_type = classify(report)
        state.industry = infer_industry(state.business_type)
        state.color_scheme = design["color_scheme"]
        state.style = design["style"]
        state.features = design["features"]
        state.mark("success")

        log.info("Project name: %s", project_name)
        log.info("Purpose: %s", info.purpose or "Not specified")
        log.info("Target audience: %s", info.target_audience or "Not specified")
        log.info("Business type: %s (%s)", state.business_type, state.industry)
        return state
