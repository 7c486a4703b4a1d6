"""Main pipeline orchestrator — fixed linear chain of stages with fail-fast gating."""

import logging

from core.errors import PipelineError
from core.state import PipelineState
from agents.requirements_parser import RequirementsParser
from agents.repository_creator import RepositoryCreator
from agents.framework_initializer import FrameworkInitializer
from agents.structure_generator import StructureGenerator
from agents.content_generator import ContentGenerator
from agents.website_finalizer import WebsiteFinalizer

log = logging.getLogger(__name__)


class Orchestrator:
    """Runs the chain: parse → create repo → framework → structure → content → finalize.

    Every stage checks the flags of the stages before it and raises if any
    is missing. A raised error stops the run; files already pushed to the
    repository stay there.
    """

    def __init__(self, github=None, llm=None):
        self.parser = RequirementsParser()
        self.repository_creator = RepositoryCreator(github=github)
        self.framework_initializer = FrameworkInitializer(github=github)
        self.structure_generator = StructureGenerator(github=github, llm=llm)
        self.content_generator = ContentGenerator(github=github, llm=llm)
        self.finalizer = WebsiteFinalizer(github=github)

    @property
    def stages(self):
        return [
            self.parser,
            self.repository_creator,
            self.framework_initializer,
            self.structure_generator,
            self.content_generator,
            self.finalizer,
        ]

    def create_state(self, requirements):
        return PipelineState(requirements=requirements or "")

    def parse(self, requirements):
        """Parse only: identity, extracted fields and category. No remote calls."""
        state = self.create_state(requirements)
        return self.parser.run(state)

    def run_full(self, requirements, on_stage=None):
        """Run every stage in order.

        Args:
            requirements: The requirements report text.
            on_stage: Optional callback(stage_name, state) after each stage.

        Returns:
            PipelineState with every flag set and status "done".

        Raises:
            PipelineError (or a subclass) from the first stage that fails.
        """
        state = self.create_state(requirements)
        state.status = "running"

        for stage in self.stages:
            log.info("[%s] starting", stage.name)
            try:
                state = stage.run(state)
            except PipelineError as e:
                if e.stage is None:
                    e.stage = stage.name
                state.status = "failed"
                state.errors.append(f"{stage.name}: {e}")
                log.error("[%s] failed: %s", stage.name, e)
                raise
            log.info("[%s] done", stage.name)
            if on_stage:
                on_stage(stage.name, state)

        state.status = "done"
        log.info("Website ready: %s", state.repository_url)
        return state
