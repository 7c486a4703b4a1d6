"""Abstract base class for all pipeline stage agents."""

import logging
import os
from abc import ABC, abstractmethod

from core.errors import ConfigurationError, InputValidationError
from core.state import RemoteFile
from utils.github import GitHubClient
from utils.llm import complete_with_fallback

log = logging.getLogger(__name__)

_PROMPTS_DIR = os.path.join(os.path.dirname(__file__), "prompts")


def load_prompt(name):
    with open(os.path.join(_PROMPTS_DIR, name), encoding="utf-8") as f:
        return f.read()


class BaseStage(ABC):
    """Base class that every pipeline stage must extend.

    The GitHub client and the model callable are injected; a stage that needs
    GitHub and was given none builds one from the environment on first use.
    """

    name = "base"
    description = "Base stage"

    def __init__(self, github=None, llm=None):
        self.github = github
        self.llm = llm

    @abstractmethod
    def run(self, state):
        """Validate prerequisites, do the stage's work, return the updated state."""

    def client(self):
        if self.github is None:
            try:
                self.github = GitHubClient()
            except ConfigurationError as e:
                e.stage = self.name
                raise
        return self.github

    def require_identity(self, state, repository=True):
        """Identity fields every stage after parsing relies on."""
        if not state.project_name or not state.project_name.strip():
            raise InputValidationError(
                "Project name is required but was not provided or is empty",
                stage=self.name,
            )
        if repository and not (state.repository_name and state.owner):
            raise InputValidationError(
                "Repository name and owner are required", stage=self.name,
            )

    def analyze(self, prompt_file, user_message, fallback):
        """Optional model analysis. Returns (text, used_model); never raises."""
        system_prompt = load_prompt(prompt_file)
        return complete_with_fallback(system_prompt, user_message, fallback, llm=self.llm)

    def write(self, state, files, message="Add {path}", strict=False):
        """Push (path, content) pairs to the run's repository and record the outcome."""
        remote_files = [RemoteFile(path=path, content=content) for path, content in files]
        result = self.client().write_files(
            state.owner, state.repository_name, remote_files,
            message=message, strict=strict, stage=self.name,
        )
        state.stages.append(result)
        if result.failed:
            log.warning("[%s] %d file(s) failed: %s",
                        self.name, len(result.failed), ", ".join(result.failed))
        return result
