"""Repository creator — creates the GitHub repository for the project."""

import logging

from agents.base import BaseStage
from core.errors import RemoteError
from utils.github import owner_from_repository

log = logging.getLogger(__name__)

_PURPOSE_PREVIEW = 100


def repository_description(project_name, purpose=None):
    description = f"Website project: {project_name}"
    if purpose:
        description += f" - {purpose[:_PURPOSE_PREVIEW]}"
    return description


class RepositoryCreator(BaseStage):
    name = "create-repository"
    description = "Create a private GitHub repository named after the project"

    def run(self, state):
        state.require("success", stage=self.name,
                      message="Requirements parsing failed, cannot create repository")
        self.require_identity(state, repository=False)

        repo_name = state.project_name.strip()
        log.info("Creating GitHub repository: %s", repo_name)
        try:
            data = self.client().create_repository(
                repo_name,
                description=repository_description(repo_name, state.extracted_info.purpose),
            )
        except RemoteError as e:
            e.stage = self.name
            raise

        state.repository_url = data.get("html_url", "")
        state.repository_name = data.get("name") or repo_name
        state.owner = owner_from_repository(data)
        state.mark("repository_created")
        log.info("Repository created: %s", state.repository_url)
        return state
