"""GitHub REST client: repository creation and create-or-update of file contents."""

import base64
import logging
import os
from urllib.parse import quote

import requests

from config.defaults import DEFAULTS
from core.errors import ConfigurationError, RemoteError
from core.state import FileOutcome, StageResult
from utils.http import http_timeout

log = logging.getLogger(__name__)


def _error_message(response):
    """Best-effort human message from a GitHub error response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return data["message"]
    return getattr(response, "reason", None) or f"HTTP {response.status_code}"


def owner_from_repository(repo_data):
    """Owner login of a repository payload, falling back to its html_url."""
    owner = (repo_data.get("owner") or {}).get("login")
    if owner:
        return owner
    parts = (repo_data.get("html_url") or "").rstrip("/").split("/")
    return parts[-2] if len(parts) >= 2 else ""


class GitHubClient:
    """Thin wrapper over the GitHub REST API used by the pipeline stages."""

    def __init__(self, token=None, api_url=None, session=None, timeout=None):
        token = token or os.environ.get("GITHUB_TOKEN")
        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable is required")
        self.api_url = (api_url or DEFAULTS["github_api_url"]).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else http_timeout()
        self.headers = {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
        }

    def _contents_url(self, owner, repo, path):
        return f"{self.api_url}/repos/{owner}/{repo}/contents/{quote(path)}"

    def create_repository(self, name, description="", private=None):
        """Create a repository for the authenticated user. Returns the API payload."""
        if private is None:
            private = DEFAULTS["private_repos"]
        try:
            r = self.session.post(
                f"{self.api_url}/user/repos",
                headers=self.headers,
                json={
                    "name": name,
                    "description": description,
                    "private": private,
                    "auto_init": False,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RemoteError(f"Failed to create repository: {e}") from e
        if r.status_code != 201:
            raise RemoteError(
                f"Failed to create repository: {_error_message(r)}",
                status_code=r.status_code,
            )
        return r.json()

    def get_file_sha(self, owner, repo, path):
        """Content hash of an existing file, or None when it does not exist."""
        r = self.session.get(
            self._contents_url(owner, repo, path),
            headers=self.headers,
            timeout=self.timeout,
        )
        if r.status_code != 200:
            return None
        data = r.json()
        return data.get("sha") if isinstance(data, dict) else None

    def put_file(self, owner, repo, remote_file, message):
        """Create or update one file. Raises RemoteError on a non-success status."""
        body = {
            "message": message,
            "content": base64.b64encode(remote_file.content.encode("utf-8")).decode("ascii"),
        }
        if remote_file.sha:
            body["sha"] = remote_file.sha
        r = self.session.put(
            self._contents_url(owner, repo, remote_file.path),
            headers=self.headers,
            json=body,
            timeout=self.timeout,
        )
        if r.status_code not in (200, 201):
            raise RemoteError(
                f"Failed to write {remote_file.path}: {_error_message(r)}",
                status_code=r.status_code,
            )
        return r.json()

    def write_file(self, owner, repo, remote_file, message):
        """Read the current sha, then create or update. Returns a FileOutcome."""
        remote_file.sha = self.get_file_sha(owner, repo, remote_file.path)
        self.put_file(owner, repo, remote_file, message)
        action = "updated" if remote_file.sha else "created"
        log.info("%s %s/%s:%s", action.capitalize(), owner, repo, remote_file.path)
        return FileOutcome(path=remote_file.path, action=action)

    def write_files(self, owner, repo, files, message="Add {path}", strict=False, stage="write"):
        """Write every file and collect the per-file outcomes.

        A failed write is logged and recorded while the remaining files are
        still attempted. With strict=True the first failure raises instead.
        """
        result = StageResult(stage=stage)
        for remote_file in files:
            try:
                outcome = self.write_file(
                    owner, repo, remote_file, message.format(path=remote_file.path),
                )
            except (RemoteError, requests.RequestException) as e:
                if strict:
                    if isinstance(e, RemoteError):
                        e.stage = stage
                        raise
                    raise RemoteError(
                        f"Failed to write {remote_file.path}: {e}", stage=stage,
                    ) from e
                log.error("Failed to write %s: %s", remote_file.path, e)
                outcome = FileOutcome(path=remote_file.path, action="failed", error=str(e))
            result.files.append(outcome)
        return result
