"""Tests for utils.github — requests.Session is mocked, no network."""

import base64
from unittest.mock import MagicMock

import pytest
import requests

from core.errors import ConfigurationError, RemoteError
from core.state import RemoteFile
from utils.github import GitHubClient, owner_from_repository


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _response(status, payload=None, reason="Error"):
    r = MagicMock()
    r.status_code = status
    r.reason = reason
    r.json.return_value = payload if payload is not None else {}
    return r


def _client(session=None):
    return GitHubClient(token="t0k", session=session or MagicMock(), timeout=5)


def _put_body(session, call=-1):
    return session.put.call_args_list[call].kwargs["json"]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_missing_token_raises(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    with pytest.raises(ConfigurationError):
        GitHubClient(session=MagicMock())


def test_token_from_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "envtoken")
    client = GitHubClient(session=MagicMock())
    assert client.headers["Authorization"] == "token envtoken"


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "7.5")
    client = GitHubClient(token="t", session=MagicMock())
    assert client.timeout == 7.5


# ---------------------------------------------------------------------------
# create_repository
# ---------------------------------------------------------------------------

def test_create_repository_posts_private_without_auto_init():
    session = MagicMock()
    session.post.return_value = _response(201, {
        "name": "bakery", "html_url": "https://github.com/octo/bakery",
        "owner": {"login": "octo"},
    })
    data = _client(session).create_repository("bakery", description="Website project: bakery")

    assert data["name"] == "bakery"
    args, kwargs = session.post.call_args
    assert args[0] == "https://api.github.com/user/repos"
    assert kwargs["json"] == {
        "name": "bakery",
        "description": "Website project: bakery",
        "private": True,
        "auto_init": False,
    }
    assert kwargs["timeout"] == 5


def test_create_repository_error_carries_api_message():
    session = MagicMock()
    session.post.return_value = _response(422, {"message": "name already exists on this account"})
    with pytest.raises(RemoteError) as exc:
        _client(session).create_repository("bakery")
    assert "name already exists" in str(exc.value)
    assert exc.value.status_code == 422


def test_create_repository_network_error():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("down")
    with pytest.raises(RemoteError):
        _client(session).create_repository("bakery")


def test_owner_from_repository():
    assert owner_from_repository({"owner": {"login": "octo"}}) == "octo"
    assert owner_from_repository({"html_url": "https://github.com/acme/site"}) == "acme"
    assert owner_from_repository({}) == ""


# ---------------------------------------------------------------------------
# Create-or-update writes
# ---------------------------------------------------------------------------

def test_new_file_is_created_without_sha():
    session = MagicMock()
    session.get.return_value = _response(404, {"message": "Not Found"})
    session.put.return_value = _response(201, {"content": {}})

    outcome = _client(session).write_file("octo", "bakery", RemoteFile("src/App.tsx", "hi"), "Add src/App.tsx")

    assert outcome.action == "created"
    body = _put_body(session)
    assert "sha" not in body
    assert base64.b64decode(body["content"]).decode() == "hi"
    assert body["message"] == "Add src/App.tsx"
    assert session.put.call_args.args[0] == (
        "https://api.github.com/repos/octo/bakery/contents/src/App.tsx"
    )


def test_existing_file_is_updated_with_sha():
    session = MagicMock()
    session.get.return_value = _response(200, {"sha": "abc123"})
    session.put.return_value = _response(200, {"content": {}})

    outcome = _client(session).write_file("octo", "bakery", RemoteFile("README.md", "x"), "Add README.md")

    assert outcome.action == "updated"
    assert _put_body(session)["sha"] == "abc123"


def test_content_is_utf8_encoded():
    session = MagicMock()
    session.get.return_value = _response(404)
    session.put.return_value = _response(201)
    _client(session).write_file("o", "r", RemoteFile("a.txt", "Café ☕"), "m")
    assert base64.b64decode(_put_body(session)["content"]).decode("utf-8") == "Café ☕"


def test_write_files_formats_message_per_path():
    session = MagicMock()
    session.get.return_value = _response(404)
    session.put.return_value = _response(201)
    files = [RemoteFile("a.txt", "1"), RemoteFile("b.txt", "2")]

    result = _client(session).write_files("o", "r", files, message="Update {path} with custom content")

    assert result.written == ["a.txt", "b.txt"]
    assert _put_body(session, 0)["message"] == "Update a.txt with custom content"
    assert _put_body(session, 1)["message"] == "Update b.txt with custom content"


def test_failed_write_is_recorded_and_rest_continue():
    session = MagicMock()
    session.get.return_value = _response(404)
    session.put.side_effect = [
        _response(201),
        _response(409, {"message": "conflict"}),
        _response(201),
    ]
    files = [RemoteFile("a", "1"), RemoteFile("b", "2"), RemoteFile("c", "3")]

    result = _client(session).write_files("o", "r", files, stage="generate-structure")

    assert result.stage == "generate-structure"
    assert result.written == ["a", "c"]
    assert result.failed == ["b"]
    assert "conflict" in result.files[1].error
    assert session.put.call_count == 3


def test_network_error_is_recorded_when_not_strict():
    session = MagicMock()
    session.get.side_effect = requests.Timeout("slow")
    result = _client(session).write_files("o", "r", [RemoteFile("a", "1")])
    assert result.failed == ["a"]
    session.put.assert_not_called()


def test_strict_write_raises_on_first_failure():
    session = MagicMock()
    session.get.return_value = _response(404)
    session.put.side_effect = [_response(201), _response(500, {"message": "boom"}), _response(201)]
    files = [RemoteFile("a", "1"), RemoteFile("b", "2"), RemoteFile("c", "3")]

    with pytest.raises(RemoteError) as exc:
        _client(session).write_files("o", "r", files, strict=True, stage="initialize-framework")

    assert exc.value.stage == "initialize-framework"
    assert session.put.call_count == 2


def test_strict_write_wraps_network_error():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("down")
    with pytest.raises(RemoteError) as exc:
        _client(session).write_files("o", "r", [RemoteFile("a", "1")], strict=True, stage="s")
    assert exc.value.stage == "s"


@pytest.mark.parametrize("value", ["30s", "0", "-5"])
def test_bad_timeout_is_a_configuration_error(monkeypatch, value):
    monkeypatch.setenv("HTTP_TIMEOUT", value)
    with pytest.raises(ConfigurationError) as exc:
        GitHubClient(token="t", session=MagicMock())
    assert "HTTP_TIMEOUT" in str(exc.value)
