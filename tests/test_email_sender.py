"""Tests for agents.email_sender — the HTTP session is mocked."""

from unittest.mock import MagicMock

import requests

from agents.email_sender import EmailSender, render_email_html


def _sender(session=None, api_key="re_test"):
    return EmailSender(api_key=api_key, from_address="Test <t@example.com>",
                       session=session or MagicMock())


def _response(status, payload):
    r = MagicMock()
    r.status_code = status
    r.json.return_value = payload
    return r


def test_html_escapes_report_and_name():
    out = render_email_html("<script>alert(1)</script>", recipient_name="<Sam>")
    assert "<script>" not in out
    assert "&lt;script&gt;" in out
    assert "Hi &lt;Sam&gt;," in out


def test_html_default_greeting():
    assert "<p>Hello,</p>" in render_email_html("report")


def test_missing_recipient_fails_without_request():
    session = MagicMock()
    result = _sender(session).send("", "report")
    assert result["success"] is False
    assert "recipient" in result["error"]
    session.post.assert_not_called()


def test_invalid_recipient_fails():
    assert _sender().send("not-an-email", "report")["success"] is False


def test_missing_report_fails():
    result = _sender().send("a@example.com", "   ")
    assert result["success"] is False
    assert "report" in result["error"]


def test_missing_api_key_fails(monkeypatch):
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    session = MagicMock()
    result = _sender(session, api_key=None).send("a@example.com", "report")
    assert result["success"] is False
    assert "RESEND_API_KEY" in result["error"]
    session.post.assert_not_called()


def test_send_success():
    session = MagicMock()
    session.post.return_value = _response(200, {"id": "em_123"})

    result = _sender(session).send("a@example.com", "My report", recipient_name="Sam")

    assert result == {"success": True, "message_id": "em_123", "error": None}
    kwargs = session.post.call_args.kwargs
    assert kwargs["headers"]["Authorization"] == "Bearer re_test"
    assert kwargs["json"]["to"] == ["a@example.com"]
    assert kwargs["json"]["from"] == "Test <t@example.com>"
    assert kwargs["json"]["subject"] == "Your Website Requirements Report"
    assert kwargs["json"]["text"].endswith("My report")


def test_custom_subject():
    session = MagicMock()
    session.post.return_value = _response(200, {"id": "x"})
    _sender(session).send("a@example.com", "r", subject="Hello there")
    assert session.post.call_args.kwargs["json"]["subject"] == "Hello there"


def test_api_error():
    session = MagicMock()
    session.post.return_value = _response(403, {"message": "API key is invalid"})
    result = _sender(session).send("a@example.com", "report")
    assert result["success"] is False
    assert result["error"] == "Resend API Error: API key is invalid"


def test_network_error():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("down")
    result = _sender(session).send("a@example.com", "report")
    assert result["success"] is False
    assert "down" in result["error"]


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "12")
    session = MagicMock()
    session.post.return_value = _response(200, {"id": "x"})
    _sender(session).send("a@example.com", "report")
    assert session.post.call_args.kwargs["timeout"] == 12.0


def test_bad_timeout_fails_without_request(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "30s")
    session = MagicMock()
    result = _sender(session).send("a@example.com", "report")
    assert result["success"] is False
    assert "HTTP_TIMEOUT" in result["error"]
    session.post.assert_not_called()
