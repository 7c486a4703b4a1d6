"""Email sender — delivers a requirements report through the Resend API."""

import html
import logging
import os

import requests

from config.defaults import DEFAULTS
from core.errors import ConfigurationError
from utils.http import http_timeout

log = logging.getLogger(__name__)

_NEXT_STEPS = (
    "&bull; Review the requirements carefully<br>"
    "&bull; Share this report with your development team<br>"
    "&bull; Contact us if you need any clarifications or modifications"
)


def render_email_html(report, recipient_name=None):
    greeting = f"<p>Hi {html.escape(recipient_name)},</p>" if recipient_name else "<p>Hello,</p>"
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px;">'
        '<h1 style="color: #333; border-bottom: 2px solid #007bff; padding-bottom: 10px;">'
        "Website Requirements Report</h1>"
        f"{greeting}"
        "<p>Please find your website requirements report below. It contains the "
        "information gathered during our consultation to guide the development of "
        "your React-based website.</p>"
        '<div style="background-color: #f8f9fa; padding: 20px; border-radius: 5px; margin: 20px 0;">'
        '<pre style="white-space: pre-wrap; font-family: monospace; font-size: 14px; line-height: 1.5; margin: 0;">'
        f"{html.escape(report)}</pre></div>"
        '<hr style="margin: 30px 0; border: none; border-top: 1px solid #ddd;">'
        f'<p style="color: #666; font-size: 14px;"><strong>Next Steps:</strong><br>{_NEXT_STEPS}</p>'
        '<p style="color: #666; font-size: 14px;">Best regards,<br>Your Website Consultant Team</p>'
        "</div>"
    )


class EmailSender:
    """Sends reports by email. Never raises: returns {"success", "message_id", "error"}."""

    name = "email_sender"

    def __init__(self, api_key=None, from_address=None, session=None, api_url=None):
        self.api_key = api_key or os.environ.get("RESEND_API_KEY")
        self.from_address = from_address or os.environ.get("EMAIL_FROM") or DEFAULTS["email_from"]
        self.api_url = api_url or DEFAULTS["email_api_url"]
        self.session = session or requests.Session()

    def send(self, recipient, report, subject=None, recipient_name=None):
        if not recipient or "@" not in recipient:
            return self._failure("recipient email is required but was not provided")
        if not report or not report.strip():
            return self._failure("report content is required but was not provided")
        if not self.api_key:
            return self._failure("RESEND_API_KEY environment variable is not set")
        try:
            timeout = http_timeout()
        except ConfigurationError as e:
            return self._failure(str(e))

        payload = {
            "from": self.from_address,
            "to": [recipient],
            "subject": subject or DEFAULTS["email_subject"],
            "html": render_email_html(report, recipient_name),
            "text": f"Website Requirements Report\n\n{report}",
        }
        log.info("Sending report to %s (%d chars)", recipient, len(report))
        try:
            r = self.session.post(
                self.api_url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=payload,
                timeout=timeout,
            )
        except requests.RequestException as e:
            return self._failure(f"Email request failed: {e}")

        try:
            data = r.json()
        except ValueError:
            data = {}
        if r.status_code not in (200, 201):
            message = data.get("message") if isinstance(data, dict) else None
            return self._failure(f"Resend API Error: {message or f'HTTP {r.status_code}'}")

        message_id = data.get("id") if isinstance(data, dict) else None
        log.info("Email sent: %s", message_id)
        return {"success": True, "message_id": message_id, "error": None}

    def _failure(self, error):
        log.error("Error sending email: %s", error)
        return {"success": False, "message_id": None, "error": error}
