"""Default pipeline settings."""

DEFAULTS = {
    "model": "claude-sonnet-4-5-20250929",
    "max_tokens": 4096,
    "github_api_url": "https://api.github.com",
    "private_repos": True,
    "http_timeout": 30,        # seconds per outbound HTTP call
    "email_api_url": "https://api.resend.com/emails",
    "email_from": "Website Consultant <onboarding@resend.dev>",
    "email_subject": "Your Website Requirements Report",
    "max_name_length": 25,
}
