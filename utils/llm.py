"""Claude API client for optional requirements analysis."""

import logging
import os
import time

import anthropic

from config.defaults import DEFAULTS

log = logging.getLogger(__name__)

MAX_TOKENS = DEFAULTS["max_tokens"]


def get_model():
    return os.environ.get("MODEL") or DEFAULTS["model"]


def get_client():
    """Return an Anthropic client. Raises if no API key is set."""
    api_key = os.environ.get("ANTHROPIC_API_KEY")
    if not api_key:
        raise RuntimeError(
            "ANTHROPIC_API_KEY environment variable is not set. "
            "Get a key at https://console.anthropic.com/ and run:\n"
            "  export ANTHROPIC_API_KEY='your-key-here'"
        )
    return anthropic.Anthropic(api_key=api_key)


def call_llm(system_prompt, user_message):
    """Call Claude and return the text of the reply. Retries once on API errors."""
    client = get_client()

    for attempt in range(2):
        try:
            response = client.messages.create(
                model=get_model(),
                max_tokens=MAX_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": user_message}],
            )
            return "".join(
                block.text for block in response.content
                if getattr(block, "type", "") == "text"
            )
        except anthropic.APIError:
            if attempt == 0:
                time.sleep(2)
                continue
            raise


def complete_with_fallback(system_prompt, user_message, fallback, llm=None):
    """Ask the model for analysis text; any failure yields the fallback instead.

    Returns (text, used_model). Never raises.
    """
    llm = llm or call_llm
    try:
        text = llm(system_prompt, user_message)
    except Exception as e:
        log.warning("Model analysis unavailable, using fallback: %s", e)
        return fallback, False
    if not text or not text.strip():
        log.warning("Model returned empty analysis, using fallback")
        return fallback, False
    return text, True
