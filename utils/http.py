"""Settings shared by the outbound HTTP clients."""

import os

from config.defaults import DEFAULTS
from core.errors import ConfigurationError


def http_timeout():
    """Per-request timeout in seconds: HTTP_TIMEOUT env, else DEFAULTS."""
    value = os.environ.get("HTTP_TIMEOUT")
    if not value:
        return DEFAULTS["http_timeout"]
    try:
        timeout = float(value)
    except ValueError as e:
        raise ConfigurationError(
            f"HTTP_TIMEOUT must be a number of seconds, got {value!r}"
        ) from e
    if timeout <= 0:
        raise ConfigurationError(f"HTTP_TIMEOUT must be positive, got {value!r}")
    return timeout
