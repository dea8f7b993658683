"""Logging middleware with sensitive data redaction."""

import re

# Sensitive parameters to redact from URLs ("key" is the weatherapi.com credential)
SENSITIVE_PARAMS = [
    "key",
    "api_key",
    "appid",
    "token",
    "access_token",
    "password",
    "secret",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"([?&]){param}=([^&\s\"]+)"
        redacted = re.sub(pattern, rf"\g<1>{param}=***REDACTED***", redacted)
    return redacted
