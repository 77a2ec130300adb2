"""
Error types raised while processing a form submission.

Every error carries a caller-facing `message`. The submission service catches
all of them and turns them into `{"success": false, "error": message}`, so
none of these ever reach the HTTP layer as a 5xx.
"""

import json
from typing import Any


class FormSubmissionError(Exception):
    """Base exception for all form submission failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(FormSubmissionError):
    """Webflow API token or collection id is not configured."""


class SubmissionValidationError(FormSubmissionError):
    """Inbound form data is missing required fields or is not an object."""


class UpstreamError(FormSubmissionError):
    """Webflow answered with a non-success status."""

    def __init__(self, status_code: int, body: Any):
        super().__init__(f"Webflow API error: {status_code} - {_stringify(body)}")
        self.status_code = status_code
        self.body = body


class TransportError(FormSubmissionError):
    """The request to Webflow failed before a response was received."""


def _stringify(body: Any) -> str:
    if isinstance(body, str):
        return body
    try:
        return json.dumps(body, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(body)
