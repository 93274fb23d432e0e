"""
Typed failures of the extraction pipeline.

Each error knows which side is at fault so the HTTP layer can pick a status:
  • client        — the request itself is unusable (400)
  • configuration — the server is missing something it needs (500)
  • upstream      — the model provider failed or returned garbage (502)
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for every pipeline failure."""

    status_code: int = 500
    category: str = "upstream"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict[str, str]:
        return {
            "error": type(self).__name__,
            "category": self.category,
            "message": self.message,
        }


class ValidationError(ExtractionError):
    """The description is empty after trimming."""

    status_code = 400
    category = "client"


class MissingCredentialError(ExtractionError):
    """No API key is configured for the upstream provider."""

    status_code = 500
    category = "configuration"


class UpstreamTransportError(ExtractionError):
    """Network-level failure talking to the provider (refused, timeout, TLS)."""

    status_code = 502


class UpstreamDecodeError(ExtractionError):
    """The provider answered, but the envelope is unusable or has no choices."""

    status_code = 502


class MalformedModelOutputError(ExtractionError):
    """The model's generated text is not a JSON object."""

    status_code = 502
