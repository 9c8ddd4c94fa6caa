"""Exception hierarchy for ledgerwire.

Schema mistakes (ConfigurationError) are programming errors and surface at
class-definition or first-use time. Wire mistakes (DecodeError) carry the
field path where the payload stopped matching the schema. Caller mistakes
on outbound models (ModelValidationError) carry every problem at once.
"""

from typing import Any, List, Optional


class LedgerwireError(Exception):
    """Base class for every error raised by ledgerwire."""


class ConfigurationError(LedgerwireError):
    """A schema, registry or client was set up incorrectly."""


class DecodeError(LedgerwireError, ValueError):
    """A wire payload did not match the declared schema."""

    def __init__(self, path: str, expected: str, actual: str):
        self.path = path or "<root>"
        self.expected = expected
        self.actual = actual
        super().__init__(f"{self.path}: expected {expected}, got {actual}")


class ModelValidationError(LedgerwireError, ValueError):
    """An outbound model failed validation.

    ``issues`` holds every problem found, in field declaration order.
    """

    def __init__(self, model: str, issues: List[Any]):
        self.model = model
        self.issues = list(issues)
        lines = [f"{issue.path}: {issue.message}" for issue in self.issues]
        summary = f"{model} has {len(self.issues)} validation issue(s)"
        super().__init__(summary + ("\n  " + "\n  ".join(lines) if lines else ""))


class APIError(LedgerwireError):
    """Base class for errors raised while talking to the API."""


class APIConnectionError(APIError):
    """The request never produced an HTTP response."""


class APIStatusError(APIError):
    """The API answered with a non-2xx status code."""

    def __init__(self, status_code: int, body: Any, error: Optional[Any] = None):
        self.status_code = status_code
        self.body = body
        # Decoded error object, when the body matched the error schema
        self.error = error
        title = getattr(error, "title", None) or "API request failed"
        detail = getattr(error, "detail", None)
        message = f"{status_code} {title}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
