"""Validation code constants for ledgerwire.kernel.validation.

These constants prevent stringly-typed issue codes and ensure
client code matches on the correct validation codes.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Validation issue codes."""

    # Presence
    MISSING_REQUIRED = "MISSING_REQUIRED"
    NULL_NOT_ALLOWED = "NULL_NOT_ALLOWED"

    # Shape
    WRONG_TYPE = "WRONG_TYPE"

    # Only reported when enum checking is strict
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"

    # A tag-selected slot is populated while the tag selects another slot
    VARIANT_MISMATCH = "VARIANT_MISMATCH"
