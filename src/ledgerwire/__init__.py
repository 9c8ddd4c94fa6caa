"""ledgerwire: typed model mapping for the Increase banking API."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ledgerwire")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: decode/encode/validate are exported from ledgerwire.api, not from root
from ledgerwire.api import ValidationResult
from ledgerwire.client import IncreaseClient, Page
from ledgerwire.codes import ValidationCode
from ledgerwire.contracts import ValidationIssue
from ledgerwire.errors import (
    APIConnectionError,
    APIError,
    APIStatusError,
    ConfigurationError,
    DecodeError,
    LedgerwireError,
    ModelValidationError,
)
from ledgerwire.kernel import CodecOptions, SdkModel, UnknownVariant, WireEnum

__all__ = [
    "__version__",
    "APIConnectionError",
    "APIError",
    "APIStatusError",
    "CodecOptions",
    "ConfigurationError",
    "DecodeError",
    "IncreaseClient",
    "LedgerwireError",
    "ModelValidationError",
    "Page",
    "SdkModel",
    "UnknownVariant",
    "ValidationCode",
    "ValidationIssue",
    "ValidationResult",
    "WireEnum",
]
