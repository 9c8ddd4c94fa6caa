"""Public result models for ledgerwire package."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ledgerwire.codes import ValidationCode


class ValidationIssue(BaseModel):
    """A single problem found in a model instance or wire payload."""
    path: str  # Wire path, e.g. "addenda.freeform.entries[0].payment_related_information"
    code: ValidationCode
    message: str
    expected: Optional[str] = None  # For WRONG_TYPE / INVALID_ENUM_VALUE
    actual: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of validating a payload against a model."""
    ok: bool  # True if no issues
    model: str  # Display name of the model validated against
    issues: List[ValidationIssue] = Field(default_factory=list)  # Declaration order, never short-circuited
