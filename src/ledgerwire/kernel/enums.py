"""Enum codec: closed-but-extensible string value sets.

The API documents its enums as "we may add additional possible values
over time; your application should be able to handle such additions
gracefully". A WireEnum therefore never rejects a string: unknown wire
values decode to opaque pseudo-members that compare equal to their wire
string and encode back to it unchanged.
"""

import logging
from enum import Enum
from typing import Any, Type, TypeVar

from ..errors import DecodeError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="WireEnum")


class WireEnum(str, Enum):
    """Base class for API enums.

    Members are symbolic constants; ``EnumCls("future_value")`` returns an
    opaque member instead of raising ValueError.
    """

    @classmethod
    def _missing_(cls, value: Any):
        if not isinstance(value, str):
            return None
        pseudo_member = str.__new__(cls, value)
        pseudo_member._name_ = value.upper()
        pseudo_member._value_ = value
        return pseudo_member

    @property
    def is_known(self) -> bool:
        """True for declared members, False for opaque (forward-compatible) values."""
        return type(self)._value2member_map_.get(self._value_) is self

    def __repr__(self) -> str:
        if self.is_known:
            return f"<{type(self).__name__}.{self._name_}: {self._value_!r}>"
        return f"<{type(self).__name__} (unknown): {self._value_!r}>"


def decode_enum(enum_cls: Type[E], raw: Any, path: str = "", strict: bool = False) -> E:
    """Decode a wire string into an enum member.

    Args:
        enum_cls: Target WireEnum subclass
        raw: Wire value
        path: Field path for error messages
        strict: Reject values that are not declared members

    Raises:
        DecodeError: If raw is not a string, or strict and the value is unknown
    """
    if not isinstance(raw, str):
        raise DecodeError(path, f"string for enum {enum_cls.__qualname__}", type(raw).__name__)
    member = enum_cls(raw)
    if not member.is_known:
        if strict:
            raise DecodeError(
                path,
                f"one of {[m.value for m in enum_cls]}",
                repr(raw),
            )
        logger.debug("Preserving unknown %s value %r at %s", enum_cls.__qualname__, raw, path or "<root>")
    return member


def encode_enum(value: Any) -> str:
    """Encode an enum member (known or opaque) or a plain string to its wire string."""
    if isinstance(value, Enum):
        return value.value
    return str(value)
