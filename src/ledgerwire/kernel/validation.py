"""Validation: aggregate every problem with a model instance.

Validation never stops at the first finding. Every FieldSpec is visited,
nested models and list items are recursed into, and each issue carries
the wire path of the offending value. On models built in code,
Required+nullable fields that were never set are not reported: a full
encode emits them as null. On models decoded from a wire payload
(``from_wire=True``) every absent Required field is reported, matching
what the strict decoder rejects.
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, List

from .fields import EnumKind, ListKind, ModelKind, ScalarKind, UnionKind, kind_label
from .model import SdkModel, UnknownVariant
from ..codes import ValidationCode
from ..contracts import ValidationIssue


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, SdkModel):
        return f"object {type(value).__descriptor__.name}"
    if isinstance(value, UnknownVariant):
        return f"unknown variant {value.tag!r}"
    return type(value).__name__


def _wrong_type(path: str, kind: Any, value: Any) -> ValidationIssue:
    expected = kind_label(kind)
    actual = _describe(value)
    return ValidationIssue(
        path=path,
        code=ValidationCode.WRONG_TYPE,
        message=f"expected {expected}, got {actual}",
        expected=expected,
        actual=actual,
    )


def _scalar_ok(scalar: str, value: Any) -> bool:
    if scalar == "string":
        return isinstance(value, str)
    if scalar == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if scalar == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if scalar == "boolean":
        return isinstance(value, bool)
    if scalar == "datetime":
        return isinstance(value, datetime) and value.tzinfo is not None
    if scalar == "date":
        return isinstance(value, date) and not isinstance(value, datetime)
    if scalar == "object":
        return isinstance(value, Mapping)
    return False


class _Validator:
    def __init__(self, strict_enums: bool, from_wire: bool = False):
        self.strict_enums = strict_enums
        self.from_wire = from_wire
        self.issues: List[ValidationIssue] = []

    def model(self, instance: SdkModel, path: str) -> None:
        descriptor = type(instance).__descriptor__
        for spec in descriptor.fields:
            field_path = _join(path, spec.wire_name)
            if not instance.is_set(spec.accessor):
                if spec.is_required and (self.from_wire or not spec.nullable):
                    self.issues.append(ValidationIssue(
                        path=field_path,
                        code=ValidationCode.MISSING_REQUIRED,
                        message=f"required field is missing ({kind_label(spec.kind)})",
                        expected=kind_label(spec.kind),
                        actual="nothing",
                    ))
                continue

            value = instance.get(spec.accessor)
            if value is None:
                if not spec.nullable:
                    self.issues.append(ValidationIssue(
                        path=field_path,
                        code=ValidationCode.NULL_NOT_ALLOWED,
                        message="field is not nullable",
                        expected=kind_label(spec.kind),
                        actual="null",
                    ))
                continue

            if spec.when is not None:
                self.slot(instance, spec, field_path)
            if isinstance(spec.kind, UnionKind):
                self.union(instance, spec, value, field_path)
            else:
                self.value(type(instance).__registry__, spec.kind, value, field_path)

    def slot(self, instance: SdkModel, spec: Any, path: str) -> None:
        tag_spec = type(instance).__descriptor__.by_wire_name(spec.when.tag)
        tag_value = instance.get(tag_spec.accessor)
        tag_text = getattr(tag_value, "value", tag_value)
        if tag_text != spec.when.value:
            self.issues.append(ValidationIssue(
                path=path,
                code=ValidationCode.VARIANT_MISMATCH,
                message=f"only populated when {spec.when.tag} is {spec.when.value!r}, but it is {tag_text!r}",
                expected=spec.when.value,
                actual=str(tag_text),
            ))

    def union(self, instance: SdkModel, spec: Any, value: Any, path: str) -> None:
        tag_spec = type(instance).__descriptor__.by_wire_name(spec.kind.tag)
        tag_value = instance.get(tag_spec.accessor)
        tag_text = getattr(tag_value, "value", tag_value)
        expected = spec.kind.variants.get(tag_text) if isinstance(tag_text, str) else None

        if isinstance(value, UnknownVariant):
            if expected is not None or value.tag != tag_text:
                self._variant_mismatch(path, expected or f"unknown variant {tag_text!r}", _describe(value))
            return
        if not isinstance(value, SdkModel):
            self.issues.append(_wrong_type(path, spec.kind, value))
            return
        actual = type(value).__descriptor__.name
        if actual != expected:
            self._variant_mismatch(path, expected or f"unknown variant {tag_text!r}", actual)
            return
        self.model(value, path)

    def _variant_mismatch(self, path: str, expected: str, actual: str) -> None:
        self.issues.append(ValidationIssue(
            path=path,
            code=ValidationCode.VARIANT_MISMATCH,
            message=f"tag selects {expected}, got {actual}",
            expected=expected,
            actual=actual,
        ))

    def value(self, registry: Any, kind: Any, value: Any, path: str) -> None:
        if isinstance(kind, ScalarKind):
            if not _scalar_ok(kind.scalar, value):
                self.issues.append(_wrong_type(path, kind, value))
        elif isinstance(kind, EnumKind):
            enum_cls = registry.enum_class(kind.enum)
            if not isinstance(value, enum_cls):
                self.issues.append(_wrong_type(path, kind, value))
            elif self.strict_enums and not value.is_known:
                known = [member.value for member in enum_cls]
                self.issues.append(ValidationIssue(
                    path=path,
                    code=ValidationCode.INVALID_ENUM_VALUE,
                    message=f"{value.value!r} is not one of {known}",
                    expected=f"one of {known}",
                    actual=repr(value.value),
                ))
        elif isinstance(kind, ModelKind):
            model_cls = registry.model_class(kind.model)
            if isinstance(value, model_cls):
                self.model(value, path)
            else:
                self.issues.append(_wrong_type(path, kind, value))
        elif isinstance(kind, ListKind):
            if not isinstance(value, (list, tuple)):
                self.issues.append(_wrong_type(path, kind, value))
                return
            for index, item in enumerate(value):
                item_path = f"{path}[{index}]"
                if item is None:
                    self.issues.append(_wrong_type(item_path, kind.item, item))
                else:
                    self.value(registry, kind.item, item, item_path)


def validate_instance(
    instance: SdkModel,
    strict_enums: bool = False,
    path: str = "",
    from_wire: bool = False,
) -> List[ValidationIssue]:
    """Return every validation issue of ``instance`` (empty list when valid).

    Args:
        instance: Model instance to check
        strict_enums: Also report enum values the schema does not declare
        path: Path prefix for reported issues
        from_wire: The instance was decoded from a wire payload, so absent
                   Required+nullable fields are reported too
    """
    validator = _Validator(strict_enums, from_wire)
    validator.model(instance, path)
    return validator.issues
