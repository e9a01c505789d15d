"""Typed object-reference checks."""

from __future__ import annotations

from ..canonical.entities import API_VERSION, NamespacedObjectReference, ObjectReference
from .field import FieldErrorList, FieldPath, invalid, required
from .naming import validate_name


def validate_object_reference(
    ref: ObjectReference | None,
    expected_kind: str,
    path: FieldPath,
) -> FieldErrorList:
    _require_expected_kind(expected_kind)
    if ref is None:
        return FieldErrorList([required(path, f"{expected_kind} reference is required")])
    return _reference_errors(ref, expected_kind, path)


def validate_namespaced_object_reference(
    ref: NamespacedObjectReference | None,
    expected_kind: str,
    path: FieldPath,
) -> FieldErrorList:
    _require_expected_kind(expected_kind)
    if ref is None:
        return FieldErrorList([required(path, f"{expected_kind} reference is required")])

    errors = _reference_errors(ref, expected_kind, path)
    namespace = getattr(ref, "namespace", "")
    namespace_path = path.child("namespace")
    if not namespace:
        errors.append(required(namespace_path, "namespace is required"))
    else:
        errors.extend(validate_name(namespace, namespace_path))
    return errors


def _reference_errors(ref: ObjectReference, expected_kind: str, path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()

    api_version_path = path.child("apiVersion")
    if not ref.api_version:
        errors.append(required(api_version_path, "apiVersion is required"))
    elif ref.api_version != API_VERSION:
        errors.append(invalid(api_version_path, ref.api_version, f"apiVersion must be '{API_VERSION}'"))

    kind_path = path.child("kind")
    if not ref.kind:
        errors.append(required(kind_path, "kind is required"))
    elif ref.kind != expected_kind:
        errors.append(invalid(kind_path, ref.kind, f"kind must be '{expected_kind}'"))

    name_path = path.child("name")
    if not ref.name:
        errors.append(required(name_path, "name is required"))
    else:
        errors.extend(validate_name(ref.name, name_path))
    return errors


def _require_expected_kind(expected_kind: str | None) -> None:
    if not expected_kind:
        raise ValueError("expected_kind must be a non-empty resource kind")


__all__ = ["validate_namespaced_object_reference", "validate_object_reference"]
