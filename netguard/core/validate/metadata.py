"""Object metadata rules."""

from __future__ import annotations

from ..canonical.entities import ObjectMeta
from .field import FieldErrorList, FieldPath, invalid, required, too_long
from .naming import (
    label_value_errors,
    qualified_name_errors,
    validate_generate_name,
    validate_name,
)

TOTAL_ANNOTATION_SIZE_LIMIT_BYTES = 256 * 1024
EXEMPT_ANNOTATION_PREFIX = "kubectl.kubernetes.io/"


def validate_object_meta(meta: ObjectMeta | None, path: FieldPath | None = None) -> FieldErrorList:
    path = path or FieldPath("metadata")
    if meta is None:
        return FieldErrorList([required(path, "metadata is required")])

    errors = FieldErrorList()
    if not meta.name and not meta.generate_name:
        errors.append(required(path.child("name"), "name or generateName is required"))
    if meta.name:
        errors.extend(validate_name(meta.name, path.child("name")))
    if meta.generate_name:
        errors.extend(validate_generate_name(meta.generate_name, path.child("generateName")))
    if meta.namespace:
        errors.extend(validate_name(meta.namespace, path.child("namespace")))

    errors.extend(validate_labels(meta.labels, path.child("labels")))
    errors.extend(validate_annotations(meta.annotations, path.child("annotations")))
    return errors


def validate_labels(labels: dict[str, str], path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    for key, value in labels.items():
        key_path = path.key(key)
        key_messages = qualified_name_errors(key)
        if key_messages:
            errors.append(invalid(key_path, key, "; ".join(key_messages)))
        value_messages = label_value_errors(value)
        if value_messages:
            errors.append(invalid(key_path, value, "; ".join(value_messages)))
    return errors


def validate_annotations(annotations: dict[str, str], path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    for key, value in annotations.items():
        key_path = path.key(key)
        key_messages = qualified_name_errors(key)
        if key_messages:
            errors.append(invalid(key_path, key, "; ".join(key_messages)))
        if key.startswith(EXEMPT_ANNOTATION_PREFIX):
            continue
        size = len(value.encode("utf-8"))
        if size > TOTAL_ANNOTATION_SIZE_LIMIT_BYTES:
            errors.append(too_long(key_path, size, TOTAL_ANNOTATION_SIZE_LIMIT_BYTES))
    return errors


__all__ = [
    "EXEMPT_ANNOTATION_PREFIX",
    "TOTAL_ANNOTATION_SIZE_LIMIT_BYTES",
    "validate_annotations",
    "validate_labels",
    "validate_object_meta",
]
