"""Shared create/update/delete flow for per-kind validators.

A kind validator declares its immutable fields and implements
``validate_spec``. The base class runs metadata checks, then ``validate_spec`` and,
on update, a structural diff of the declared immutable fields against the
previous object. Checks never short-circuit: the caller receives every
violation found.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from ..canonical.entities import Resource
from .field import ErrorKind, FieldError, FieldErrorList, FieldPath, required
from .metadata import validate_object_meta


@dataclass(frozen=True)
class ImmutableField:
    """One field that may not change on update.

    ``path`` is the reported wire path (``spec.addressGroupRef``), ``attr`` the
    dotted attribute path on the resource dataclass (``spec.address_group_ref``).
    ``when`` receives the old object and gates the check.
    """

    path: str
    attr: str
    kind: ErrorKind = ErrorKind.INVALID
    message: str | None = None
    when: Callable[[Any], bool] | None = None

    def field_path(self) -> FieldPath:
        return FieldPath(*self.path.split("."))

    def read(self, obj: Any) -> Any:
        return operator.attrgetter(self.attr)(obj)

    def error(self, new_value: Any) -> FieldError:
        leaf = self.path.rsplit(".", 1)[-1]
        message = self.message or f"{leaf} is immutable and cannot be changed"
        value = new_value if self.kind is ErrorKind.INVALID else None
        return FieldError(path=self.field_path(), kind=self.kind, message=message, invalid_value=value)


def diff_immutable_fields(fields: Sequence[ImmutableField], obj: Any, old: Any) -> FieldErrorList:
    errors = FieldErrorList()
    for item in fields:
        if item.when is not None and not item.when(old):
            continue
        new_value = item.read(obj)
        if new_value != item.read(old):
            errors.append(item.error(new_value))
    return errors


def is_ready(obj: Any) -> bool:
    status = getattr(obj, "status", None)
    return status is not None and status.condition_is_true("Ready")


class ResourceValidator:
    kind: ClassVar[str] = ""
    immutable_fields: ClassVar[tuple[ImmutableField, ...]] = ()
    require_old_on_update: ClassVar[bool] = False

    def validate_create(self, obj: Resource | None) -> FieldErrorList:
        return self._validate(obj)

    def validate_update(self, obj: Resource | None, old: Resource | None) -> FieldErrorList:
        errors = self._validate(obj)
        if obj is None:
            return errors
        if old is None:
            if self.require_old_on_update:
                errors.append(required(FieldPath.root(), f"old {self.kind} object cannot be None"))
            return errors
        errors.extend(diff_immutable_fields(self.immutable_fields, obj, old))
        return errors

    def validate_delete(self, obj: Resource | None) -> FieldErrorList:
        return FieldErrorList()

    def validate_status_update(self, obj: Resource | None, old: Resource | None) -> FieldErrorList:
        if obj is None:
            return FieldErrorList([self._missing_object()])
        return self.validate_status(obj)

    def validate_spec(self, obj: Resource) -> FieldErrorList:
        raise NotImplementedError

    def validate_status(self, obj: Resource) -> FieldErrorList:
        return FieldErrorList()

    def _validate(self, obj: Resource | None) -> FieldErrorList:
        if obj is None:
            return FieldErrorList([self._missing_object()])
        errors = validate_object_meta(obj.metadata, FieldPath("metadata"))
        errors.extend(self.validate_spec(obj))
        return errors

    def _missing_object(self) -> FieldError:
        return required(FieldPath.root(), f"{self.kind.lower()} object cannot be None")


__all__ = [
    "ImmutableField",
    "ResourceValidator",
    "diff_immutable_fields",
    "is_ready",
]
