from .base import ImmutableField, ResourceValidator, diff_immutable_fields
from .field import ErrorKind, FieldError, FieldErrorList, FieldPath
from .report import ValidationReport, summarize

__all__ = [
    "ErrorKind",
    "FieldError",
    "FieldErrorList",
    "FieldPath",
    "ImmutableField",
    "ResourceValidator",
    "ValidationReport",
    "diff_immutable_fields",
    "summarize",
]
