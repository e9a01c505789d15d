"""Field-addressed validation errors.

Every validator in the engine reports violations as ``FieldError`` records
collected into a ``FieldErrorList``. Errors are plain values: they carry the
location of the violation (``FieldPath``), a closed ``ErrorKind``, the
offending value where one exists, and a human readable detail message.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class ErrorKind(str, Enum):
    REQUIRED = "Required"
    INVALID = "Invalid"
    NOT_SUPPORTED = "NotSupported"
    TOO_LONG = "TooLong"
    DUPLICATE = "Duplicate"
    FORBIDDEN = "Forbidden"

    @property
    def description(self) -> str:
        return _KIND_DESCRIPTIONS[self]


_KIND_DESCRIPTIONS = {
    ErrorKind.REQUIRED: "Required value",
    ErrorKind.INVALID: "Invalid value",
    ErrorKind.NOT_SUPPORTED: "Unsupported value",
    ErrorKind.TOO_LONG: "Too long",
    ErrorKind.DUPLICATE: "Duplicate value",
    ErrorKind.FORBIDDEN: "Forbidden",
}


@dataclass(frozen=True)
class FieldPath:
    """Immutable locator into the object under validation.

    ``FieldPath("spec").child("ingressPorts").index(2).child("port")`` renders
    as ``spec.ingressPorts[2].port``. Map entries use ``key``:
    ``FieldPath("metadata").child("labels").key("app")`` renders as
    ``metadata.labels[app]``.
    """

    parts: tuple[str, ...] = ()

    def __init__(self, *names: str) -> None:
        object.__setattr__(self, "parts", tuple(name for name in names if name))

    @classmethod
    def root(cls) -> FieldPath:
        return cls()

    @classmethod
    def _from_parts(cls, parts: tuple[str, ...]) -> FieldPath:
        path = cls()
        object.__setattr__(path, "parts", parts)
        return path

    def child(self, name: str, *more: str) -> FieldPath:
        return self._from_parts(self.parts + tuple(n for n in (name, *more) if n))

    def index(self, position: int) -> FieldPath:
        return self._from_parts(self.parts + (f"[{position}]",))

    def key(self, name: str) -> FieldPath:
        return self._from_parts(self.parts + (f"[{name}]",))

    @property
    def is_root(self) -> bool:
        return not self.parts

    def __str__(self) -> str:
        rendered = ""
        for part in self.parts:
            if part.startswith("[") or not rendered:
                rendered += part
            else:
                rendered += f".{part}"
        return rendered


@dataclass(frozen=True)
class FieldError:
    path: FieldPath
    kind: ErrorKind
    message: str = ""
    invalid_value: Any = None
    allowed: tuple[str, ...] = ()

    @property
    def field(self) -> str:
        return str(self.path)

    def body(self) -> str:
        text = self.kind.description
        if self.kind in (ErrorKind.INVALID, ErrorKind.NOT_SUPPORTED):
            text += f": {format_value(self.invalid_value)}"
        if self.message:
            text += f": {self.message}"
        return text

    def error(self) -> str:
        if self.path.is_root:
            return self.body()
        return f"{self.path}: {self.body()}"

    def __str__(self) -> str:
        return self.error()

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "type": self.kind.value,
            "value": _jsonable(self.invalid_value),
            "message": self.message,
            "error": self.error(),
        }


class FieldErrorList(list):
    """Ordered collection of ``FieldError`` in discovery order."""

    def __add__(self, other: Iterable[FieldError]) -> FieldErrorList:  # type: ignore[override]
        return FieldErrorList([*self, *other])

    def of_kind(self, kind: ErrorKind) -> FieldErrorList:
        return FieldErrorList(err for err in self if err.kind is kind)

    def at(self, path: FieldPath | str) -> FieldErrorList:
        wanted = str(path)
        return FieldErrorList(err for err in self if err.field == wanted)

    def fields(self) -> list[str]:
        return [err.field for err in self]

    def render(self) -> str:
        messages = [err.error() for err in self]
        if not messages:
            return ""
        if len(messages) == 1:
            return messages[0]
        return f"[{', '.join(messages)}]"

    def to_dicts(self) -> list[dict[str, Any]]:
        return [err.to_dict() for err in self]


def required(path: FieldPath, message: str = "") -> FieldError:
    return FieldError(path=path, kind=ErrorKind.REQUIRED, message=message)


def invalid(path: FieldPath, value: Any, message: str = "") -> FieldError:
    return FieldError(path=path, kind=ErrorKind.INVALID, message=message, invalid_value=value)


def not_supported(path: FieldPath, value: Any, allowed: Iterable[str]) -> FieldError:
    allowed_values = tuple(allowed)
    message = ""
    if allowed_values:
        message = "supported values: " + ", ".join(format_value(item) for item in allowed_values)
    return FieldError(
        path=path,
        kind=ErrorKind.NOT_SUPPORTED,
        message=message,
        invalid_value=value,
        allowed=allowed_values,
    )


def too_long(path: FieldPath, value: Any, max_length: int) -> FieldError:
    return FieldError(
        path=path,
        kind=ErrorKind.TOO_LONG,
        message=f"may not be longer than {max_length}",
        invalid_value=value,
    )


def duplicate(path: FieldPath, message: str = "") -> FieldError:
    return FieldError(path=path, kind=ErrorKind.DUPLICATE, message=message)


def forbidden(path: FieldPath, message: str = "") -> FieldError:
    return FieldError(path=path, kind=ErrorKind.FORBIDDEN, message=message)


def format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (int, float)):
        return str(value)
    return repr(value)


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if callable(getattr(value, "to_dict", None)):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return str(value)


__all__ = [
    "ErrorKind",
    "FieldError",
    "FieldErrorList",
    "FieldPath",
    "duplicate",
    "forbidden",
    "format_value",
    "invalid",
    "not_supported",
    "required",
    "too_long",
]
