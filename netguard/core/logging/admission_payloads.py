from typing import Any

from ..config import get_config
from ..validate.field import FieldErrorList

_MESSAGE_LIMITS = {
    "low": 0,
    "medium": 120,
    "high": 0,
}
_MEDIUM_ERROR_COUNT = 5
_SUPPORTED_VERBOSITIES = {"low", "medium", "high"}


def _truncate(value: str, *, limit: int) -> str:
    if limit <= 0 or len(value) <= limit:
        return value
    return f"{value[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _counts_by_kind(errors: FieldErrorList) -> dict[str, int]:
    counts: dict[str, int] = {}
    for err in errors:
        counts[err.kind.value] = counts.get(err.kind.value, 0) + 1
    return counts


def errors_to_loggable(
    errors: FieldErrorList,
    *,
    kind: str | None = None,
    verbosity: str | None = None,
) -> dict[str, Any]:
    resolved_verbosity = verbosity if verbosity is not None else get_config().log_verbosity
    level = _normalize_verbosity(resolved_verbosity)

    payload: dict[str, Any] = {
        "kind": kind,
        "error_count": len(errors),
        "counts": _counts_by_kind(errors),
    }
    if level == "low":
        return payload

    if level == "high":
        payload["errors"] = [err.error() for err in errors]
        return payload

    payload["fields"] = FieldErrorList(errors).fields()[:_MEDIUM_ERROR_COUNT]
    payload["errors"] = [
        _truncate(err.error(), limit=_MESSAGE_LIMITS["medium"]) for err in errors[:_MEDIUM_ERROR_COUNT]
    ]
    if len(errors) > _MEDIUM_ERROR_COUNT:
        payload["omitted"] = len(errors) - _MEDIUM_ERROR_COUNT
    return payload
