"""Stable public API facade for the admission validation engine."""


import json
import logging
from typing import Any

from .canonical.entities import Resource, parse_resource
from .canonical.schemas import AdmissionRequest, AdmissionResponse
from .config import CoreConfig, get_config
from .logging.admission_payloads import errors_to_loggable
from .registry import get_validator
from .validate.base import ResourceValidator
from .validate.field import FieldErrorList
from .validate.report import ValidationReport, summarize

logger = logging.getLogger("netguard.admission")
logger.setLevel(logging.DEBUG if get_config().debug else logging.INFO)


def validate_create(kind: str, obj: Resource | dict[str, Any] | None) -> FieldErrorList:
    validator = _validator_for(kind)
    return validator.validate_create(parse_resource(kind, obj))


def validate_update(
    kind: str,
    obj: Resource | dict[str, Any] | None,
    old: Resource | dict[str, Any] | None,
) -> FieldErrorList:
    validator = _validator_for(kind)
    return validator.validate_update(parse_resource(kind, obj), parse_resource(kind, old))


def validate_delete(kind: str, obj: Resource | dict[str, Any] | None) -> FieldErrorList:
    validator = _validator_for(kind)
    return validator.validate_delete(parse_resource(kind, obj))


def validate_status_update(
    kind: str,
    obj: Resource | dict[str, Any] | None,
    old: Resource | dict[str, Any] | None,
) -> FieldErrorList:
    validator = _validator_for(kind)
    return validator.validate_status_update(parse_resource(kind, obj), parse_resource(kind, old))


def validate(kind: str, obj: Resource | dict[str, Any] | None) -> ValidationReport:
    return summarize(validate_create(kind, obj))


def review(
    request: AdmissionRequest | dict[str, Any],
    *,
    config: CoreConfig | None = None,
) -> AdmissionResponse:
    """Answer one admission request.

    Unknown kinds are rejected in the response rather than raised.
    """
    if not isinstance(request, AdmissionRequest):
        request = AdmissionRequest.model_validate(request)
    config = config or get_config()

    try:
        _validator_for(request.kind)
    except ValueError as exc:
        if config.debug:
            logger.debug("Rejected %s for unknown kind %r", request.operation, request.kind)
        return AdmissionResponse(uid=request.uid, allowed=False, message=str(exc))

    if request.operation == "CREATE":
        errors = validate_create(request.kind, request.object)
    elif request.operation == "UPDATE":
        errors = validate_update(request.kind, request.object, request.old_object)
    else:
        errors = validate_delete(request.kind, request.old_object or request.object)

    report = summarize(errors)
    if config.debug and not report.valid:
        logger.debug(
            "Rejected %s %s:\n%s",
            request.operation,
            request.kind,
            json.dumps(
                errors_to_loggable(errors, kind=request.kind, verbosity=config.log_verbosity),
                ensure_ascii=False,
                indent=2,
            ),
        )
    return AdmissionResponse(
        uid=request.uid,
        allowed=report.valid,
        message=report.message,
        errors=errors.to_dicts(),
    )


def _validator_for(kind: str) -> ResourceValidator:
    try:
        return get_validator(kind)
    except KeyError as exc:
        raise ValueError(f"Unknown resource kind: {kind}") from exc


__all__ = [
    "review",
    "summarize",
    "validate",
    "validate_create",
    "validate_delete",
    "validate_status_update",
    "validate_update",
]
