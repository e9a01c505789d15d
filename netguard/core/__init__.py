"""Core admission engine API.

The core layer is framework-agnostic and performs no I/O: every validator is
a pure function of the objects handed to it.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AdmissionRequest": ("netguard.core.canonical.schemas", "AdmissionRequest"),
    "AdmissionResponse": ("netguard.core.canonical.schemas", "AdmissionResponse"),
    "CoreConfig": ("netguard.core.config", "CoreConfig"),
    "ErrorKind": ("netguard.core.validate.field", "ErrorKind"),
    "FieldError": ("netguard.core.validate.field", "FieldError"),
    "FieldErrorList": ("netguard.core.validate.field", "FieldErrorList"),
    "FieldPath": ("netguard.core.validate.field", "FieldPath"),
    "ValidationReport": ("netguard.core.validate.report", "ValidationReport"),
    "config_from_env": ("netguard.core.config", "config_from_env"),
    "get_validator": ("netguard.core.registry", "get_validator"),
    "list_kinds": ("netguard.core.registry", "list_kinds"),
    "parse_resource": ("netguard.core.canonical.entities", "parse_resource"),
    "register_validator": ("netguard.core.registry", "register_validator"),
    "review": ("netguard.core.api", "review"),
    "summarize": ("netguard.core.validate.report", "summarize"),
    "validate": ("netguard.core.api", "validate"),
    "validate_create": ("netguard.core.api", "validate_create"),
    "validate_delete": ("netguard.core.api", "validate_delete"),
    "validate_status_update": ("netguard.core.api", "validate_status_update"),
    "validate_update": ("netguard.core.api", "validate_update"),
}

__all__ = [
    "AdmissionRequest",
    "AdmissionResponse",
    "CoreConfig",
    "ErrorKind",
    "FieldError",
    "FieldErrorList",
    "FieldPath",
    "ValidationReport",
    "config_from_env",
    "get_validator",
    "list_kinds",
    "parse_resource",
    "register_validator",
    "review",
    "summarize",
    "validate",
    "validate_create",
    "validate_delete",
    "validate_status_update",
    "validate_update",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
