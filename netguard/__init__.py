"""Public package entrypoint for the netguard admission engine.

This package validates create, update and delete requests for the
``netguard.sgroups.io/v1beta1`` resource kinds before they are persisted.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "FieldErrorList": ("netguard.core", "FieldErrorList"),
    "FieldPath": ("netguard.core", "FieldPath"),
    "review": ("netguard.core", "review"),
    "validate_create": ("netguard.core", "validate_create"),
    "validate_delete": ("netguard.core", "validate_delete"),
    "validate_update": ("netguard.core", "validate_update"),
}

try:
    __version__ = version("netguard-admission")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "FieldErrorList",
    "FieldPath",
    "__version__",
    "review",
    "validate_create",
    "validate_delete",
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
