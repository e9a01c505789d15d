"""Port, port-range and network-prefix checks."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Sequence
from typing import Any

from ..canonical.entities import PortRange, PortSpec
from .field import FieldErrorList, FieldPath, invalid, required

MIN_PORT = 1
MAX_PORT = 65535

_DECIMAL_RE = re.compile(r"[0-9]+")
_UUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def is_integer_value(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_port_set(port: Any) -> bool:
    # Port 0 is the unset value.
    return port is not None and not (is_integer_value(port) and port == 0)


def validate_port(port: Any, path: FieldPath) -> FieldErrorList:
    if not is_integer_value(port):
        return FieldErrorList([invalid(path, port, "port must be a valid integer")])
    if MIN_PORT <= port <= MAX_PORT:
        return FieldErrorList()
    return FieldErrorList([invalid(path, port, f"port must be between {MIN_PORT} and {MAX_PORT}")])


def validate_port_range(port_range: PortRange, path: FieldPath) -> FieldErrorList:
    """Check both bounds, then their order.

    The ordering error is reported against the ``from`` bound and only when
    both bounds are integers.
    """
    from_path = path.child("from")
    errors = validate_port(port_range.from_, from_path)
    errors.extend(validate_port(port_range.to, path.child("to")))
    if not (is_integer_value(port_range.from_) and is_integer_value(port_range.to)):
        return errors
    if port_range.from_ > port_range.to:
        errors.append(
            invalid(from_path, port_range.from_, "from port must be less than or equal to to port")
        )
    return errors


def validate_exactly_one_port_form(
    port: Any,
    port_range: PortRange | None,
    path: FieldPath,
) -> FieldErrorList:
    has_port = is_port_set(port)
    has_range = port_range is not None
    if not has_port and not has_range:
        return FieldErrorList([required(path, "either port or portRange must be specified")])
    if has_port and has_range:
        return FieldErrorList([invalid(path, port, "cannot specify both port and portRange")])
    return FieldErrorList()


def validate_port_specs(ports: Sequence[PortSpec], path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    for idx, spec in enumerate(ports):
        item_path = path.index(idx)
        errors.extend(validate_exactly_one_port_form(spec.port, spec.port_range, item_path))
        if is_port_set(spec.port):
            errors.extend(validate_port(spec.port, item_path.child("port")))
        if spec.port_range is not None:
            errors.extend(validate_port_range(spec.port_range, item_path.child("portRange")))
    return errors


def validate_port_text(text: str, path: FieldPath) -> FieldErrorList:
    """Validate a single port ``"80"`` or an inclusive range ``"8000-8080"``."""
    if "-" not in text:
        if not _DECIMAL_RE.fullmatch(text):
            return FieldErrorList([invalid(path, text, "port must be a valid integer")])
        if not MIN_PORT <= int(text) <= MAX_PORT:
            return FieldErrorList([invalid(path, text, f"port must be between {MIN_PORT} and {MAX_PORT}")])
        return FieldErrorList()

    bounds = text.split("-")
    if len(bounds) != 2:
        return FieldErrorList([invalid(path, text, "port range must be in format 'start-end'")])

    start, end = bounds
    for label, bound in (("start", start), ("end", end)):
        if not _DECIMAL_RE.fullmatch(bound):
            return FieldErrorList([invalid(path, text, f"{label} port must be a valid integer")])
    errors = FieldErrorList()
    for label, bound in (("start", start), ("end", end)):
        if not MIN_PORT <= int(bound) <= MAX_PORT:
            errors.append(invalid(path, text, f"{label} port must be between {MIN_PORT} and {MAX_PORT}"))
    if int(start) > int(end):
        errors.append(invalid(path, text, "start port must be less than or equal to end port"))
    return errors


def validate_network_prefix(text: str, path: FieldPath) -> FieldErrorList:
    if not text:
        return FieldErrorList([required(path, "CIDR cannot be empty")])
    if not _is_network_prefix(text):
        return FieldErrorList([invalid(path, text, "must be a valid CIDR notation")])
    return FieldErrorList()


def validate_uuid(text: str, path: FieldPath) -> FieldErrorList:
    if not text:
        return FieldErrorList([required(path, "UUID is required")])
    if not _UUID_RE.fullmatch(text):
        return FieldErrorList([invalid(path, text, "UUID must be in valid UUID format")])
    return FieldErrorList()


def _is_network_prefix(text: str) -> bool:
    address, sep, prefix = text.partition("/")
    if not sep or not _DECIMAL_RE.fullmatch(prefix) or "%" in address:
        return False
    try:
        ipaddress.ip_network(text, strict=False)
    except ValueError:
        return False
    return True


__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "is_integer_value",
    "is_port_set",
    "validate_exactly_one_port_form",
    "validate_network_prefix",
    "validate_port",
    "validate_port_range",
    "validate_port_specs",
    "validate_port_text",
    "validate_uuid",
]
