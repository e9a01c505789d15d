"""Closed-set value checks.

Comparison is exact and case-sensitive. Empty values are left to required
field checks so the two concerns compose.
"""

from __future__ import annotations

from collections.abc import Sequence

from .field import FieldErrorList, FieldPath, not_supported, required

RULE_ACTIONS: tuple[str, ...] = ("ACCEPT", "DROP")
TRAFFIC_DIRECTIONS: tuple[str, ...] = ("INGRESS", "EGRESS")
TRANSPORT_PROTOCOLS: tuple[str, ...] = ("TCP", "UDP")


def validate_enum(value: str, allowed: Sequence[str], path: FieldPath) -> FieldErrorList:
    if not value or value in allowed:
        return FieldErrorList()
    return FieldErrorList([not_supported(path, value, allowed)])


def validate_required_enum(
    value: str,
    allowed: Sequence[str],
    path: FieldPath,
    field_name: str,
) -> FieldErrorList:
    if not value:
        return FieldErrorList([required(path, f"{field_name} is required")])
    return validate_enum(value, allowed, path)


def validate_rule_action(value: str, path: FieldPath) -> FieldErrorList:
    return validate_enum(value, RULE_ACTIONS, path)


def validate_transport_protocol(value: str, path: FieldPath) -> FieldErrorList:
    return validate_enum(value, TRANSPORT_PROTOCOLS, path)


__all__ = [
    "RULE_ACTIONS",
    "TRAFFIC_DIRECTIONS",
    "TRANSPORT_PROTOCOLS",
    "validate_enum",
    "validate_required_enum",
    "validate_rule_action",
    "validate_transport_protocol",
]
