"""Naming and length rules shared by every resource kind.

The grammars here are an interoperability contract: client-side tooling
pre-validates names with the same rules, so they must not drift.
"""

from __future__ import annotations

import re

from .field import FieldErrorList, FieldPath, invalid, too_long

DNS1123_LABEL_FMT = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_SUBDOMAIN_FMT = rf"{DNS1123_LABEL_FMT}(\.{DNS1123_LABEL_FMT})*"
DNS1123_SUBDOMAIN_MAX_LENGTH = 253

QUALIFIED_NAME_FMT = r"([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]"
QUALIFIED_NAME_MAX_LENGTH = 63

LABEL_VALUE_FMT = rf"({QUALIFIED_NAME_FMT})?"
LABEL_VALUE_MAX_LENGTH = 63

_DNS1123_SUBDOMAIN_RE = re.compile(DNS1123_SUBDOMAIN_FMT)
_QUALIFIED_NAME_RE = re.compile(QUALIFIED_NAME_FMT)
_LABEL_VALUE_RE = re.compile(LABEL_VALUE_FMT)
_GENERATE_NAME_CHARS_RE = re.compile(r"[a-z0-9.-]*")


def dns1123_subdomain_errors(value: str) -> list[str]:
    errors: list[str] = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        errors.append(f"must be no more than {DNS1123_SUBDOMAIN_MAX_LENGTH} characters")
    if not _DNS1123_SUBDOMAIN_RE.fullmatch(value):
        errors.append(
            "a lowercase RFC 1123 subdomain must consist of lower case alphanumeric characters, "
            "'-' or '.', and must start and end with an alphanumeric character "
            f"(regex used for validation is '{DNS1123_SUBDOMAIN_FMT}')"
        )
    return errors


def is_dns1123_subdomain(value: str) -> bool:
    return not dns1123_subdomain_errors(value)


def generate_name_errors(value: str) -> list[str]:
    if not value:
        return ["cannot be empty"]

    errors: list[str] = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        errors.append(f"must be no more than {DNS1123_SUBDOMAIN_MAX_LENGTH} characters")
    if value[0] in "-.":
        errors.append("must start with an alphanumeric character")
    if not _GENERATE_NAME_CHARS_RE.fullmatch(value):
        position, char = next(
            (idx, ch) for idx, ch in enumerate(value) if not _GENERATE_NAME_CHARS_RE.fullmatch(ch)
        )
        errors.append(
            f"invalid character '{char}' at position {position}: must contain only "
            "lowercase alphanumeric characters, '-' or '.'"
        )
    return errors


def qualified_name_errors(value: str) -> list[str]:
    """Check a label or annotation key of the form ``[prefix/]name``."""
    errors: list[str] = []
    parts = value.split("/")
    if len(parts) == 1:
        name = parts[0]
    elif len(parts) == 2:
        prefix, name = parts
        if not prefix:
            errors.append("prefix part must be non-empty")
        else:
            errors.extend(f"prefix part {msg}" for msg in dns1123_subdomain_errors(prefix))
    else:
        return [
            "a qualified name must consist of alphanumeric characters, '-', '_' or '.', and must "
            "start and end with an alphanumeric character with an optional DNS subdomain prefix "
            "and '/' (e.g. 'example.com/MyName')"
        ]

    if not name:
        errors.append("name part must be non-empty")
    else:
        if len(name) > QUALIFIED_NAME_MAX_LENGTH:
            errors.append(f"name part must be no more than {QUALIFIED_NAME_MAX_LENGTH} characters")
        if not _QUALIFIED_NAME_RE.fullmatch(name):
            errors.append(
                "name part must consist of alphanumeric characters, '-', '_' or '.', and must "
                f"start and end with an alphanumeric character (regex used for validation is '{QUALIFIED_NAME_FMT}')"
            )
    return errors


def label_value_errors(value: str) -> list[str]:
    errors: list[str] = []
    if len(value) > LABEL_VALUE_MAX_LENGTH:
        errors.append(f"must be no more than {LABEL_VALUE_MAX_LENGTH} characters")
    if not _LABEL_VALUE_RE.fullmatch(value):
        errors.append(
            "a valid label must be an empty string or consist of alphanumeric characters, '-', '_' "
            "or '.', and must start and end with an alphanumeric character "
            f"(regex used for validation is '{LABEL_VALUE_FMT}')"
        )
    return errors


def validate_name(value: str, path: FieldPath) -> FieldErrorList:
    """Apply the subdomain rule, reporting at most one ``Invalid`` error."""
    messages = dns1123_subdomain_errors(value)
    if not messages:
        return FieldErrorList()
    return FieldErrorList([invalid(path, value, "; ".join(messages))])


def validate_generate_name(value: str, path: FieldPath) -> FieldErrorList:
    messages = generate_name_errors(value)
    if not messages:
        return FieldErrorList()
    return FieldErrorList([invalid(path, value, "; ".join(messages))])


def validate_length(value: str, path: FieldPath, max_length: int) -> FieldErrorList:
    if len(value) > max_length:
        return FieldErrorList([too_long(path, value, max_length)])
    return FieldErrorList()


__all__ = [
    "DNS1123_SUBDOMAIN_FMT",
    "DNS1123_SUBDOMAIN_MAX_LENGTH",
    "LABEL_VALUE_MAX_LENGTH",
    "QUALIFIED_NAME_MAX_LENGTH",
    "dns1123_subdomain_errors",
    "generate_name_errors",
    "is_dns1123_subdomain",
    "label_value_errors",
    "qualified_name_errors",
    "validate_generate_name",
    "validate_length",
    "validate_name",
]
