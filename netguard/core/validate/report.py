"""Validation report types for admission checks."""


from dataclasses import dataclass, field

from .field import ErrorKind, FieldErrorList


@dataclass
class ValidationReport:
    valid: bool
    errors: FieldErrorList = field(default_factory=FieldErrorList)
    message: str = ""

    def counts(self) -> dict[str, int]:
        totals: dict[str, int] = {}
        for err in self.errors:
            totals[err.kind.value] = totals.get(err.kind.value, 0) + 1
        return totals

    def has(self, kind: ErrorKind) -> bool:
        return any(err.kind is kind for err in self.errors)


def summarize(errors: FieldErrorList) -> ValidationReport:
    errors = FieldErrorList(errors)
    return ValidationReport(valid=not errors, errors=errors, message=errors.render())


__all__ = ["ValidationReport", "summarize"]
