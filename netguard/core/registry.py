"""Registry mapping resource kinds to their admission validators."""


from dataclasses import dataclass, field

from .validate.base import ResourceValidator


@dataclass
class Registry:
    validators: dict[str, ResourceValidator] = field(default_factory=dict)

    def register_validator(self, kind: str, validator: ResourceValidator) -> None:
        self.validators[str(kind).strip()] = validator

    def get_validator(self, kind: str) -> ResourceValidator:
        normalized = str(kind).strip()
        validator = self.validators.get(normalized)
        if validator is None:
            raise KeyError(f"No validator registered for kind: {normalized}")
        return validator

    def list_kinds(self) -> list[str]:
        return sorted(self.validators.keys())


_registry = Registry()


def register_validator(kind: str, validator: ResourceValidator) -> None:
    _registry.register_validator(kind, validator)


def get_validator(kind: str) -> ResourceValidator:
    return _registry.get_validator(kind)


def list_kinds() -> list[str]:
    return _registry.list_kinds()


def _register_defaults() -> None:
    from .validate.resources import DEFAULT_VALIDATORS

    for validator_type in DEFAULT_VALIDATORS:
        if validator_type.kind not in _registry.validators:
            _registry.register_validator(validator_type.kind, validator_type())


_register_defaults()


__all__ = [
    "Registry",
    "get_validator",
    "list_kinds",
    "register_validator",
]
