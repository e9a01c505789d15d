from ...canonical.entities import IEAgAgRule
from ..base import ImmutableField, ResourceValidator
from ..enums import (
    TRAFFIC_DIRECTIONS,
    TRANSPORT_PROTOCOLS,
    validate_required_enum,
    validate_rule_action,
)
from ..field import FieldErrorList, FieldPath, invalid
from ..naming import validate_length
from ..network import is_integer_value, validate_port_specs
from ..references import validate_namespaced_object_reference

DESCRIPTION_MAX_LENGTH = 512


class IEAgAgRuleValidator(ResourceValidator):
    """Address-group to address-group rules."""

    kind = IEAgAgRule.KIND
    immutable_fields = (
        ImmutableField("spec.transport", "spec.transport"),
        ImmutableField("spec.traffic", "spec.traffic"),
        ImmutableField("spec.addressGroupLocal", "spec.address_group_local"),
        ImmutableField("spec.addressGroup", "spec.address_group"),
    )

    def validate_spec(self, obj: IEAgAgRule) -> FieldErrorList:
        spec = obj.spec
        path = FieldPath("spec")

        errors = validate_length(spec.description, path.child("description"), DESCRIPTION_MAX_LENGTH)
        errors.extend(validate_required_enum(spec.transport, TRANSPORT_PROTOCOLS, path.child("transport"), "transport"))
        errors.extend(validate_required_enum(spec.traffic, TRAFFIC_DIRECTIONS, path.child("traffic"), "traffic"))
        errors.extend(
            validate_namespaced_object_reference(
                spec.address_group_local,
                "AddressGroup",
                path.child("addressGroupLocal"),
            )
        )
        errors.extend(
            validate_namespaced_object_reference(spec.address_group, "AddressGroup", path.child("addressGroup"))
        )
        errors.extend(validate_port_specs(spec.ports, path.child("ports")))
        errors.extend(validate_rule_action(spec.action, path.child("action")))
        if not is_integer_value(spec.priority):
            errors.append(invalid(path.child("priority"), spec.priority, "priority must be an integer"))
        elif spec.priority < 0:
            errors.append(invalid(path.child("priority"), spec.priority, "priority must be non-negative"))
        return errors


__all__ = ["IEAgAgRuleValidator"]
