from ...canonical.entities import HostBinding
from ..base import ImmutableField, ResourceValidator
from ..field import ErrorKind, FieldErrorList, FieldPath, invalid
from ..network import is_integer_value
from ..references import validate_namespaced_object_reference


class HostBindingValidator(ResourceValidator):
    kind = HostBinding.KIND
    require_old_on_update = True
    immutable_fields = (
        ImmutableField("spec.hostRef", "spec.host_ref", kind=ErrorKind.FORBIDDEN, message="hostRef is immutable"),
        ImmutableField(
            "spec.addressGroupRef",
            "spec.address_group_ref",
            kind=ErrorKind.FORBIDDEN,
            message="addressGroupRef is immutable",
        ),
    )

    def validate_spec(self, obj: HostBinding) -> FieldErrorList:
        spec = obj.spec
        path = FieldPath("spec")
        errors = validate_namespaced_object_reference(spec.host_ref, "Host", path.child("hostRef"))
        errors.extend(
            validate_namespaced_object_reference(spec.address_group_ref, "AddressGroup", path.child("addressGroupRef"))
        )
        if (
            spec.host_ref is not None
            and spec.address_group_ref is not None
            and spec.host_ref.name
            and spec.host_ref.name == spec.address_group_ref.name
        ):
            errors.append(
                invalid(
                    path.child("addressGroupRef"),
                    spec.address_group_ref.name,
                    "addressGroupRef cannot reference the same resource as hostRef",
                )
            )
        return errors

    def validate_status(self, obj: HostBinding) -> FieldErrorList:
        generation = obj.status.observed_generation
        path = FieldPath("status", "observedGeneration")
        if not is_integer_value(generation):
            return FieldErrorList([invalid(path, generation, "observedGeneration must be an integer")])
        if generation < 0:
            return FieldErrorList([invalid(path, generation, "observedGeneration cannot be negative")])
        return FieldErrorList()


__all__ = ["HostBindingValidator"]
