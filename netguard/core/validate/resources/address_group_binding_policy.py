from ...canonical.entities import AddressGroupBindingPolicy
from ..base import ImmutableField, ResourceValidator
from ..field import FieldErrorList, FieldPath
from ..references import validate_namespaced_object_reference


class AddressGroupBindingPolicyValidator(ResourceValidator):
    kind = AddressGroupBindingPolicy.KIND
    immutable_fields = (
        ImmutableField("spec.addressGroupRef", "spec.address_group_ref"),
        ImmutableField("spec.serviceRef", "spec.service_ref"),
    )

    def validate_spec(self, obj: AddressGroupBindingPolicy) -> FieldErrorList:
        path = FieldPath("spec")
        errors = validate_namespaced_object_reference(
            obj.spec.address_group_ref,
            "AddressGroup",
            path.child("addressGroupRef"),
        )
        errors.extend(
            validate_namespaced_object_reference(obj.spec.service_ref, "Service", path.child("serviceRef"))
        )
        return errors


__all__ = ["AddressGroupBindingPolicyValidator"]
