from ...canonical.entities import AddressGroupBinding
from ..base import ImmutableField, ResourceValidator
from ..field import FieldErrorList, FieldPath
from ..references import validate_namespaced_object_reference


class AddressGroupBindingValidator(ResourceValidator):
    kind = AddressGroupBinding.KIND
    immutable_fields = (
        ImmutableField("spec.serviceRef", "spec.service_ref"),
        ImmutableField("spec.addressGroupRef", "spec.address_group_ref"),
    )

    def validate_spec(self, obj: AddressGroupBinding) -> FieldErrorList:
        path = FieldPath("spec")
        errors = validate_namespaced_object_reference(obj.spec.service_ref, "Service", path.child("serviceRef"))
        errors.extend(
            validate_namespaced_object_reference(
                obj.spec.address_group_ref,
                "AddressGroup",
                path.child("addressGroupRef"),
            )
        )
        return errors


__all__ = ["AddressGroupBindingValidator"]
