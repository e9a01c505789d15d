from ...canonical.entities import NetworkBinding
from ..base import ImmutableField, ResourceValidator, is_ready
from ..field import ErrorKind, FieldErrorList, FieldPath
from ..references import validate_object_reference


class NetworkBindingValidator(ResourceValidator):
    """Bindings attach a cluster-wide network to an address group."""

    kind = NetworkBinding.KIND
    immutable_fields = (
        ImmutableField(
            "spec.networkRef",
            "spec.network_ref",
            kind=ErrorKind.FORBIDDEN,
            message="cannot change networkRef when Ready condition is true",
            when=is_ready,
        ),
        ImmutableField(
            "spec.addressGroupRef",
            "spec.address_group_ref",
            kind=ErrorKind.FORBIDDEN,
            message="cannot change addressGroupRef when Ready condition is true",
            when=is_ready,
        ),
    )

    def validate_spec(self, obj: NetworkBinding) -> FieldErrorList:
        path = FieldPath("spec")
        errors = validate_object_reference(obj.spec.network_ref, "Network", path.child("networkRef"))
        errors.extend(
            validate_object_reference(obj.spec.address_group_ref, "AddressGroup", path.child("addressGroupRef"))
        )
        return errors


__all__ = ["NetworkBindingValidator"]
