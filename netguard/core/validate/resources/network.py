from ...canonical.entities import Network
from ..base import ImmutableField, ResourceValidator, is_ready
from ..field import ErrorKind, FieldErrorList, FieldPath
from ..network import validate_network_prefix


class NetworkValidator(ResourceValidator):
    kind = Network.KIND
    immutable_fields = (
        ImmutableField(
            "spec.cidr",
            "spec.cidr",
            kind=ErrorKind.FORBIDDEN,
            message="cannot change CIDR when Ready condition is true",
            when=is_ready,
        ),
    )

    def validate_spec(self, obj: Network) -> FieldErrorList:
        return validate_network_prefix(obj.spec.cidr, FieldPath("spec", "cidr"))


__all__ = ["NetworkValidator"]
