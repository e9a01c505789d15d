from ...canonical.entities import Host, HostStatus
from ..base import ImmutableField, ResourceValidator
from ..field import ErrorKind, FieldErrorList, FieldPath, forbidden, invalid, required
from ..network import validate_uuid

HOST_NAME_MAX_LENGTH = 255


class HostValidator(ResourceValidator):
    kind = Host.KIND
    require_old_on_update = True
    immutable_fields = (
        ImmutableField("spec.uuid", "spec.uuid", kind=ErrorKind.FORBIDDEN, message="UUID is immutable"),
    )

    def validate_spec(self, obj: Host) -> FieldErrorList:
        return validate_uuid(obj.spec.uuid, FieldPath("spec", "uuid"))

    def validate_status(self, obj: Host) -> FieldErrorList:
        return _validate_host_status(obj.status, FieldPath("status"))


def _validate_host_status(status: HostStatus, path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    if len(status.host_name) > HOST_NAME_MAX_LENGTH:
        errors.append(
            invalid(
                path.child("hostName"),
                status.host_name,
                f"hostName cannot exceed {HOST_NAME_MAX_LENGTH} characters",
            )
        )

    if status.is_bound:
        if status.binding_ref is None:
            errors.append(required(path.child("bindingRef"), "bindingRef is required when isBound is true"))
        if status.address_group_ref is None:
            errors.append(
                required(path.child("addressGroupRef"), "addressGroupRef is required when isBound is true")
            )
    else:
        if status.binding_ref is not None:
            errors.append(forbidden(path.child("bindingRef"), "bindingRef must be nil when isBound is false"))
        if status.address_group_ref is not None:
            errors.append(
                forbidden(path.child("addressGroupRef"), "addressGroupRef must be nil when isBound is false")
            )
    return errors


__all__ = ["HostValidator"]
