from ...canonical.entities import ServiceAlias
from ..base import ImmutableField, ResourceValidator
from ..field import FieldErrorList, FieldPath
from ..references import validate_namespaced_object_reference


class ServiceAliasValidator(ResourceValidator):
    kind = ServiceAlias.KIND
    immutable_fields = (ImmutableField("spec.serviceRef", "spec.service_ref"),)

    def validate_spec(self, obj: ServiceAlias) -> FieldErrorList:
        return validate_namespaced_object_reference(
            obj.spec.service_ref,
            "Service",
            FieldPath("spec", "serviceRef"),
        )


__all__ = ["ServiceAliasValidator"]
