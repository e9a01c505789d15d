from ...canonical.entities import RuleS2S
from ..base import ImmutableField, ResourceValidator
from ..enums import TRAFFIC_DIRECTIONS, validate_required_enum
from ..field import FieldErrorList, FieldPath
from ..references import validate_namespaced_object_reference


class RuleS2SValidator(ResourceValidator):
    """Service-to-service rules connect two service aliases."""

    kind = RuleS2S.KIND
    immutable_fields = (
        ImmutableField("spec.traffic", "spec.traffic"),
        ImmutableField("spec.serviceLocalRef", "spec.service_local_ref"),
        ImmutableField("spec.serviceRef", "spec.service_ref"),
    )

    def validate_spec(self, obj: RuleS2S) -> FieldErrorList:
        path = FieldPath("spec")
        errors = validate_required_enum(obj.spec.traffic, TRAFFIC_DIRECTIONS, path.child("traffic"), "traffic")
        errors.extend(
            validate_namespaced_object_reference(
                obj.spec.service_local_ref,
                "ServiceAlias",
                path.child("serviceLocalRef"),
            )
        )
        errors.extend(
            validate_namespaced_object_reference(obj.spec.service_ref, "ServiceAlias", path.child("serviceRef"))
        )
        return errors


__all__ = ["RuleS2SValidator"]
