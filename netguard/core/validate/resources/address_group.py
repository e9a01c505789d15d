from ...canonical.entities import AddressGroup
from ..base import ResourceValidator
from ..enums import RULE_ACTIONS, validate_required_enum
from ..field import FieldErrorList, FieldPath


class AddressGroupValidator(ResourceValidator):
    kind = AddressGroup.KIND

    def validate_spec(self, obj: AddressGroup) -> FieldErrorList:
        path = FieldPath("spec")
        return validate_required_enum(
            obj.spec.default_action,
            RULE_ACTIONS,
            path.child("defaultAction"),
            "defaultAction",
        )


__all__ = ["AddressGroupValidator"]
