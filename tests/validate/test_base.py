from dataclasses import dataclass, field

from netguard.core.canonical.entities import AddressGroupSpec, ObjectMeta, Resource
from netguard.core.validate.base import ImmutableField, ResourceValidator, diff_immutable_fields
from netguard.core.validate.field import ErrorKind, FieldErrorList, FieldPath, invalid


@dataclass
class _Widget(Resource):
    KIND = "Widget"
    SPEC_TYPE = AddressGroupSpec

    spec: AddressGroupSpec = field(default_factory=AddressGroupSpec)


class _WidgetValidator(ResourceValidator):
    kind = "Widget"
    immutable_fields = (
        ImmutableField("spec.defaultAction", "spec.default_action"),
        ImmutableField("spec.logs", "spec.logs", kind=ErrorKind.FORBIDDEN, message="logs is locked"),
    )

    def validate_spec(self, obj: _Widget) -> FieldErrorList:
        if obj.spec.trace:
            return FieldErrorList([invalid(FieldPath("spec", "trace"), True, "trace is not allowed")])
        return FieldErrorList()


def _widget(name: str = "w", **spec) -> _Widget:
    return _Widget(metadata=ObjectMeta(name=name), spec=AddressGroupSpec(**spec))


def test_create_none_is_single_root_required() -> None:
    errors = _WidgetValidator().validate_create(None)

    assert len(errors) == 1
    assert errors[0].field == ""
    assert errors[0].message == "widget object cannot be None"


def test_create_runs_metadata_then_spec_without_short_circuit() -> None:
    errors = _WidgetValidator().validate_create(_widget(name="Bad", trace=True))

    assert errors.fields() == ["metadata.name", "spec.trace"]


def test_update_reports_one_error_per_changed_immutable_field() -> None:
    old = _widget(default_action="ACCEPT", logs=False)
    new = _widget(default_action="DROP", logs=True)

    errors = _WidgetValidator().validate_update(new, old)

    assert errors.fields() == ["spec.defaultAction", "spec.logs"]
    assert errors[0].kind is ErrorKind.INVALID
    assert errors[0].message == "defaultAction is immutable and cannot be changed"
    assert errors[0].invalid_value == "DROP"
    assert errors[1].kind is ErrorKind.FORBIDDEN
    assert errors[1].message == "logs is locked"


def test_update_with_identical_objects_is_clean() -> None:
    old = _widget(default_action="ACCEPT")

    assert _WidgetValidator().validate_update(_widget(default_action="ACCEPT"), old) == []


def test_update_without_old_skips_diff_unless_required() -> None:
    class _StrictWidgetValidator(_WidgetValidator):
        require_old_on_update = True

    assert _WidgetValidator().validate_update(_widget(), None) == []
    errors = _StrictWidgetValidator().validate_update(_widget(), None)
    assert [err.kind for err in errors] == [ErrorKind.REQUIRED]
    assert errors[0].field == ""


def test_delete_is_always_clean() -> None:
    assert _WidgetValidator().validate_delete(_widget(name="Bad")) == []
    assert _WidgetValidator().validate_delete(None) == []


def test_when_gate_skips_field() -> None:
    gated = (ImmutableField("spec.defaultAction", "spec.default_action", when=lambda old: False),)

    errors = diff_immutable_fields(gated, _widget(default_action="DROP"), _widget(default_action="ACCEPT"))

    assert errors == []
