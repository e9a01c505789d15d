from netguard.core.validate.field import ErrorKind
from netguard.core.validate.resources import AddressGroupValidator
from tests.helpers._resource_builders import build

VALIDATOR = AddressGroupValidator()


def test_default_action_is_required() -> None:
    errors = VALIDATOR.validate_create(build("AddressGroup", {"defaultAction": ""}))

    assert len(errors) == 1
    assert errors[0].kind is ErrorKind.REQUIRED
    assert errors[0].field == "spec.defaultAction"


def test_unknown_default_action_lists_supported_values() -> None:
    errors = VALIDATOR.validate_create(build("AddressGroup", {"defaultAction": "INVALID"}))

    assert len(errors) == 1
    assert errors[0].kind is ErrorKind.NOT_SUPPORTED
    assert set(errors[0].allowed) == {"ACCEPT", "DROP"}


def test_accept_default_action_is_admissible() -> None:
    assert VALIDATOR.validate_create(build("AddressGroup", {"defaultAction": "ACCEPT"})) == []


def test_default_action_is_case_sensitive() -> None:
    errors = VALIDATOR.validate_create(build("AddressGroup", {"defaultAction": "accept"}))

    assert [err.kind for err in errors] == [ErrorKind.NOT_SUPPORTED]


def test_update_has_no_immutable_fields() -> None:
    old = build("AddressGroup", {"defaultAction": "ACCEPT"})
    new = build("AddressGroup", {"defaultAction": "DROP", "logs": True})

    assert VALIDATOR.validate_update(new, old) == []


def test_create_none_object() -> None:
    errors = VALIDATOR.validate_create(None)

    assert errors.render() == "Required value: addressgroup object cannot be None"
