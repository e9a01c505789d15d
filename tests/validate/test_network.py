from netguard.core.canonical.entities import PortRange, PortSpec
from netguard.core.validate.field import ErrorKind, FieldPath
from netguard.core.validate.network import (
    validate_exactly_one_port_form,
    validate_network_prefix,
    validate_port,
    validate_port_range,
    validate_port_specs,
    validate_port_text,
    validate_uuid,
)

CIDR_PATH = FieldPath("spec", "cidr")


def test_port_bounds() -> None:
    path = FieldPath("spec", "port")

    assert validate_port(1, path) == []
    assert validate_port(65535, path) == []
    assert validate_port(0, path)[0].kind is ErrorKind.INVALID
    assert validate_port(65536, path)[0].message == "port must be between 1 and 65535"


def test_port_range_order_error_is_reported_at_from() -> None:
    errors = validate_port_range(PortRange(from_=100, to=50), FieldPath("spec", "portRange"))

    assert len(errors) == 1
    assert errors[0].field == "spec.portRange.from"
    assert errors[0].kind is ErrorKind.INVALID


def test_port_range_checks_each_bound() -> None:
    errors = validate_port_range(PortRange(from_=0, to=70000), FieldPath("r"))

    assert errors.fields() == ["r.from", "r.to"]


def test_exactly_one_port_form() -> None:
    path = FieldPath("spec", "ports").index(0)

    neither = validate_exactly_one_port_form(None, None, path)
    both = validate_exactly_one_port_form(80, PortRange(from_=1, to=2), path)

    assert [err.kind for err in neither] == [ErrorKind.REQUIRED]
    assert neither[0].message == "either port or portRange must be specified"
    assert [err.kind for err in both] == [ErrorKind.INVALID]
    assert validate_exactly_one_port_form(80, None, path) == []


def test_port_zero_counts_as_unset() -> None:
    path = FieldPath("spec", "ports").index(0)

    assert validate_exactly_one_port_form(0, None, path)[0].kind is ErrorKind.REQUIRED
    assert validate_exactly_one_port_form(0, PortRange(from_=1, to=2), path) == []


def test_port_specs_collect_errors_for_every_item() -> None:
    ports = [
        PortSpec(port=443),
        PortSpec(),
        PortSpec(port_range=PortRange(from_=9000, to=8000)),
    ]

    errors = validate_port_specs(ports, FieldPath("spec", "ports"))

    assert errors.fields() == ["spec.ports[1]", "spec.ports[2].portRange.from"]


def test_port_text() -> None:
    path = FieldPath("spec", "ingressPorts").index(0).child("port")

    assert validate_port_text("80", path) == []
    assert validate_port_text("8000-8080", path) == []
    assert validate_port_text("80-80", path) == []
    assert validate_port_text("http", path)[0].message == "port must be a valid integer"
    assert validate_port_text("0", path)[0].message == "port must be between 1 and 65535"
    assert validate_port_text("1-2-3", path)[0].message == "port range must be in format 'start-end'"
    assert validate_port_text("a-10", path)[0].message == "start port must be a valid integer"
    assert validate_port_text("10-70000", path)[0].message == "end port must be between 1 and 65535"
    assert validate_port_text("90-80", path)[0].message == "start port must be less than or equal to end port"


def test_network_prefix_scenarios() -> None:
    assert validate_network_prefix("192.168.1.0/24", CIDR_PATH) == []

    missing_prefix = validate_network_prefix("192.168.1.0", CIDR_PATH)
    empty = validate_network_prefix("", CIDR_PATH)

    assert [err.kind for err in missing_prefix] == [ErrorKind.INVALID]
    assert [err.kind for err in empty] == [ErrorKind.REQUIRED]
    assert empty[0].field == "spec.cidr"


def test_network_prefix_accepts_host_bits_and_ipv6() -> None:
    assert validate_network_prefix("192.168.1.5/24", CIDR_PATH) == []
    assert validate_network_prefix("2001:db8::/32", CIDR_PATH) == []


def test_network_prefix_rejects_malformed_values() -> None:
    for value in ("10.0.0.0/33", "10.0.0.0/x", "10.0.0/8", "2001:db8::/129", "not-a-cidr/8"):
        errors = validate_network_prefix(value, CIDR_PATH)
        assert [err.kind for err in errors] == [ErrorKind.INVALID], value


def test_uuid() -> None:
    path = FieldPath("spec", "uuid")

    assert validate_uuid("3f2504e0-4f89-11d3-9a0c-0305e82c3301", path) == []
    assert validate_uuid("", path)[0].kind is ErrorKind.REQUIRED
    assert validate_uuid("not-a-uuid", path)[0].kind is ErrorKind.INVALID


def test_port_text_reports_every_bound_and_order_error() -> None:
    path = FieldPath("spec", "ingressPorts").index(0).child("port")

    both_out = validate_port_text("0-70000", path)
    reversed_out = validate_port_text("70000-1", path)

    assert [err.message for err in both_out] == [
        "start port must be between 1 and 65535",
        "end port must be between 1 and 65535",
    ]
    assert [err.message for err in reversed_out] == [
        "start port must be between 1 and 65535",
        "start port must be less than or equal to end port",
    ]
    assert all(err.field == str(path) for err in both_out + reversed_out)


def test_non_integer_port_is_invalid() -> None:
    path = FieldPath("spec", "ports").index(0).child("port")

    for value in ("https", 80.9, True):
        errors = validate_port(value, path)
        assert [err.kind for err in errors] == [ErrorKind.INVALID]
        assert errors[0].invalid_value == value
        assert errors[0].message == "port must be a valid integer"


def test_non_integer_port_counts_as_set() -> None:
    errors = validate_port_specs([PortSpec.from_payload({"port": "https"})], FieldPath("spec", "ports"))

    assert errors.fields() == ["spec.ports[0].port"]
    assert errors[0].kind is ErrorKind.INVALID
    assert errors[0].invalid_value == "https"


def test_port_range_with_non_integer_bound_skips_order_check() -> None:
    port_range = PortRange.from_payload({"from": "8000", "to": 80})

    errors = validate_port_range(port_range, FieldPath("spec", "portRange"))

    assert errors.fields() == ["spec.portRange.from"]
    assert errors[0].message == "port must be a valid integer"
    assert errors[0].invalid_value == "8000"
