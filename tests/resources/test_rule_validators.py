from netguard.core.validate.field import ErrorKind
from netguard.core.validate.resources import IEAgAgRuleValidator, RuleS2SValidator, ServiceAliasValidator
from tests.helpers._resource_builders import build, ref_payload


def _s2s_spec(traffic: str = "INGRESS", local: str = "alias-a", remote: str = "alias-b") -> dict:
    return {
        "traffic": traffic,
        "serviceLocalRef": ref_payload("ServiceAlias", local),
        "serviceRef": ref_payload("ServiceAlias", remote),
    }


def _ieagag_spec(**overrides) -> dict:
    spec = {
        "transport": "TCP",
        "traffic": "EGRESS",
        "addressGroupLocal": ref_payload("AddressGroup", "ag-local"),
        "addressGroup": ref_payload("AddressGroup", "ag-remote"),
        "ports": [{"port": 443}, {"portRange": {"from": 8000, "to": 8080}}],
        "action": "ACCEPT",
        "priority": 100,
    }
    spec.update(overrides)
    return spec


def test_service_alias_reference() -> None:
    ok = build("ServiceAlias", {"serviceRef": ref_payload("Service", "web")})
    wrong = build("ServiceAlias", {"serviceRef": ref_payload("ServiceAlias", "web")})

    assert ServiceAliasValidator().validate_create(ok) == []
    assert ServiceAliasValidator().validate_create(wrong).fields() == ["spec.serviceRef.kind"]


def test_service_alias_reference_is_immutable() -> None:
    old = build("ServiceAlias", {"serviceRef": ref_payload("Service", "web")})
    new = build("ServiceAlias", {"serviceRef": ref_payload("Service", "api")})

    errors = ServiceAliasValidator().validate_update(new, old)

    assert errors.fields() == ["spec.serviceRef"]
    assert errors[0].message == "serviceRef is immutable and cannot be changed"


def test_rule_s2s_valid() -> None:
    assert RuleS2SValidator().validate_create(build("RuleS2S", _s2s_spec())) == []


def test_rule_s2s_traffic_is_required_and_case_sensitive() -> None:
    missing = RuleS2SValidator().validate_create(build("RuleS2S", _s2s_spec(traffic="")))
    lower = RuleS2SValidator().validate_create(build("RuleS2S", _s2s_spec(traffic="ingress")))

    assert [err.kind for err in missing] == [ErrorKind.REQUIRED]
    assert [err.kind for err in lower] == [ErrorKind.NOT_SUPPORTED]
    assert lower[0].field == "spec.traffic"


def test_rule_s2s_immutable_fields() -> None:
    old = build("RuleS2S", _s2s_spec())
    new = build("RuleS2S", _s2s_spec(traffic="EGRESS", remote="alias-c"))

    errors = RuleS2SValidator().validate_update(new, old)

    assert errors.fields() == ["spec.traffic", "spec.serviceRef"]


def test_ieagag_rule_valid() -> None:
    assert IEAgAgRuleValidator().validate_create(build("IEAgAgRule", _ieagag_spec())) == []


def test_ieagag_rule_collects_all_spec_errors() -> None:
    spec = _ieagag_spec(
        transport="ICMP",
        traffic="",
        ports=[{}, {"port": 80, "portRange": {"from": 1, "to": 2}}, {"portRange": {"from": 90, "to": 80}}],
        action="ALLOW",
        priority=-1,
    )

    errors = IEAgAgRuleValidator().validate_create(build("IEAgAgRule", spec))

    assert errors.fields() == [
        "spec.transport",
        "spec.traffic",
        "spec.ports[0]",
        "spec.ports[1]",
        "spec.ports[2].portRange.from",
        "spec.action",
        "spec.priority",
    ]
    assert [err.kind for err in errors] == [
        ErrorKind.NOT_SUPPORTED,
        ErrorKind.REQUIRED,
        ErrorKind.REQUIRED,
        ErrorKind.INVALID,
        ErrorKind.INVALID,
        ErrorKind.NOT_SUPPORTED,
        ErrorKind.INVALID,
    ]


def test_ieagag_rule_port_zero_is_unset() -> None:
    spec = _ieagag_spec(ports=[{"port": 0}])

    errors = IEAgAgRuleValidator().validate_create(build("IEAgAgRule", spec))

    assert [err.kind for err in errors] == [ErrorKind.REQUIRED]
    assert errors[0].field == "spec.ports[0]"


def test_ieagag_rule_description_limit() -> None:
    spec = _ieagag_spec(description="d" * 513)

    errors = IEAgAgRuleValidator().validate_create(build("IEAgAgRule", spec))

    assert [err.kind for err in errors] == [ErrorKind.TOO_LONG]


def test_ieagag_rule_immutable_fields_one_error_each() -> None:
    old = build("IEAgAgRule", _ieagag_spec())
    new = build(
        "IEAgAgRule",
        _ieagag_spec(
            transport="UDP",
            traffic="INGRESS",
            addressGroupLocal=ref_payload("AddressGroup", "other-local"),
            addressGroup=ref_payload("AddressGroup", "other-remote"),
            priority=5,
            action="DROP",
        ),
    )

    errors = IEAgAgRuleValidator().validate_update(new, old)

    assert errors.fields() == [
        "spec.transport",
        "spec.traffic",
        "spec.addressGroupLocal",
        "spec.addressGroup",
    ]
    assert all(err.kind is ErrorKind.INVALID for err in errors)


def test_ieagag_rule_non_integer_values_are_invalid() -> None:
    spec = _ieagag_spec(priority="very-high", ports=[{"port": "https"}, {"port": 80.9}])

    errors = IEAgAgRuleValidator().validate_create(build("IEAgAgRule", spec))

    assert errors.fields() == ["spec.ports[0].port", "spec.ports[1].port", "spec.priority"]
    assert all(err.kind is ErrorKind.INVALID for err in errors)
    assert [err.invalid_value for err in errors] == ["https", 80.9, "very-high"]
    assert errors[2].message == "priority must be an integer"
