import pytest

from netguard.core.canonical.entities import (
    AddressGroupPortMapping,
    IEAgAgRule,
    NamespacedObjectReference,
    PortRange,
    Service,
    parse_resource,
)
from tests.helpers._resource_builders import nref, ref_payload, resource_payload


def test_parse_reads_camel_case_fields() -> None:
    obj = parse_resource(
        "IEAgAgRule",
        resource_payload(
            "IEAgAgRule",
            {
                "transport": "TCP",
                "addressGroupLocal": ref_payload("AddressGroup", "ag-1"),
                "ports": [{"portRange": {"from": 10, "to": 20}}],
                "priority": 7,
            },
        ),
    )

    assert isinstance(obj, IEAgAgRule)
    assert obj.spec.address_group_local == nref("AddressGroup", "ag-1")
    assert obj.spec.ports[0].port is None
    assert obj.spec.ports[0].port_range == PortRange(from_=10, to=20)
    assert obj.spec.priority == 7


def test_parse_keeps_text_verbatim() -> None:
    obj = parse_resource("Service", resource_payload("Service", {"description": "  Mixed Case  "}, name=" Web "))

    assert isinstance(obj, Service)
    assert obj.spec.description == "  Mixed Case  "
    assert obj.metadata.name == " Web "


def test_parse_top_level_sections() -> None:
    mapping = parse_resource(
        "AddressGroupPortMapping",
        resource_payload(
            "AddressGroupPortMapping",
            accessPorts={"items": [{**ref_payload("Service", "web"), "ports": {"TCP": [{"port": "80"}]}}]},
        ),
    )

    assert isinstance(mapping, AddressGroupPortMapping)
    assert mapping.access_ports.items[0].ref.name == "web"
    assert mapping.access_ports.items[0].ports.tcp[0].port == "80"


def test_parse_none_and_existing_instances() -> None:
    obj = parse_resource("Service", resource_payload("Service"))

    assert parse_resource("Service", None) is None
    assert parse_resource("Service", obj) is obj


def test_parse_rejects_unknown_kind_and_wrong_shape() -> None:
    with pytest.raises(KeyError):
        parse_resource("Pod", {})
    with pytest.raises(TypeError):
        parse_resource("Service", "web")


def test_references_compare_structurally() -> None:
    assert NamespacedObjectReference.from_payload(ref_payload("Service", "web")) == nref("Service", "web")
    assert nref("Service", "web") != nref("Service", "web", namespace="other")
