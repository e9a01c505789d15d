"""Port mappings published for an address group.

The mapping carries no spec of its own; its payload is the top-level
``accessPorts`` section listing which service ports are reachable.
"""

from ...canonical.entities import AddressGroupPortMapping, PortConfig, ProtocolPorts, ServicePortsRef
from ..base import ResourceValidator
from ..field import FieldErrorList, FieldPath, required
from ..naming import validate_length
from ..network import validate_port_text
from ..references import validate_namespaced_object_reference

PORT_DESCRIPTION_MAX_LENGTH = 256


class AddressGroupPortMappingValidator(ResourceValidator):
    kind = AddressGroupPortMapping.KIND

    def validate_spec(self, obj: AddressGroupPortMapping) -> FieldErrorList:
        errors = FieldErrorList()
        items_path = FieldPath("accessPorts", "items")
        for idx, item in enumerate(obj.access_ports.items):
            errors.extend(_validate_service_ports_ref(item, items_path.index(idx)))
        return errors


def _validate_service_ports_ref(item: ServicePortsRef, path: FieldPath) -> FieldErrorList:
    errors = validate_namespaced_object_reference(item.ref, "Service", path)
    errors.extend(_validate_protocol_ports(item.ports, path.child("ports")))
    return errors


def _validate_protocol_ports(ports: ProtocolPorts, path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    for protocol, configs in (("TCP", ports.tcp), ("UDP", ports.udp)):
        for idx, config in enumerate(configs):
            errors.extend(_validate_port_config(config, path.child(protocol).index(idx)))
    return errors


def _validate_port_config(config: PortConfig, path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    port_path = path.child("port")
    if not config.port:
        errors.append(required(port_path, "port is required"))
    else:
        errors.extend(validate_port_text(config.port, port_path))
    errors.extend(validate_length(config.description, path.child("description"), PORT_DESCRIPTION_MAX_LENGTH))
    return errors


__all__ = ["AddressGroupPortMappingValidator"]
