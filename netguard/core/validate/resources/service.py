from ...canonical.entities import IngressPort, NamespacedObjectReference, Service
from ..base import ResourceValidator
from ..enums import TRANSPORT_PROTOCOLS, validate_required_enum
from ..field import FieldErrorList, FieldPath, duplicate, required
from ..naming import validate_length
from ..network import validate_port_text
from ..references import validate_namespaced_object_reference

DESCRIPTION_MAX_LENGTH = 512
PORT_DESCRIPTION_MAX_LENGTH = 256


class ServiceValidator(ResourceValidator):
    kind = Service.KIND

    def validate_spec(self, obj: Service) -> FieldErrorList:
        path = FieldPath("spec")
        errors = validate_length(obj.spec.description, path.child("description"), DESCRIPTION_MAX_LENGTH)
        errors.extend(_validate_ingress_ports(obj.spec.ingress_ports, path.child("ingressPorts")))
        errors.extend(
            _validate_address_groups(obj.address_groups.items, FieldPath("addressGroups", "items"))
        )
        return errors


def _validate_ingress_ports(ports: list[IngressPort], path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    seen: set[tuple[str, str]] = set()
    for idx, port in enumerate(ports):
        port_path = path.index(idx)
        errors.extend(_validate_ingress_port(port, port_path))

        key = (port.protocol, port.port)
        if key in seen:
            errors.append(
                duplicate(
                    port_path,
                    f"duplicate port configuration: protocol={port.protocol} port={port.port}",
                )
            )
        seen.add(key)
    return errors


def _validate_ingress_port(port: IngressPort, path: FieldPath) -> FieldErrorList:
    errors = validate_required_enum(port.protocol, TRANSPORT_PROTOCOLS, path.child("protocol"), "protocol")

    port_path = path.child("port")
    if not port.port:
        errors.append(required(port_path, "port is required"))
    else:
        errors.extend(validate_port_text(port.port, port_path))

    errors.extend(validate_length(port.description, path.child("description"), PORT_DESCRIPTION_MAX_LENGTH))
    return errors


def _validate_address_groups(items: list[NamespacedObjectReference], path: FieldPath) -> FieldErrorList:
    errors = FieldErrorList()
    seen: set[NamespacedObjectReference] = set()
    for idx, ref in enumerate(items):
        item_path = path.index(idx)
        errors.extend(validate_namespaced_object_reference(ref, "AddressGroup", item_path))
        if ref is None:
            continue
        if ref in seen:
            errors.append(duplicate(item_path, f"duplicate address group reference: {ref.namespace}/{ref.name}"))
        seen.add(ref)
    return errors


__all__ = ["ServiceValidator"]
