from dataclasses import dataclass, field
from typing import Any, ClassVar

API_GROUP = "netguard.sgroups.io"
API_VERSION = f"{API_GROUP}/v1beta1"


@dataclass(frozen=True)
class ObjectReference:
    api_version: str = ""
    kind: str = ""
    name: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "ObjectReference":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(
            api_version=_text(data.get("apiVersion")),
            kind=_text(data.get("kind")),
            name=_text(data.get("name")),
        )

    def to_dict(self) -> dict[str, str]:
        return {"apiVersion": self.api_version, "kind": self.kind, "name": self.name}


@dataclass(frozen=True)
class NamespacedObjectReference(ObjectReference):
    namespace: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "NamespacedObjectReference":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(
            api_version=_text(data.get("apiVersion")),
            kind=_text(data.get("kind")),
            name=_text(data.get("name")),
            namespace=_text(data.get("namespace")),
        )

    def to_dict(self) -> dict[str, str]:
        data = super().to_dict()
        data["namespace"] = self.namespace
        return data


@dataclass
class ObjectMeta:
    name: str = ""
    generate_name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.labels = _string_map(self.labels)
        self.annotations = _string_map(self.annotations)

    @classmethod
    def from_payload(cls, payload: Any) -> "ObjectMeta":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(
            name=_text(data.get("name")),
            generate_name=_text(data.get("generateName")),
            namespace=_text(data.get("namespace")),
            labels=data.get("labels") or {},
            annotations=data.get("annotations") or {},
        )


@dataclass(frozen=True)
class Condition:
    type: str
    status: str
    reason: str = ""
    message: str = ""


@dataclass
class ResourceStatus:
    conditions: list[Condition] = field(default_factory=list)
    observed_generation: Any = 0

    def __post_init__(self) -> None:
        self.conditions = _conditions_from_payload(self.conditions)

    @classmethod
    def from_payload(cls, payload: Any) -> "ResourceStatus":
        if isinstance(payload, ResourceStatus):
            return payload
        data = _mapping(payload)
        return cls(
            conditions=data.get("conditions") or [],
            observed_generation=_number(data.get("observedGeneration"), default=0),
        )

    def condition_is_true(self, condition_type: str) -> bool:
        return any(
            condition.type == condition_type and condition.status == "True"
            for condition in self.conditions
        )


@dataclass(frozen=True)
class PortRange:
    from_: Any
    to: Any

    @classmethod
    def from_payload(cls, payload: Any) -> "PortRange":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(from_=_number(data.get("from"), default=0), to=_number(data.get("to"), default=0))


@dataclass(frozen=True)
class PortSpec:
    port: Any = None
    port_range: PortRange | None = None

    def __post_init__(self) -> None:
        if isinstance(self.port_range, dict):
            object.__setattr__(self, "port_range", PortRange.from_payload(self.port_range))

    @classmethod
    def from_payload(cls, payload: Any) -> "PortSpec":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        raw_range = data.get("portRange")
        return cls(
            port=_number(data.get("port")),
            port_range=PortRange.from_payload(raw_range) if raw_range is not None else None,
        )


@dataclass(frozen=True)
class IngressPort:
    protocol: str = ""
    port: str = ""
    description: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "IngressPort":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(
            protocol=_text(data.get("protocol")),
            port=_text(data.get("port")),
            description=_text(data.get("description")),
        )


@dataclass(frozen=True)
class PortConfig:
    port: str = ""
    description: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "PortConfig":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(port=_text(data.get("port")), description=_text(data.get("description")))


@dataclass
class ProtocolPorts:
    tcp: list[PortConfig] = field(default_factory=list)
    udp: list[PortConfig] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.tcp = [PortConfig.from_payload(item) for item in self.tcp or []]
        self.udp = [PortConfig.from_payload(item) for item in self.udp or []]

    @classmethod
    def from_payload(cls, payload: Any) -> "ProtocolPorts":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(tcp=data.get("TCP") or [], udp=data.get("UDP") or [])


@dataclass
class ServicePortsRef:
    ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    ports: ProtocolPorts = field(default_factory=ProtocolPorts)

    def __post_init__(self) -> None:
        if isinstance(self.ref, dict):
            self.ref = NamespacedObjectReference.from_payload(self.ref)
        if isinstance(self.ports, dict):
            self.ports = ProtocolPorts.from_payload(self.ports)

    @classmethod
    def from_payload(cls, payload: Any) -> "ServicePortsRef":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        # The reference fields are inlined next to ``ports`` on the wire.
        return cls(
            ref=NamespacedObjectReference.from_payload(data),
            ports=ProtocolPorts.from_payload(data.get("ports")),
        )


# --- Resource specs -------------------------------------------------------


@dataclass
class AddressGroupSpec:
    default_action: str = ""
    logs: bool = False
    trace: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> "AddressGroupSpec":
        data = _mapping(payload)
        return cls(
            default_action=_text(data.get("defaultAction")),
            logs=bool(data.get("logs", False)),
            trace=bool(data.get("trace", False)),
        )


@dataclass
class AddressGroupBindingSpec:
    service_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    address_group_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)

    @classmethod
    def from_payload(cls, payload: Any) -> "AddressGroupBindingSpec":
        data = _mapping(payload)
        return cls(
            service_ref=NamespacedObjectReference.from_payload(data.get("serviceRef")),
            address_group_ref=NamespacedObjectReference.from_payload(data.get("addressGroupRef")),
        )


@dataclass
class AddressGroupBindingPolicySpec:
    address_group_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    service_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)

    @classmethod
    def from_payload(cls, payload: Any) -> "AddressGroupBindingPolicySpec":
        data = _mapping(payload)
        return cls(
            address_group_ref=NamespacedObjectReference.from_payload(data.get("addressGroupRef")),
            service_ref=NamespacedObjectReference.from_payload(data.get("serviceRef")),
        )


@dataclass
class AddressGroupPortMappingSpec:
    @classmethod
    def from_payload(cls, payload: Any) -> "AddressGroupPortMappingSpec":
        return cls()


@dataclass
class AccessPortsSpec:
    items: list[ServicePortsRef] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = [ServicePortsRef.from_payload(item) for item in self.items or []]

    @classmethod
    def from_payload(cls, payload: Any) -> "AccessPortsSpec":
        return cls(items=_mapping(payload).get("items") or [])


@dataclass
class ServiceSpec:
    description: str = ""
    ingress_ports: list[IngressPort] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ingress_ports = [IngressPort.from_payload(item) for item in self.ingress_ports or []]

    @classmethod
    def from_payload(cls, payload: Any) -> "ServiceSpec":
        data = _mapping(payload)
        return cls(
            description=_text(data.get("description")),
            ingress_ports=data.get("ingressPorts") or [],
        )


@dataclass
class AddressGroupsSpec:
    items: list[NamespacedObjectReference] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = [NamespacedObjectReference.from_payload(item) for item in self.items or []]

    @classmethod
    def from_payload(cls, payload: Any) -> "AddressGroupsSpec":
        return cls(items=_mapping(payload).get("items") or [])


@dataclass
class ServiceAliasSpec:
    service_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)

    @classmethod
    def from_payload(cls, payload: Any) -> "ServiceAliasSpec":
        return cls(service_ref=NamespacedObjectReference.from_payload(_mapping(payload).get("serviceRef")))


@dataclass
class RuleS2SSpec:
    traffic: str = ""
    service_local_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    service_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    trace: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> "RuleS2SSpec":
        data = _mapping(payload)
        return cls(
            traffic=_text(data.get("traffic")),
            service_local_ref=NamespacedObjectReference.from_payload(data.get("serviceLocalRef")),
            service_ref=NamespacedObjectReference.from_payload(data.get("serviceRef")),
            trace=bool(data.get("trace", False)),
        )


@dataclass
class IEAgAgRuleSpec:
    description: str = ""
    transport: str = ""
    traffic: str = ""
    address_group_local: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    address_group: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    ports: list[PortSpec] = field(default_factory=list)
    action: str = ""
    priority: Any = 0
    trace: bool = False

    def __post_init__(self) -> None:
        self.ports = [PortSpec.from_payload(item) for item in self.ports or []]

    @classmethod
    def from_payload(cls, payload: Any) -> "IEAgAgRuleSpec":
        data = _mapping(payload)
        return cls(
            description=_text(data.get("description")),
            transport=_text(data.get("transport")),
            traffic=_text(data.get("traffic")),
            address_group_local=NamespacedObjectReference.from_payload(data.get("addressGroupLocal")),
            address_group=NamespacedObjectReference.from_payload(data.get("addressGroup")),
            ports=data.get("ports") or [],
            action=_text(data.get("action")),
            priority=_number(data.get("priority"), default=0),
            trace=bool(data.get("trace", False)),
        )


@dataclass
class NetworkSpec:
    cidr: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "NetworkSpec":
        return cls(cidr=_text(_mapping(payload).get("cidr")))


@dataclass
class NetworkBindingSpec:
    network_ref: ObjectReference = field(default_factory=ObjectReference)
    address_group_ref: ObjectReference = field(default_factory=ObjectReference)

    @classmethod
    def from_payload(cls, payload: Any) -> "NetworkBindingSpec":
        data = _mapping(payload)
        return cls(
            network_ref=ObjectReference.from_payload(data.get("networkRef")),
            address_group_ref=ObjectReference.from_payload(data.get("addressGroupRef")),
        )


@dataclass
class HostSpec:
    uuid: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "HostSpec":
        return cls(uuid=_text(_mapping(payload).get("uuid")))


@dataclass
class HostBindingSpec:
    host_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)
    address_group_ref: NamespacedObjectReference = field(default_factory=NamespacedObjectReference)

    @classmethod
    def from_payload(cls, payload: Any) -> "HostBindingSpec":
        data = _mapping(payload)
        return cls(
            host_ref=NamespacedObjectReference.from_payload(data.get("hostRef")),
            address_group_ref=NamespacedObjectReference.from_payload(data.get("addressGroupRef")),
        )


@dataclass
class BindableStatus(ResourceStatus):
    """Status shape shared by resources that can be bound to an address group."""

    is_bound: bool = False
    binding_ref: ObjectReference | None = None
    address_group_ref: ObjectReference | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.binding_ref, dict):
            self.binding_ref = ObjectReference.from_payload(self.binding_ref)
        if isinstance(self.address_group_ref, dict):
            self.address_group_ref = ObjectReference.from_payload(self.address_group_ref)


@dataclass
class NetworkStatus(BindableStatus):
    network_name: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "NetworkStatus":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(
            conditions=data.get("conditions") or [],
            observed_generation=_number(data.get("observedGeneration"), default=0),
            is_bound=bool(data.get("isBound", False)),
            binding_ref=data.get("bindingRef"),
            address_group_ref=data.get("addressGroupRef"),
            network_name=_text(data.get("networkName")),
        )


@dataclass
class HostStatus(BindableStatus):
    host_name: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "HostStatus":
        if isinstance(payload, cls):
            return payload
        data = _mapping(payload)
        return cls(
            conditions=data.get("conditions") or [],
            observed_generation=_number(data.get("observedGeneration"), default=0),
            is_bound=bool(data.get("isBound", False)),
            binding_ref=data.get("bindingRef"),
            address_group_ref=data.get("addressGroupRef"),
            host_name=_text(data.get("hostName")),
        )


# --- Resources ------------------------------------------------------------


@dataclass
class Resource:
    """Common envelope of every validated resource kind."""

    KIND: ClassVar[str] = ""
    SPEC_TYPE: ClassVar[type] = dict
    STATUS_TYPE: ClassVar[type] = ResourceStatus

    metadata: ObjectMeta = field(default_factory=ObjectMeta)

    def __post_init__(self) -> None:
        if not isinstance(self.metadata, ObjectMeta):
            self.metadata = ObjectMeta.from_payload(self.metadata)
        spec = getattr(self, "spec", None)
        if not isinstance(spec, self.SPEC_TYPE):
            self.spec = self.SPEC_TYPE.from_payload(spec)
        status = getattr(self, "status", None)
        if not isinstance(status, self.STATUS_TYPE):
            self.status = self.STATUS_TYPE.from_payload(status)

    def is_ready(self) -> bool:
        return self.status.condition_is_true("Ready")


@dataclass
class AddressGroup(Resource):
    KIND: ClassVar[str] = "AddressGroup"
    SPEC_TYPE: ClassVar[type] = AddressGroupSpec

    spec: AddressGroupSpec = field(default_factory=AddressGroupSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


@dataclass
class AddressGroupBinding(Resource):
    KIND: ClassVar[str] = "AddressGroupBinding"
    SPEC_TYPE: ClassVar[type] = AddressGroupBindingSpec

    spec: AddressGroupBindingSpec = field(default_factory=AddressGroupBindingSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


@dataclass
class AddressGroupBindingPolicy(Resource):
    KIND: ClassVar[str] = "AddressGroupBindingPolicy"
    SPEC_TYPE: ClassVar[type] = AddressGroupBindingPolicySpec

    spec: AddressGroupBindingPolicySpec = field(default_factory=AddressGroupBindingPolicySpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


@dataclass
class AddressGroupPortMapping(Resource):
    KIND: ClassVar[str] = "AddressGroupPortMapping"
    SPEC_TYPE: ClassVar[type] = AddressGroupPortMappingSpec

    spec: AddressGroupPortMappingSpec = field(default_factory=AddressGroupPortMappingSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)
    access_ports: AccessPortsSpec = field(default_factory=AccessPortsSpec)

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.access_ports, AccessPortsSpec):
            self.access_ports = AccessPortsSpec.from_payload(self.access_ports)


@dataclass
class Service(Resource):
    KIND: ClassVar[str] = "Service"
    SPEC_TYPE: ClassVar[type] = ServiceSpec

    spec: ServiceSpec = field(default_factory=ServiceSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)
    address_groups: AddressGroupsSpec = field(default_factory=AddressGroupsSpec)

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.address_groups, AddressGroupsSpec):
            self.address_groups = AddressGroupsSpec.from_payload(self.address_groups)


@dataclass
class ServiceAlias(Resource):
    KIND: ClassVar[str] = "ServiceAlias"
    SPEC_TYPE: ClassVar[type] = ServiceAliasSpec

    spec: ServiceAliasSpec = field(default_factory=ServiceAliasSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


@dataclass
class RuleS2S(Resource):
    KIND: ClassVar[str] = "RuleS2S"
    SPEC_TYPE: ClassVar[type] = RuleS2SSpec

    spec: RuleS2SSpec = field(default_factory=RuleS2SSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


@dataclass
class IEAgAgRule(Resource):
    KIND: ClassVar[str] = "IEAgAgRule"
    SPEC_TYPE: ClassVar[type] = IEAgAgRuleSpec

    spec: IEAgAgRuleSpec = field(default_factory=IEAgAgRuleSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


@dataclass
class Network(Resource):
    KIND: ClassVar[str] = "Network"
    SPEC_TYPE: ClassVar[type] = NetworkSpec
    STATUS_TYPE: ClassVar[type] = NetworkStatus

    spec: NetworkSpec = field(default_factory=NetworkSpec)
    status: NetworkStatus = field(default_factory=NetworkStatus)


@dataclass
class NetworkBinding(Resource):
    KIND: ClassVar[str] = "NetworkBinding"
    SPEC_TYPE: ClassVar[type] = NetworkBindingSpec

    spec: NetworkBindingSpec = field(default_factory=NetworkBindingSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


@dataclass
class Host(Resource):
    KIND: ClassVar[str] = "Host"
    SPEC_TYPE: ClassVar[type] = HostSpec
    STATUS_TYPE: ClassVar[type] = HostStatus

    spec: HostSpec = field(default_factory=HostSpec)
    status: HostStatus = field(default_factory=HostStatus)


@dataclass
class HostBinding(Resource):
    KIND: ClassVar[str] = "HostBinding"
    SPEC_TYPE: ClassVar[type] = HostBindingSpec

    spec: HostBindingSpec = field(default_factory=HostBindingSpec)
    status: ResourceStatus = field(default_factory=ResourceStatus)


RESOURCE_TYPES: dict[str, type[Resource]] = {
    resource_type.KIND: resource_type
    for resource_type in (
        AddressGroup,
        AddressGroupBinding,
        AddressGroupBindingPolicy,
        AddressGroupPortMapping,
        Service,
        ServiceAlias,
        RuleS2S,
        IEAgAgRule,
        Network,
        NetworkBinding,
        Host,
        HostBinding,
    )
}


def parse_resource(kind: str, payload: Any) -> Resource | None:
    """Build the resource dataclass for ``kind`` from a camelCase payload.

    ``None`` passes through so callers can still report a missing object.
    """
    if payload is None:
        return None
    resource_type = RESOURCE_TYPES.get(kind)
    if resource_type is None:
        raise KeyError(f"Unknown resource kind: {kind}")
    if isinstance(payload, resource_type):
        return payload
    if not isinstance(payload, dict):
        raise TypeError(f"{kind} payload must be a mapping, got {type(payload).__name__}")

    kwargs: dict[str, Any] = {
        "metadata": payload.get("metadata") or {},
        "spec": payload.get("spec") or {},
        "status": payload.get("status") or {},
    }
    if resource_type is AddressGroupPortMapping:
        kwargs["access_ports"] = payload.get("accessPorts") or {}
    if resource_type is Service:
        kwargs["address_groups"] = payload.get("addressGroups") or {}
    return resource_type(**kwargs)


def _mapping(payload: Any) -> dict[str, Any]:
    return payload if isinstance(payload, dict) else {}


def _text(value: Any) -> str:
    # No trimming or case folding: validation must see the exact submitted text.
    if value is None:
        return ""
    return str(value)


def _number(value: Any, default: int | None = None) -> Any:
    # Non-integer payload values are kept as-is so validators can report them.
    if value is None:
        return default
    return value


def _string_map(values: Any) -> dict[str, str]:
    if not isinstance(values, dict):
        return {}
    return {str(key): _text(value) for key, value in values.items()}


def _conditions_from_payload(values: Any) -> list[Condition]:
    conditions: list[Condition] = []
    for item in values or []:
        if isinstance(item, Condition):
            conditions.append(item)
        elif isinstance(item, dict):
            conditions.append(
                Condition(
                    type=_text(item.get("type")),
                    status=_text(item.get("status")),
                    reason=_text(item.get("reason")),
                    message=_text(item.get("message")),
                )
            )
    return conditions
