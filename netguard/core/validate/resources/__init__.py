"""Per-kind admission validators."""

from .address_group import AddressGroupValidator
from .address_group_binding import AddressGroupBindingValidator
from .address_group_binding_policy import AddressGroupBindingPolicyValidator
from .address_group_port_mapping import AddressGroupPortMappingValidator
from .host import HostValidator
from .host_binding import HostBindingValidator
from .ieagag_rule import IEAgAgRuleValidator
from .network import NetworkValidator
from .network_binding import NetworkBindingValidator
from .rule_s2s import RuleS2SValidator
from .service import ServiceValidator
from .service_alias import ServiceAliasValidator

DEFAULT_VALIDATORS = (
    AddressGroupValidator,
    AddressGroupBindingValidator,
    AddressGroupBindingPolicyValidator,
    AddressGroupPortMappingValidator,
    ServiceValidator,
    ServiceAliasValidator,
    RuleS2SValidator,
    IEAgAgRuleValidator,
    NetworkValidator,
    NetworkBindingValidator,
    HostValidator,
    HostBindingValidator,
)

__all__ = [
    "DEFAULT_VALIDATORS",
    "AddressGroupBindingPolicyValidator",
    "AddressGroupBindingValidator",
    "AddressGroupPortMappingValidator",
    "AddressGroupValidator",
    "HostBindingValidator",
    "HostValidator",
    "IEAgAgRuleValidator",
    "NetworkBindingValidator",
    "NetworkValidator",
    "RuleS2SValidator",
    "ServiceAliasValidator",
    "ServiceValidator",
]
