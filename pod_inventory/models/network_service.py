"""
Network service data model - Value Object pattern.
Immutable snapshot of a managed service's network identity and
per-protocol reachability.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from pydantic import StrictStr

from .network_protocol import NetworkProtocol
from .status import Health, State

# Protocol attributes, in wire order
PROTOCOL_FIELDS = (
    "http",
    "https",
    "ipmi",
    "ssh",
    "snmp",
    "virtual_media",
    "ssdp",
    "telnet",
    "kvmip",
)


@dataclass(frozen=True)
class NetworkService:
    """
    Immutable network service descriptor.

    Every attribute is optional and independently set; no cross-field
    validation is performed.

    Attributes:
        name: Display label
        description: Free-text description
        state: Lifecycle state
        health: Health status
        host_name: Short host name (e.g., 'rack1-node3')
        fqdn: Fully qualified domain name
        http, https, ipmi, ssh, snmp, virtual_media, ssdp, telnet, kvmip:
            Per-protocol endpoint settings
    """
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    state: Optional[State] = None
    health: Optional[Health] = None
    host_name: Optional[StrictStr] = None
    fqdn: Optional[StrictStr] = None
    http: Optional[NetworkProtocol] = None
    https: Optional[NetworkProtocol] = None
    ipmi: Optional[NetworkProtocol] = None
    ssh: Optional[NetworkProtocol] = None
    snmp: Optional[NetworkProtocol] = None
    virtual_media: Optional[NetworkProtocol] = None
    ssdp: Optional[NetworkProtocol] = None
    telnet: Optional[NetworkProtocol] = None
    kvmip: Optional[NetworkProtocol] = None

    def protocols(self) -> Dict[str, NetworkProtocol]:
        """
        Get the protocols that are present on this service.

        Returns:
            Mapping of protocol attribute name to its settings, in wire order
        """
        present = {}
        for field_name in PROTOCOL_FIELDS:
            protocol = getattr(self, field_name)
            if protocol is not None:
                present[field_name] = protocol
        return present

    def enabled_protocols(self) -> List[str]:
        """Get names of protocols reported as enabled"""
        return [name for name, protocol in self.protocols().items() if protocol.is_enabled()]

    def with_protocol(self, name: str, protocol: Optional[NetworkProtocol]) -> 'NetworkService':
        """
        Create a new instance with one protocol replaced (immutable update).

        Args:
            name: Protocol attribute name (e.g., 'ssh', 'virtual_media')
            protocol: New protocol settings, or None to clear it

        Returns:
            New NetworkService instance

        Raises:
            ValueError: If name is not a protocol attribute
        """
        if name not in PROTOCOL_FIELDS:
            raise ValueError(f"Unknown protocol: {name}")
        return replace(self, **{name: protocol})
