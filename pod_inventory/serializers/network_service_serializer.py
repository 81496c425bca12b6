"""
Network service serializer.

Wire format: every key is always emitted, absent values as null.

{
  "Name": "Manager Network Service",
  "Description": null,
  "State": "Enabled",
  "Health": "OK",
  "HostName": "rack1-node3",
  "FQDN": "rack1-node3.pod.example.com",
  "HTTP": {"ProtocolEnabled": true, "Port": 80},
  ...
  "KVMIP": null
}
"""

from typing import Any, Dict, Mapping

from pydantic import TypeAdapter

from .base_serializer import SnapshotSerializer
from ..models import NetworkService, PROTOCOL_FIELDS

# Attribute name -> wire name, in wire order
NETWORK_SERVICE_WIRE_NAMES: Dict[str, str] = {
    "name": "Name",
    "description": "Description",
    "state": "State",
    "health": "Health",
    "host_name": "HostName",
    "fqdn": "FQDN",
    "http": "HTTP",
    "https": "HTTPS",
    "ipmi": "IPMI",
    "ssh": "SSH",
    "snmp": "SNMP",
    "virtual_media": "VirtualMedia",
    "ssdp": "SSDP",
    "telnet": "Telnet",
    "kvmip": "KVMIP",
}

NETWORK_PROTOCOL_WIRE_NAMES: Dict[str, str] = {
    "protocol_enabled": "ProtocolEnabled",
    "port": "Port",
}

_ADAPTER = TypeAdapter(NetworkService)


class NetworkServiceSerializer(SnapshotSerializer):
    """Serializer for NetworkService snapshots"""

    @property
    def type_name(self) -> str:
        return "NetworkService"

    def to_dict(self, obj: NetworkService) -> Dict[str, Any]:
        if not isinstance(obj, NetworkService):
            raise TypeError(f"Expected NetworkService, got {type(obj).__name__}")

        fields = _ADAPTER.dump_python(obj, mode="json")

        payload = {}
        for attr, wire_name in NETWORK_SERVICE_WIRE_NAMES.items():
            value = fields[attr]
            if attr in PROTOCOL_FIELDS and value is not None:
                value = {
                    protocol_wire: value[protocol_attr]
                    for protocol_attr, protocol_wire in NETWORK_PROTOCOL_WIRE_NAMES.items()
                }
            payload[wire_name] = value
        return payload

    def from_dict(self, payload: Mapping[str, Any]) -> NetworkService:
        fields = self._rename_from_wire(payload, NETWORK_SERVICE_WIRE_NAMES, self.type_name)

        for attr in PROTOCOL_FIELDS:
            if fields.get(attr) is not None:
                fields[attr] = self._rename_from_wire(
                    fields[attr],
                    NETWORK_PROTOCOL_WIRE_NAMES,
                    f"{self.type_name}.{NETWORK_SERVICE_WIRE_NAMES[attr]}"
                )

        return self._validate(
            _ADAPTER,
            fields,
            {**NETWORK_SERVICE_WIRE_NAMES, **NETWORK_PROTOCOL_WIRE_NAMES}
        )
