"""
Network service formatter.

List output format:
Network Service: Manager Network Service
============================================================
  State:       Enabled
  Health:      OK
  HostName:    rack1-node3
  FQDN:        rack1-node3.pod.example.com
  Domain:      pod.example.com

  Protocols:
    - HTTP: enabled, port 80
    - IPMI: disabled, port 623
    - SSH: not reported
"""

from ..models import NetworkService, PROTOCOL_FIELDS
from ..parsers import HostnameParser
from ..serializers import NetworkServiceSerializer, NETWORK_SERVICE_WIRE_NAMES
from .base_formatter import OutputFormatter


class NetworkServiceFormatter(OutputFormatter):
    """Formatter for NetworkService snapshots"""

    def _format_list(self, snapshot: NetworkService) -> str:
        lines = [f"Network Service: {snapshot.name or '(unnamed)'}", "=" * 60]

        identity = [
            ("Description", snapshot.description),
            ("State", snapshot.state),
            ("Health", snapshot.health),
            ("HostName", snapshot.host_name),
            ("FQDN", snapshot.fqdn),
        ]
        if snapshot.fqdn:
            _, domain = HostnameParser.split_fqdn(snapshot.fqdn)
            identity.append(("Domain", domain))

        for label, value in identity:
            lines.append("  {:<13}{}".format(f"{label}:", self._display(value)))

        lines.append("")
        lines.append("  Protocols:")
        for field_name in PROTOCOL_FIELDS:
            protocol = getattr(snapshot, field_name)
            wire_name = NETWORK_SERVICE_WIRE_NAMES[field_name]
            if protocol is None:
                lines.append(f"    - {wire_name}: not reported")
                continue

            if protocol.protocol_enabled is None:
                status = "unknown"
            else:
                status = "enabled" if protocol.protocol_enabled else "disabled"
            port = f", port {protocol.port}" if protocol.port is not None else ""
            lines.append(f"    - {wire_name}: {status}{port}")

        return "\n".join(lines)

    def _format_table(self, snapshot: NetworkService) -> str:
        lines = []

        lines.append("\nNetwork Service: {}  HostName: {}  FQDN: {}".format(
            snapshot.name or "(unnamed)",
            self._display(snapshot.host_name),
            self._display(snapshot.fqdn)
        ))
        lines.append("{:<15} {:<10} {:<10}".format("PROTOCOL", "ENABLED", "PORT"))
        lines.append("=" * 40)

        for field_name in PROTOCOL_FIELDS:
            protocol = getattr(snapshot, field_name)
            if protocol is None:
                enabled, port = None, None
            else:
                enabled = None if protocol.protocol_enabled is None else str(protocol.protocol_enabled).lower()
                port = protocol.port
            lines.append("{:<15} {:<10} {:<10}".format(
                NETWORK_SERVICE_WIRE_NAMES[field_name],
                self._display(enabled),
                self._display(port)
            ))

        return "\n".join(lines)

    def _format_json(self, snapshot: NetworkService) -> str:
        return NetworkServiceSerializer().dumps(snapshot, indent=self.json_indent)
