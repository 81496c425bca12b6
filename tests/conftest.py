"""Root conftest: shared fixtures for all tests."""
import json
from pathlib import Path

import pytest

from pod_inventory.models import FruInfo, Health, NetworkProtocol, NetworkService, State


@pytest.fixture
def full_service() -> NetworkService:
    """Network service with every field populated."""
    return NetworkService(
        name="Manager Network Service",
        description="Pod manager network service",
        state=State.ENABLED,
        health=Health.OK,
        host_name="rack1-node3",
        fqdn="rack1-node3.pod.example.com",
        http=NetworkProtocol(protocol_enabled=True, port=80),
        https=NetworkProtocol(protocol_enabled=True, port=443),
        ipmi=NetworkProtocol(protocol_enabled=True, port=623),
        ssh=NetworkProtocol(protocol_enabled=True, port=22),
        snmp=NetworkProtocol(protocol_enabled=False, port=161),
        virtual_media=NetworkProtocol(protocol_enabled=True, port=17988),
        ssdp=NetworkProtocol(protocol_enabled=False, port=1900),
        telnet=NetworkProtocol(protocol_enabled=False, port=23),
        kvmip=NetworkProtocol(protocol_enabled=True, port=5900),
    )


@pytest.fixture
def full_service_payload() -> dict:
    """Wire form of full_service."""
    return {
        "Name": "Manager Network Service",
        "Description": "Pod manager network service",
        "State": "Enabled",
        "Health": "OK",
        "HostName": "rack1-node3",
        "FQDN": "rack1-node3.pod.example.com",
        "HTTP": {"ProtocolEnabled": True, "Port": 80},
        "HTTPS": {"ProtocolEnabled": True, "Port": 443},
        "IPMI": {"ProtocolEnabled": True, "Port": 623},
        "SSH": {"ProtocolEnabled": True, "Port": 22},
        "SNMP": {"ProtocolEnabled": False, "Port": 161},
        "VirtualMedia": {"ProtocolEnabled": True, "Port": 17988},
        "SSDP": {"ProtocolEnabled": False, "Port": 1900},
        "Telnet": {"ProtocolEnabled": False, "Port": 23},
        "KVMIP": {"ProtocolEnabled": True, "Port": 5900},
    }


@pytest.fixture
def fru() -> FruInfo:
    return FruInfo(serial_number="SN123", manufacturer="Intel Corporation")


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON payload to a temporary file and return its path."""
    def _write(payload, name: str = "snapshot.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write
