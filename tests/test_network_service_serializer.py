"""Tests for the network service wire serializer."""
import json

import pytest

from pod_inventory.models import FruInfo, Health, NetworkProtocol, NetworkService, State
from pod_inventory.serializers import (
    NETWORK_SERVICE_WIRE_NAMES,
    NetworkServiceSerializer,
    SerializationError,
)

EXPECTED_KEYS = [
    "Name", "Description", "State", "Health", "HostName", "FQDN",
    "HTTP", "HTTPS", "IPMI", "SSH", "SNMP", "VirtualMedia", "SSDP", "Telnet", "KVMIP",
]


@pytest.fixture
def serializer() -> NetworkServiceSerializer:
    return NetworkServiceSerializer()


class TestEncoding:
    def test_wire_names_table(self):
        assert list(NETWORK_SERVICE_WIRE_NAMES.values()) == EXPECTED_KEYS

    def test_host_name_only(self, serializer):
        payload = serializer.to_dict(NetworkService(host_name="rack1-node3"))

        assert payload["HostName"] == "rack1-node3"
        assert list(payload) == EXPECTED_KEYS
        assert all(value is None for key, value in payload.items() if key != "HostName")

    def test_keys_exact_and_ordered(self, serializer, full_service):
        assert list(serializer.to_dict(full_service)) == EXPECTED_KEYS

    def test_full_service(self, serializer, full_service, full_service_payload):
        assert serializer.to_dict(full_service) == full_service_payload

    def test_enums_as_strings(self, serializer):
        payload = serializer.to_dict(NetworkService(state=State.STANDBY_OFFLINE, health=Health.CRITICAL))
        assert payload["State"] == "StandbyOffline"
        assert payload["Health"] == "Critical"

    def test_protocol_keeps_nulls(self, serializer):
        payload = serializer.to_dict(NetworkService(ssh=NetworkProtocol(port=22)))
        assert payload["SSH"] == {"ProtocolEnabled": None, "Port": 22}

    def test_rejects_other_snapshot_types(self, serializer):
        with pytest.raises(TypeError, match="Expected NetworkService, got FruInfo"):
            serializer.to_dict(FruInfo(serial_number="SN123"))

    def test_dumps(self, serializer):
        text = serializer.dumps(NetworkService(fqdn="node.pod.local"))
        assert json.loads(text)["FQDN"] == "node.pod.local"
        assert '"KVMIP": null' in text


class TestDecoding:
    def test_full_payload(self, serializer, full_service, full_service_payload):
        assert serializer.from_dict(full_service_payload) == full_service

    def test_round_trip(self, serializer, full_service):
        assert serializer.loads(serializer.dumps(full_service)) == full_service

    def test_missing_keys_are_absent(self, serializer):
        service = serializer.from_dict({"HostName": "rack1-node3"})
        assert service == NetworkService(host_name="rack1-node3")

    def test_empty_object(self, serializer):
        assert serializer.from_dict({}) == NetworkService()

    def test_enum_lookup(self, serializer):
        service = serializer.from_dict({"State": "InTest", "Health": "Warning"})
        assert service.state is State.IN_TEST
        assert service.health is Health.WARNING

    def test_unknown_keys_ignored(self, serializer):
        service = serializer.from_dict({"Name": "svc", "Oem": {"Vendor": {}}})
        assert service.name == "svc"

    def test_unknown_keys_rejected_in_strict_mode(self):
        strict = NetworkServiceSerializer(strict=True)
        with pytest.raises(SerializationError, match="Oem"):
            strict.from_dict({"Name": "svc", "Oem": {}})

    def test_unknown_protocol_keys_rejected_in_strict_mode(self):
        strict = NetworkServiceSerializer(strict=True)
        with pytest.raises(SerializationError, match="NetworkService.SSH"):
            strict.from_dict({"SSH": {"Port": 22, "Banner": "hi"}})

    def test_internal_names_are_not_wire_names(self, serializer):
        service = serializer.from_dict({"host_name": "rack1-node3"})
        assert service.host_name is None

    def test_invalid_state(self, serializer):
        with pytest.raises(SerializationError, match="State"):
            serializer.from_dict({"State": "Sleeping"})

    def test_invalid_port_type(self, serializer):
        with pytest.raises(SerializationError, match="HTTP.Port"):
            serializer.from_dict({"HTTP": {"ProtocolEnabled": True, "Port": "eighty"}})

    @pytest.mark.parametrize("protocol", [
        {"Port": True},
        {"Port": "80"},
        {"Port": 80.0},
        {"ProtocolEnabled": "yes"},
        {"ProtocolEnabled": 1},
    ])
    def test_protocol_values_are_not_coerced(self, serializer, protocol):
        with pytest.raises(SerializationError, match="HTTP"):
            serializer.from_dict({"HTTP": protocol})

    def test_string_fields_are_not_coerced(self, serializer):
        with pytest.raises(SerializationError, match="HostName"):
            serializer.from_dict({"HostName": 3})

    def test_protocol_not_an_object(self, serializer):
        with pytest.raises(SerializationError, match="must be a JSON object"):
            serializer.from_dict({"IPMI": 623})

    def test_payload_not_an_object(self, serializer):
        with pytest.raises(SerializationError):
            serializer.from_dict(["Name"])

    def test_invalid_json(self, serializer):
        with pytest.raises(SerializationError, match="Invalid JSON"):
            serializer.loads("{not json")

    def test_serialization_error_is_value_error(self, serializer):
        with pytest.raises(ValueError):
            serializer.from_dict({"Name": 42})
