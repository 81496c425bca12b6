"""
Wire serializers - explicit mapping between value objects and JSON payloads.
"""

from .base_serializer import SnapshotSerializer, SerializationError
from .network_service_serializer import (
    NetworkServiceSerializer,
    NETWORK_SERVICE_WIRE_NAMES,
    NETWORK_PROTOCOL_WIRE_NAMES,
)
from .fru_info_serializer import FruInfoSerializer, FRU_INFO_WIRE_NAMES

__all__ = [
    'SnapshotSerializer',
    'SerializationError',
    'NetworkServiceSerializer',
    'NETWORK_SERVICE_WIRE_NAMES',
    'NETWORK_PROTOCOL_WIRE_NAMES',
    'FruInfoSerializer',
    'FRU_INFO_WIRE_NAMES',
]
