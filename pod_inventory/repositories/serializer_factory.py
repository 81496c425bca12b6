"""
Serializer Factory - Factory Pattern implementation.
Creates wire serializer instances based on snapshot kind.
"""

import logging
from enum import Enum
from typing import Dict, List, Type

from ..serializers import SnapshotSerializer, NetworkServiceSerializer, FruInfoSerializer

logger = logging.getLogger(__name__)


class SnapshotKind(Enum):
    """Snapshot kind enumeration"""
    NETWORK_SERVICE = "network-service"
    FRU_INFO = "fru-info"


class SerializerFactory:
    """
    Factory for creating snapshot serializers.

    Design Pattern: Factory Pattern + Registry Pattern
    Registers all available serializers and creates instances on demand.
    """

    # Serializer registry
    _SERIALIZERS: Dict[SnapshotKind, Type[SnapshotSerializer]] = {
        SnapshotKind.NETWORK_SERVICE: NetworkServiceSerializer,
        SnapshotKind.FRU_INFO: FruInfoSerializer,
    }

    @classmethod
    def create_serializer(cls, kind: SnapshotKind, strict: bool = False) -> SnapshotSerializer:
        """
        Create a serializer instance.

        Args:
            kind: Snapshot kind
            strict: Reject unknown keys when decoding

        Returns:
            Serializer instance

        Raises:
            ValueError: If the snapshot kind is not supported
        """
        serializer_class = cls._SERIALIZERS.get(kind)

        if not serializer_class:
            raise ValueError(f"Unknown snapshot kind: {kind}")

        logger.debug(f"Creating serializer for kind: {kind.value}")
        return serializer_class(strict=strict)

    @classmethod
    def get_supported_kinds(cls) -> List[SnapshotKind]:
        """Get list of supported snapshot kinds"""
        return list(cls._SERIALIZERS.keys())

    @classmethod
    def register_serializer(cls, kind: SnapshotKind, serializer_class: Type[SnapshotSerializer]):
        """
        Register a serializer (for extensibility).

        Args:
            kind: Snapshot kind
            serializer_class: Serializer class to register
        """
        cls._SERIALIZERS[kind] = serializer_class
        logger.info(f"Registered serializer for kind: {kind.value}")
