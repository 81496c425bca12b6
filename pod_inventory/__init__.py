"""
Pod Inventory Snapshot Package

This package provides immutable snapshot models for pod/rack inventory data
(network service descriptors and FRU info) and their JSON wire contract.

Architecture:
- Value Object Pattern for immutable data models
- Strategy Pattern for serializers and output formatters
- Factory Pattern for creating serializers
- Facade Pattern for simplified loading and re-emission
"""

from .models import State, Health, NetworkProtocol, NetworkService, FruInfo
from .serializers import SnapshotSerializer, SerializationError, NetworkServiceSerializer, FruInfoSerializer
from .repositories import SerializerFactory, SnapshotKind
from .services import SnapshotService
from .parsers import HostnameParser
from .formatters import NetworkServiceFormatter, FruInfoFormatter

__all__ = [
    # Models
    "State",
    "Health",
    "NetworkProtocol",
    "NetworkService",
    "FruInfo",
    # Serializers
    "SnapshotSerializer",
    "SerializationError",
    "NetworkServiceSerializer",
    "FruInfoSerializer",
    # Factory
    "SerializerFactory",
    "SnapshotKind",
    # Services
    "SnapshotService",
    # Parsers
    "HostnameParser",
    # Formatters
    "NetworkServiceFormatter",
    "FruInfoFormatter",
]
