"""
Data models and value objects.
Immutable snapshot structures for pod inventory data.
"""

from typing import Union

from .status import State, Health
from .network_protocol import NetworkProtocol
from .network_service import NetworkService, PROTOCOL_FIELDS
from .fru_info import FruInfo

# Anything the serializers and formatters accept as a top-level snapshot
Snapshot = Union[NetworkService, FruInfo]

__all__ = [
    'State',
    'Health',
    'NetworkProtocol',
    'NetworkService',
    'PROTOCOL_FIELDS',
    'FruInfo',
    'Snapshot',
]
