"""
Network protocol data model - Value Object pattern.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import StrictBool, StrictInt


@dataclass(frozen=True)
class NetworkProtocol:
    """
    Settings of a single protocol exposed by a network service.

    Attributes:
        protocol_enabled: Whether the protocol is enabled (None when not reported)
        port: Listening port (None when not reported)
    """
    protocol_enabled: Optional[StrictBool] = None
    port: Optional[StrictInt] = None

    def is_enabled(self) -> bool:
        """True only when the protocol is explicitly reported as enabled"""
        return self.protocol_enabled is True
