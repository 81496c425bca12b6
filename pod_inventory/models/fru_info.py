"""
Field-replaceable unit data model - Value Object pattern.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import StrictStr


@dataclass(frozen=True)
class FruInfo:
    """
    Identity metadata of a field-replaceable unit.

    Attributes:
        serial_number: Unit serial number
        manufacturer: Unit manufacturer
    """
    serial_number: Optional[StrictStr] = None
    manufacturer: Optional[StrictStr] = None

    def is_empty(self) -> bool:
        """Check if neither value is known"""
        return self.serial_number is None and self.manufacturer is None
