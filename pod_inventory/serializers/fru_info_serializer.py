"""
FRU info serializer.

Wire format: serialNumber before manufacturer, absent values omitted.
"""

from typing import Any, Dict, Mapping

from pydantic import TypeAdapter

from .base_serializer import SnapshotSerializer
from ..models import FruInfo

FRU_INFO_WIRE_NAMES: Dict[str, str] = {
    "serial_number": "serialNumber",
    "manufacturer": "manufacturer",
}

_ADAPTER = TypeAdapter(FruInfo)


class FruInfoSerializer(SnapshotSerializer):
    """Serializer for FruInfo snapshots"""

    @property
    def type_name(self) -> str:
        return "FruInfo"

    def to_dict(self, obj: FruInfo) -> Dict[str, Any]:
        if not isinstance(obj, FruInfo):
            raise TypeError(f"Expected FruInfo, got {type(obj).__name__}")

        fields = _ADAPTER.dump_python(obj, mode="json", exclude_none=True)
        return {
            wire_name: fields[attr]
            for attr, wire_name in FRU_INFO_WIRE_NAMES.items()
            if attr in fields
        }

    def from_dict(self, payload: Mapping[str, Any]) -> FruInfo:
        fields = self._rename_from_wire(payload, FRU_INFO_WIRE_NAMES, self.type_name)
        return self._validate(_ADAPTER, fields, FRU_INFO_WIRE_NAMES)
