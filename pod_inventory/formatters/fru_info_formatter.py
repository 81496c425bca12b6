"""
FRU info formatter.
"""

from ..models import FruInfo
from ..serializers import FruInfoSerializer
from .base_formatter import OutputFormatter


class FruInfoFormatter(OutputFormatter):
    """Formatter for FruInfo snapshots"""

    def _format_list(self, snapshot: FruInfo) -> str:
        lines = ["FRU Info:", "=" * 60]
        lines.append(f"  Serial Number: {self._display(snapshot.serial_number)}")
        lines.append(f"  Manufacturer:  {self._display(snapshot.manufacturer)}")
        return "\n".join(lines)

    def _format_table(self, snapshot: FruInfo) -> str:
        lines = []
        lines.append("\n{:<30} {:<30}".format("SERIAL NUMBER", "MANUFACTURER"))
        lines.append("=" * 60)
        lines.append("{:<30} {:<30}".format(
            self._display(snapshot.serial_number),
            self._display(snapshot.manufacturer)
        ))
        return "\n".join(lines)

    def _format_json(self, snapshot: FruInfo) -> str:
        return FruInfoSerializer().dumps(snapshot, indent=self.json_indent)
