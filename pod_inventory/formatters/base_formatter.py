"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Snapshot


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different snapshot types, each with list, table and JSON styles.
    """

    PLACEHOLDER = "-"

    def __init__(self, output_format: str = "list", json_indent: Optional[int] = 2):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'table', 'json')
            json_indent: Indentation for JSON output
        """
        self.output_format = output_format
        self.json_indent = json_indent

    def format(self, snapshot: Snapshot) -> str:
        """
        Format a snapshot for output.

        Args:
            snapshot: Snapshot to format

        Returns:
            Formatted string for output
        """
        if self.output_format == "json":
            return self._format_json(snapshot)
        elif self.output_format == "table":
            return self._format_table(snapshot)
        else:  # list (default)
            return self._format_list(snapshot)

    @abstractmethod
    def _format_list(self, snapshot: Snapshot) -> str:
        pass

    @abstractmethod
    def _format_table(self, snapshot: Snapshot) -> str:
        pass

    @abstractmethod
    def _format_json(self, snapshot: Snapshot) -> str:
        pass

    def _display(self, value) -> str:
        """Render an optional value for text output"""
        if value is None:
            return self.PLACEHOLDER
        return str(getattr(value, "value", value))
