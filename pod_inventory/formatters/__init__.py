"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .network_service_formatter import NetworkServiceFormatter
from .fru_info_formatter import FruInfoFormatter

__all__ = ['OutputFormatter', 'NetworkServiceFormatter', 'FruInfoFormatter']
