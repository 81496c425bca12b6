"""
Parser utilities for interpreting network identity fields.
"""

from .hostname_parser import HostnameParser

__all__ = ['HostnameParser']
