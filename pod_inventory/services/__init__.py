"""
Services - snapshot loading and re-emission.
"""

from .snapshot_service import SnapshotService, initialize_service

__all__ = ['SnapshotService', 'initialize_service']
