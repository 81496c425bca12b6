"""
Repositories and factories - Factory Pattern implementation.
"""

from .serializer_factory import SerializerFactory, SnapshotKind

__all__ = ['SerializerFactory', 'SnapshotKind']
