"""
Snapshot Service - loading, kind detection and re-emission of snapshots.

Coordinates serializers and host identity checks.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..config import FeatureFlags, SerializationConfig
from ..models import FruInfo, NetworkService, Snapshot
from ..parsers import HostnameParser
from ..repositories import SerializerFactory, SnapshotKind
from ..serializers import (
    SerializationError,
    SnapshotSerializer,
    NETWORK_SERVICE_WIRE_NAMES,
    FRU_INFO_WIRE_NAMES,
)

logger = logging.getLogger(__name__)


class SnapshotService:
    """
    Main snapshot service.

    Design Pattern: Facade Pattern
    Provides a simple interface over serializers, the serializer factory
    and the hostname parser.
    """

    def __init__(self,
                 strict: bool = False,
                 json_indent: Optional[int] = 2,
                 check_host_identity: bool = True):
        """
        Initialize snapshot service.

        Args:
            strict: Reject payloads with unknown keys
            json_indent: Indentation used by dumps (None for compact output)
            check_host_identity: Warn when HostName and FQDN disagree
        """
        self.strict = strict
        self.json_indent = json_indent
        self.check_host_identity = check_host_identity
        self._serializers = {
            kind: SerializerFactory.create_serializer(kind, strict=strict)
            for kind in SerializerFactory.get_supported_kinds()
        }

    def get_serializer(self, kind: SnapshotKind) -> SnapshotSerializer:
        """Get the serializer for a snapshot kind"""
        return self._serializers[kind]

    def detect_kind(self, payload: Any) -> SnapshotKind:
        """
        Detect the snapshot kind of a decoded JSON payload.

        A payload with any network service key is a network service.
        A payload whose keys are all FRU keys (including an empty object)
        is a FRU record, since only a FRU record serializes to {}.

        Raises:
            SerializationError: If the kind cannot be determined
        """
        if not isinstance(payload, Mapping):
            raise SerializationError(f"Snapshot must be a JSON object, got {type(payload).__name__}")

        keys = set(payload.keys())
        if keys & set(NETWORK_SERVICE_WIRE_NAMES.values()):
            return SnapshotKind.NETWORK_SERVICE
        if keys <= set(FRU_INFO_WIRE_NAMES.values()):
            return SnapshotKind.FRU_INFO

        raise SerializationError(f"Cannot determine snapshot kind from keys: {', '.join(sorted(keys))}")

    def kind_of(self, snapshot: Snapshot) -> SnapshotKind:
        """
        Get the kind of a snapshot object.

        Raises:
            TypeError: If the object is not a snapshot
        """
        if isinstance(snapshot, NetworkService):
            return SnapshotKind.NETWORK_SERVICE
        if isinstance(snapshot, FruInfo):
            return SnapshotKind.FRU_INFO
        raise TypeError(f"Not a snapshot: {type(snapshot).__name__}")

    def parse(self, payload: Any, kind: Optional[SnapshotKind] = None) -> Snapshot:
        """
        Decode a JSON payload into a snapshot.

        Args:
            payload: Decoded JSON value
            kind: Snapshot kind, detected from the payload if None

        Returns:
            NetworkService or FruInfo
        """
        if kind is None:
            kind = self.detect_kind(payload)
            logger.debug(f"Detected snapshot kind: {kind.value}")

        snapshot = self._serializers[kind].from_dict(payload)

        if isinstance(snapshot, NetworkService) and self.check_host_identity:
            self._check_host_identity(snapshot)

        return snapshot

    def loads(self, text: str, kind: Optional[SnapshotKind] = None) -> Snapshot:
        """
        Decode JSON text into a snapshot.

        Raises:
            SerializationError: If the text is not valid JSON or the payload is malformed
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON: {e}") from e
        return self.parse(payload, kind)

    def load_file(self,
                  path: Union[str, Path],
                  kind: Optional[SnapshotKind] = None,
                  encoding: str = "utf-8") -> Snapshot:
        """
        Read and decode a snapshot file.

        Raises:
            OSError: If the file cannot be read
            SerializationError: If the contents are not valid text or are malformed
        """
        file_path = Path(path)
        logger.info(f"Loading snapshot from {file_path}")
        try:
            text = file_path.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise SerializationError(f"Cannot decode {file_path} as {encoding}: {e}") from e
        snapshot = self.loads(text, kind)
        logger.info(f"Loaded {self.kind_of(snapshot).value} snapshot from {file_path}")
        return snapshot

    def to_dict(self, snapshot: Snapshot) -> dict:
        """Encode a snapshot to its wire dictionary"""
        return self._serializers[self.kind_of(snapshot)].to_dict(snapshot)

    def dumps(self, snapshot: Snapshot) -> str:
        """Encode a snapshot to JSON text"""
        return self._serializers[self.kind_of(snapshot)].dumps(snapshot, indent=self.json_indent)

    def _check_host_identity(self, service: NetworkService):
        """Log a warning when HostName and FQDN disagree"""
        if not HostnameParser.is_consistent(service.host_name, service.fqdn):
            logger.warning(
                f"HostName '{service.host_name}' does not match FQDN '{service.fqdn}'"
            )
        for value in (service.host_name, service.fqdn):
            if value and not HostnameParser.is_valid_hostname(value):
                logger.warning(f"Invalid host name: '{value}'")


def initialize_service() -> SnapshotService:
    """
    Initialize snapshot service from configuration.

    Returns:
        Configured SnapshotService instance
    """
    return SnapshotService(
        strict=FeatureFlags.STRICT_PAYLOADS,
        json_indent=SerializationConfig.JSON_INDENT or None,
        check_host_identity=FeatureFlags.CHECK_HOST_IDENTITY
    )
