"""
Base snapshot serializer - Abstract base class for wire serializers.

Decoding happens in two steps:
1. Wire keys are renamed to attribute names through an explicit mapping table
2. The renamed fields are validated and built into a value object by pydantic
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)


class SerializationError(ValueError):
    """Raised when a payload cannot be encoded or decoded"""


class SnapshotSerializer(ABC):
    """
    Abstract base class for snapshot serializers.

    Design Pattern: Strategy Pattern
    Each snapshot type implements its own wire mapping.
    """

    def __init__(self, strict: bool = False):
        """
        Initialize serializer.

        Args:
            strict: Reject payloads containing unknown keys instead of ignoring them
        """
        self.strict = strict

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Return the snapshot type name used in messages"""
        pass

    @abstractmethod
    def to_dict(self, obj) -> Dict[str, Any]:
        """
        Encode a value object to its wire representation.

        Args:
            obj: Value object to encode

        Returns:
            Dictionary keyed by wire names
        """
        pass

    @abstractmethod
    def from_dict(self, payload: Mapping[str, Any]):
        """
        Decode a wire payload into a value object.

        Args:
            payload: Dictionary keyed by wire names

        Returns:
            Value object

        Raises:
            SerializationError: If the payload is malformed
        """
        pass

    def dumps(self, obj, indent: Optional[int] = None) -> str:
        """Encode a value object to JSON text"""
        return json.dumps(self.to_dict(obj), indent=indent)

    def loads(self, text: str):
        """
        Decode JSON text into a value object.

        Raises:
            SerializationError: If the text is not valid JSON or the payload is malformed
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON for {self.type_name}: {e}") from e
        return self.from_dict(payload)

    def _rename_from_wire(self, payload: Any, wire_names: Mapping[str, str], context: str) -> Dict[str, Any]:
        """
        Rename wire keys to attribute names.

        Args:
            payload: Decoded JSON value, expected to be an object
            wire_names: Mapping of attribute name -> wire name
            context: Name of the object being decoded, for messages

        Returns:
            Dictionary keyed by attribute names (only keys present in the payload)
        """
        if not isinstance(payload, Mapping):
            raise SerializationError(
                f"{context} must be a JSON object, got {type(payload).__name__}"
            )

        attribute_names = {wire: attr for attr, wire in wire_names.items()}
        unknown = [key for key in payload if key not in attribute_names]
        if unknown:
            if self.strict:
                raise SerializationError(f"Unknown keys in {context}: {', '.join(sorted(unknown))}")
            logger.debug(f"Ignoring unknown keys in {context}: {unknown}")

        return {attribute_names[key]: value for key, value in payload.items() if key in attribute_names}

    def _validate(self, adapter: TypeAdapter, fields: Dict[str, Any], wire_names: Mapping[str, str]):
        """
        Build a value object from renamed fields.

        Raises:
            SerializationError: If pydantic rejects any field
        """
        try:
            return adapter.validate_python(fields)
        except ValidationError as e:
            problems = []
            for error in e.errors():
                location = [str(wire_names.get(part, part)) for part in error["loc"]]
                problems.append(f"{'.'.join(location)}: {error['msg']}")
            raise SerializationError(
                f"Invalid {self.type_name} payload: " + "; ".join(problems)
            ) from e
