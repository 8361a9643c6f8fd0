"""Ordered JSON node builder.

A ``JsonNode`` collects key/value pairs in insertion order and renders them
as a plain dictionary or as JSON text. Values may themselves be nodes or any
object implementing :class:`~restfilter.protocols.JsonSerializable`.
"""

import json
import logging
from typing import Any, Dict, Iterator, KeysView, Optional

from restfilter.protocols import JsonSerializable

logger = logging.getLogger(__name__)


class JsonNode:
    """Ordered key/value structure that serializes to a JSON object."""

    def __init__(self) -> None:
        """Initialize an empty node."""
        self._items: Dict[str, Any] = {}

    @classmethod
    def create(cls) -> "JsonNode":
        """Create an empty node.

        Returns:
            New empty JsonNode
        """
        return cls()

    def add(self, key: Any, value: Any) -> bool:
        """Add a key to the node.

        Adding an existing key replaces its value but keeps its position.

        Args:
            key: Key name (coerced to str)
            value: Value to store

        Returns:
            True if the key was added, False if the key is empty
        """
        key = "" if key is None else str(key)
        if not key:
            logger.debug("Rejected empty key for JSON node")
            return False
        self._items[key] = value
        return True

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under a key, or ``default``."""
        return self._items.get(key, default)

    def keys(self) -> KeysView[str]:
        return self._items.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonNode):
            return list(self._items.items()) == list(other._items.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"JsonNode({self._items!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the node into a plain ordered dictionary.

        Nested nodes and serializable objects are converted recursively.

        Returns:
            Dictionary with the node's keys in insertion order
        """
        return {key: self._convert(value) for key, value in self._items.items()}

    def to_json(self, indent: Optional[int] = None) -> str:
        """Render the node as JSON text.

        Args:
            indent: Optional indentation passed to ``json.dumps``

        NaN and infinite floats are rejected instead of being written as the
        non-standard ``NaN``/``Infinity`` tokens.

        Returns:
            JSON string

        Raises:
            TypeError: If a value is not JSON serializable
            ValueError: If a float value is NaN or infinite
        """
        return json.dumps(self.to_dict(), indent=indent, allow_nan=False)

    def __str__(self) -> str:
        return self.to_json()

    @classmethod
    def _convert(cls, value: Any) -> Any:
        if isinstance(value, JsonNode):
            return value.to_dict()
        if isinstance(value, JsonSerializable):
            # Protocol check only sees a serialize attribute; the result may be anything
            result = value.serialize()
            if isinstance(result, JsonNode):
                return result.to_dict()
            return cls._convert(result)
        if isinstance(value, dict):
            return {str(k): cls._convert(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [cls._convert(item) for item in value]
        return value


__all__ = ["JsonNode"]
