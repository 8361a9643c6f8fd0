"""Type protocols for restfilter interfaces."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from restfilter.common.json_node import JsonNode


@runtime_checkable
class JsonSerializable(Protocol):
    """Protocol for objects that can describe themselves as a JSON node."""

    def serialize(self) -> "JsonNode":
        """Build a JSON node representing the object.

        Returns:
            An ordered JSON node
        """
        ...


__all__ = ["JsonSerializable"]
