"""Parameter description model for API documentation."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from restfilter.common.json_node import JsonNode
from restfilter.common.validation import NameValidator
from restfilter.constants import TYPES, JsonKeys


class ParameterDescription(BaseModel):
    """Validated form of a serialized request parameter.

    Fields are populated either by name or by the hyphenated keys produced by
    ``RequestParameter.serialize()``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(
        ...,
        pattern=NameValidator.NAME_PATTERN.pattern,
        description="Parameter name as it appears in the request body",
        examples=["user-id"],
    )
    type: str = Field(
        ...,
        description="Type tag of the parameter",
        examples=["integer"],
    )
    is_optional: bool = Field(
        ...,
        alias=JsonKeys.IS_OPTIONAL,
        description="Whether the parameter may be absent from a request",
    )
    default: Any = Field(
        default=None,
        description="Fallback value used when the parameter is absent",
    )
    min_val: Optional[Union[int, float]] = Field(
        default=None,
        alias=JsonKeys.MIN_VAL,
        description="Minimum accepted value (integer parameters only)",
    )
    max_val: Optional[Union[int, float]] = Field(
        default=None,
        alias=JsonKeys.MAX_VAL,
        description="Maximum accepted value (integer parameters only)",
    )

    @field_validator("type")
    @classmethod
    def _check_type(cls, value: str) -> str:
        if value.lower() not in TYPES:
            raise ValueError(f"Unsupported parameter type: {value}")
        return value

    @model_validator(mode="after")
    def _check_range(self) -> "ParameterDescription":
        if (
            self.min_val is not None
            and self.max_val is not None
            and not self.min_val < self.max_val
        ):
            raise ValueError("min-val must be less than max-val")
        return self

    @classmethod
    def from_node(cls, node: JsonNode) -> "ParameterDescription":
        """Build a description from a serialized parameter node.

        Args:
            node: Node produced by ``RequestParameter.serialize()``

        Returns:
            Validated ParameterDescription

        Raises:
            pydantic.ValidationError: If the node is malformed
        """
        return cls.model_validate(node.to_dict())

    def to_node(self) -> JsonNode:
        """Convert the description back into a JSON node.

        Returns:
            JsonNode with hyphenated keys; unset optional keys are omitted
        """
        node = JsonNode.create()
        node.add(JsonKeys.NAME, self.name)
        node.add(JsonKeys.TYPE, self.type)
        node.add(JsonKeys.IS_OPTIONAL, self.is_optional)
        if self.default is not None:
            node.add(JsonKeys.DEFAULT, self.default)
        if self.min_val is not None:
            node.add(JsonKeys.MIN_VAL, self.min_val)
        if self.max_val is not None:
            node.add(JsonKeys.MAX_VAL, self.max_val)
        return node


__all__ = ["ParameterDescription"]
