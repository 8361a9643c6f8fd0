"""Request parameter definition.

A ``RequestParameter`` describes one named field of an API request: its type
tag, whether it may be omitted, the value to fall back to when it is absent,
and, for ``integer`` parameters, the accepted value range.

Setters validate their input and report the outcome through their return
value; a rejected call leaves the parameter unchanged. The constructor never
fails: invalid arguments are replaced by the ``"a-parameter"`` name and the
``"string"`` type.

Instances are not synchronized. Callers sharing one parameter between threads
must serialize calls to the setters themselves.
"""

import logging
import numbers
from typing import Any, Optional, Union

from restfilter.common.json_node import JsonNode
from restfilter.common.validation import NameValidator
from restfilter.constants import (
    DEFAULT_PARAMETER_NAME,
    DEFAULT_PARAMETER_TYPE,
    INT_MAX,
    INT_MIN,
    TYPES,
    JsonKeys,
    ParameterTypes,
)

from .model import ParameterDescription

logger = logging.getLogger(__name__)

Number = Union[int, float]


class RequestParameter:
    """A named, typed request parameter.

    Attributes are private; use the accessor methods.

    Example:
        ```python
        age = RequestParameter("age", "integer")
        age.set_min_val(0)
        age.set_max_val(150)
        age.serialize().to_dict()
        # {"name": "age", "type": "integer", "is-optional": False,
        #  "min-val": 0, "max-val": 150}
        ```
    """

    def __init__(
        self,
        name: Any,
        param_type: Any = DEFAULT_PARAMETER_TYPE,
        is_optional: bool = False,
    ) -> None:
        """Create a request parameter.

        Args:
            name: Name of the parameter as it appears in the request body.
                Falls back to ``"a-parameter"`` if invalid.
            param_type: Type tag from ``restfilter.constants.TYPES``.
                Falls back to ``"string"`` if invalid.
            is_optional: True if the parameter may be absent from a request
        """
        self._name: str = DEFAULT_PARAMETER_NAME
        self._type: str = DEFAULT_PARAMETER_TYPE
        self._default: Any = None
        self._min_val: Optional[Number] = None
        self._max_val: Optional[Number] = None

        if not self.set_name(name):
            logger.debug(
                f"Invalid parameter name {name!r}, using '{DEFAULT_PARAMETER_NAME}'"
            )
            self._name = DEFAULT_PARAMETER_NAME

        self._is_optional = is_optional

        # Direct assignment: range bounds stay unset on fallback
        if not self.set_type(param_type):
            logger.debug(
                f"Invalid parameter type {param_type!r}, "
                f"using '{DEFAULT_PARAMETER_TYPE}'"
            )
            self._type = DEFAULT_PARAMETER_TYPE

    def __repr__(self) -> str:
        return (
            f"RequestParameter(name={self._name!r}, type={self._type!r}, "
            f"is_optional={self._is_optional!r})"
        )

    def get_name(self) -> str:
        """Return the name of the parameter."""
        return self._name

    def set_name(self, name: Any) -> bool:
        """Set the name of the parameter.

        A valid name contains only the letters [A-Z] and [a-z], the digits
        [0-9], and the characters '-' and '_'.

        Args:
            name: New name (coerced to str, ``None`` becomes the empty string)

        Returns:
            True if the name was updated, False if it is invalid
        """
        name = "" if name is None else str(name)
        if not NameValidator.is_valid_name(name):
            logger.debug(f"Rejected parameter name: {name!r}")
            return False
        self._name = name
        return True

    def get_type(self) -> str:
        """Return the type tag of the parameter (such as 'string' or 'email')."""
        return self._type

    def set_type(self, param_type: Any) -> bool:
        """Set the type of the parameter.

        Membership is tested case-insensitively but the given casing is
        stored. An ``integer`` type resets the range to the native integer
        bounds; any other type clears it.

        Args:
            param_type: Type tag from ``restfilter.constants.TYPES``

        Returns:
            True if the type was updated, False if it is not supported
        """
        param_type = "" if param_type is None else str(param_type)
        normalized = param_type.lower()
        if normalized not in TYPES:
            logger.debug(f"Rejected parameter type: {param_type!r}")
            return False

        self._type = param_type
        if normalized == ParameterTypes.INTEGER:
            self._min_val = INT_MIN
            self._max_val = INT_MAX
        else:
            self._min_val = None
            self._max_val = None
        return True

    def is_optional(self) -> bool:
        """Return True if the parameter may be absent from a request."""
        return self._is_optional

    def get_default(self) -> Any:
        """Return the value to use when the parameter is not provided."""
        return self._default

    def set_default(self, val: Any) -> None:
        """Set the value to use when the parameter is not provided.

        The value is not checked against the parameter type.
        """
        self._default = val

    def get_min_val(self) -> Optional[Number]:
        """Return the minimum accepted value, or None for non-integer types."""
        return self._min_val

    def set_min_val(self, val: Any) -> bool:
        """Set the minimum accepted value.

        The value is updated only if the type is ``integer``, a maximum is
        set, and ``val`` is less than the maximum.

        Args:
            val: New minimum

        Returns:
            True if the minimum was updated, False if not
        """
        if self._type == ParameterTypes.INTEGER and _is_number(val):
            if self._max_val is not None and val < self._max_val:
                self._min_val = val
                return True
        logger.debug(f"Rejected min-val {val!r} for parameter '{self._name}'")
        return False

    def get_max_val(self) -> Optional[Number]:
        """Return the maximum accepted value, or None for non-integer types."""
        return self._max_val

    def set_max_val(self, val: Any) -> bool:
        """Set the maximum accepted value.

        The value is updated only if the type is ``integer``, a minimum is
        set, and ``val`` is greater than the minimum.

        Args:
            val: New maximum

        Returns:
            True if the maximum was updated, False if not
        """
        if self._type == ParameterTypes.INTEGER and _is_number(val):
            if self._min_val is not None and val > self._min_val:
                self._max_val = val
                return True
        logger.debug(f"Rejected max-val {val!r} for parameter '{self._name}'")
        return False

    def serialize(self) -> JsonNode:
        """Build a JSON node that describes the parameter.

        The keys ``name``, ``type`` and ``is-optional`` are always present;
        ``default``, ``min-val`` and ``max-val`` only when set.

        Returns:
            Ordered JsonNode
        """
        node = JsonNode.create()
        node.add(JsonKeys.NAME, self._name)
        node.add(JsonKeys.TYPE, self.get_type())
        node.add(JsonKeys.IS_OPTIONAL, self.is_optional())
        if self.get_default() is not None:
            node.add(JsonKeys.DEFAULT, self.get_default())
        if self.get_min_val() is not None:
            node.add(JsonKeys.MIN_VAL, self.get_min_val())
        if self.get_max_val() is not None:
            node.add(JsonKeys.MAX_VAL, self.get_max_val())
        return node

    def to_model(self) -> ParameterDescription:
        """Return the serialized parameter as a validated pydantic model."""
        return ParameterDescription.from_node(self.serialize())


def _is_number(val: Any) -> bool:
    # bool is an int subclass but never a meaningful bound
    return isinstance(val, numbers.Real) and not isinstance(val, bool)


__all__ = ["RequestParameter"]
