"""Validation utilities for parameter names."""

import re
import string
from typing import Pattern


class NameValidator:
    """Validator for request parameter names.

    A valid name is non-empty and built only from the ASCII letters
    [A-Za-z], the digits [0-9], and the characters '-' and '_'.
    """

    _ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + "_-")

    # Same rule as _ALLOWED_CHARS; only used for pydantic Field(pattern=...)
    NAME_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z0-9_-]+$")

    @classmethod
    def is_valid_name(cls, name: str) -> bool:
        """Check whether a string is a valid parameter name.

        Args:
            name: Candidate name

        Returns:
            True if the name is valid, False otherwise
        """
        if not name or " " in name:
            return False

        # Stop at the first disallowed character
        for ch in name:
            if ch not in cls._ALLOWED_CHARS:
                return False
        return True


__all__ = ["NameValidator"]
