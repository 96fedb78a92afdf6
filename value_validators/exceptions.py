"""Exceptions raised by the value validators package."""
from typing import Any


class ValueValidatorsError(Exception):
    """Base class for errors raised by this package."""


class ValueDecodeError(ValueValidatorsError, ValueError):
    """A host object or JSON document could not be turned into a Value."""


class ValidationError(ValueValidatorsError, ValueError):
    """Raised by ``Validator.assert_valid`` when a value is rejected."""

    def __init__(self, message: str, value: Any, type_name: str | None = None):
        super().__init__(message)
        self.value = value
        self.type_name = type_name
