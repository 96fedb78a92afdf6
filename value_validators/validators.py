import logging
from collections.abc import Callable
from typing import Any

from .exceptions import ValidationError, ValueDecodeError
from .type_validations import (
    is_string,
    validate_boolean,
    validate_float,
    validate_integer,
    validate_text,
    validate_url,
)
from .values import Value, decode_json, from_host

logger = logging.getLogger(__name__)


class Validator:
    """Runs a fixed list of predicates over one decoded value.

    ``validate`` never raises: undecodable input is simply invalid.
    """

    type_name: str
    tests: list[Callable[[Value], bool]]

    def __init__(self, type_name: str, tests: list[Callable[[Value], bool]]):
        self.type_name = type_name
        self.tests = tests

    def __repr__(self):
        return f"{self.__class__.__name__}(type_name={self.type_name!r})"

    def _run_tests(self, value: Value) -> bool:
        for test in self.tests:
            try:
                if not test(value):
                    return False
            except Exception as e:
                logger.warning("%s test %s failed on %r: %s", self.type_name, test.__name__, value, e)
                return False
        return True

    def validate(self, value: Any) -> bool:
        try:
            decoded = from_host(value)
        except ValueDecodeError as e:
            logger.debug("Could not decode value for %s validation: %s", self.type_name, e)
            return False
        return self._run_tests(decoded)

    def validate_json(self, text: str | bytes | bytearray) -> bool:
        """Decode a JSON document and validate the resulting value."""
        try:
            decoded = decode_json(text)
        except ValueDecodeError as e:
            logger.debug("Could not decode JSON for %s validation: %s", self.type_name, e)
            return False
        return self._run_tests(decoded)

    def assert_valid(self, value: Any) -> bool:
        """Return True, or raise ValidationError naming the rejected value."""
        if not self.validate(value):
            raise ValidationError(
                f"Validation failed for value: {value!r}", value, self.type_name
            )
        return True


class BooleanValidator(Validator):
    def __init__(self):
        super().__init__("Boolean", [validate_boolean])


class IntegerValidator(Validator):
    def __init__(self):
        super().__init__("Integer", [validate_integer])


class FloatValidator(Validator):
    def __init__(self):
        super().__init__("FloatingPoint", [validate_float])


class TextValidator(Validator):
    def __init__(self):
        super().__init__("Text", [is_string, validate_text])


class UrlValidator(Validator):
    def __init__(self):
        super().__init__("URL", [is_string, validate_url])


VALIDATOR_TYPE_MAP: dict[str, type[Validator]] = {
    "Boolean": BooleanValidator,
    "Integer": IntegerValidator,
    "FloatingPoint": FloatValidator,
    "Text": TextValidator,
    "URL": UrlValidator,
}

# Lowercased names accepted by get_validator besides the canonical ones
VALIDATOR_ALIASES = {
    "bool": "boolean",
    "int": "integer",
    "float": "floatingpoint",
    "number": "floatingpoint",
    "string": "text",
}

_VALIDATORS_BY_KEY = {name.lower(): validator_class for name, validator_class in VALIDATOR_TYPE_MAP.items()}


def get_validator(type_name: str) -> Validator:
    """Build the validator for a type name such as "Integer" or "url"."""
    key = type_name.strip().lower()
    key = VALIDATOR_ALIASES.get(key, key)
    validator_class = _VALIDATORS_BY_KEY.get(key)
    if validator_class is None:
        raise ValueError(f"Invalid validator type: {type_name}")
    return validator_class()
