"""Value validators: boolean, integer, floating-point, text and URL predicates."""

from .config import ValidatorConfig
from .exceptions import ValidationError, ValueDecodeError, ValueValidatorsError
from .type_validations import (
    validate_boolean,
    validate_integer,
    validate_float,
    validate_text,
    validate_url,
)
from .validators import (
    VALIDATOR_TYPE_MAP,
    Validator,
    BooleanValidator,
    IntegerValidator,
    FloatValidator,
    TextValidator,
    UrlValidator,
    get_validator,
)
from .values import Value, decode_json, from_host

__all__ = [
    "ValidatorConfig",
    "ValidationError",
    "ValueDecodeError",
    "ValueValidatorsError",
    "validate_boolean",
    "validate_integer",
    "validate_float",
    "validate_text",
    "validate_url",
    "VALIDATOR_TYPE_MAP",
    "Validator",
    "BooleanValidator",
    "IntegerValidator",
    "FloatValidator",
    "TextValidator",
    "UrlValidator",
    "get_validator",
    "Value",
    "decode_json",
    "from_host",
]
