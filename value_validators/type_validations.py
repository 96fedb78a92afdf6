"""Type predicates: one function per logical type, each Value -> bool."""
import math
import re
from typing import Any

from pydantic import AnyUrl, TypeAdapter

from .values import Value, is_utf8, trim

TRUE_TOKENS = frozenset({"true", "yes", "on", "1", "y", "t"})
FALSE_TOKENS = frozenset({"false", "no", "off", "0", "n", "f"})
BOOLEAN_TOKENS = TRUE_TOKENS | FALSE_TOKENS

I64_MIN = -(2**63)
U64_MAX = 2**64 - 1
# len(str(U64_MAX)), once leading zeros are dropped
_MAX_INTEGER_DIGITS = 20

NON_FINITE_TOKENS = frozenset({"nan", "infinity", "-infinity", "inf", "-inf", "+inf"})

# ASCII only: int() and float() would also take underscores and non-ASCII digits.
INTEGER_PATTERN = re.compile(r"([+-]?)([0-9]+)")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

SCHEMES_WITHOUT_HOST = frozenset({"mailto", "tel", "data"})
SCHEMES_REQUIRING_HOST = frozenset({"http", "https", "ftp", "ftps", "ws", "wss", "ssh", "git"})
ALLOWED_SCHEMES = SCHEMES_WITHOUT_HOST | SCHEMES_REQUIRING_HOST | {"file"}

_TEXT_WHITESPACE_CONTROLS = frozenset("\t\n\x0b\x0c\r")

_url_adapter = TypeAdapter(AnyUrl)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def validate_boolean(value: Value) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        # exact comparison, no tolerance: 0.99999999 is not 1
        return value == 0 or value == 1
    if isinstance(value, str):
        return trim(value).lower() in BOOLEAN_TOKENS
    return False


def _parse_integer(text: str) -> int | None:
    """Parse a decimal i64/u64 literal, or return None."""
    match = INTEGER_PATTERN.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_INTEGER_DIGITS:
        return None
    number = -int(digits) if sign == "-" else int(digits)
    if number < I64_MIN or number > U64_MAX:
        return None
    return number


def validate_integer(value: Value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return I64_MIN <= value <= U64_MAX
    if isinstance(value, str):
        trimmed = trim(value)
        if trimmed == "":
            return False
        return _parse_integer(trimmed) is not None
    return False


def validate_float(value: Value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        try:
            return math.isfinite(float(value))
        except OverflowError:
            return False
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        trimmed = trim(value)
        if trimmed == "":
            return False
        if trimmed.lower() in NON_FINITE_TOKENS:
            return False
        if FLOAT_PATTERN.fullmatch(trimmed) is None:
            return False
        # "1e400" parses, but to inf
        return math.isfinite(float(trimmed))
    return False


def _is_text_char(char: str) -> bool:
    code_point = ord(char)
    if char in _TEXT_WHITESPACE_CONTROLS:
        return True
    if 0xD800 <= code_point <= 0xDFFF:
        return False
    return code_point >= 0x20 and code_point != 0x7F


def validate_text(text: Any) -> bool:
    if not isinstance(text, str) or text == "":
        return False
    if trim(text) == "":
        return False
    return all(_is_text_char(char) for char in text)


def validate_url(text: Any) -> bool:
    if not isinstance(text, str) or not is_utf8(text):
        return False
    try:
        url = _url_adapter.validate_python(text)
    except ValueError:
        # pydantic's ValidationError is a ValueError
        return False

    scheme = url.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        return False
    if scheme in SCHEMES_WITHOUT_HOST:
        return True
    if scheme in SCHEMES_REQUIRING_HOST:
        return bool(url.host)
    # file: "file:///path" has no host and is fine
    return True
