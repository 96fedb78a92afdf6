"""Decoding boundary: host objects and JSON text to the generic Value.

A Value is what ``json.loads`` produces: ``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` or a ``dict`` with ``str`` keys. Whether a number
is integral is decided here, by its Python type, and never guessed later from
its fractional part (``1.0`` stays a float).
"""
import json
from collections.abc import Mapping
from typing import Any, TypeAlias

from .exceptions import ValueDecodeError

Value: TypeAlias = None | bool | int | float | str | list["Value"] | dict[str, "Value"]

# Unicode White_Space. str.strip() with no argument also removes U+001C..U+001F,
# which are control characters, not whitespace.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def is_utf8(text: str) -> bool:
    """False when the string holds lone surrogates, which UTF-8 cannot encode."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _convert(obj: Any) -> Value:
    # bool first: it is an int subclass
    if obj is None or isinstance(obj, bool):
        return obj
    if isinstance(obj, int):
        return int(obj)
    if isinstance(obj, float):
        return float(obj)
    if isinstance(obj, str):
        if not is_utf8(obj):
            raise ValueDecodeError("string is not valid UTF-8")
        return str(obj)
    if isinstance(obj, (bytes, bytearray)):
        try:
            return bytes(obj).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueDecodeError(f"bytes are not valid UTF-8: {e}") from e
    if isinstance(obj, (list, tuple)):
        return [_convert(item) for item in obj]
    if isinstance(obj, Mapping):
        converted: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise ValueDecodeError(f"mapping key {key!r} is not a string")
            converted[_convert(key)] = _convert(item)
        return converted
    raise ValueDecodeError(f"unsupported value type: {type(obj).__name__}")


def from_host(obj: Any) -> Value:
    """Convert a Python object into a Value.

    Raises ValueDecodeError for anything outside the JSON data model, for
    strings that are not valid UTF-8, and for structures nested too deeply
    (cyclic containers included).
    """
    try:
        return _convert(obj)
    except RecursionError as e:
        raise ValueDecodeError("value is nested too deeply") from e


def decode_json(text: str | bytes | bytearray) -> Value:
    """Parse a JSON document into a Value.

    ``NaN`` and ``Infinity`` literals decode to non-finite floats, which the
    numeric validators reject.
    """
    try:
        obj = json.loads(text)
    except RecursionError as e:
        raise ValueDecodeError("JSON document is nested too deeply") from e
    except (ValueError, TypeError) as e:
        # JSONDecodeError, UnicodeDecodeError and the int digit limit are all ValueErrors
        raise ValueDecodeError(f"invalid JSON: {e}") from e
    return from_host(obj)
