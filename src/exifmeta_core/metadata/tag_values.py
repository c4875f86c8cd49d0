"""
Tag Value Normalization

Every tag value coming out of an EXIF decoder is funneled through this
module before it reaches the metadata models.

Decoders do not agree on a shape for tag values. A value may be:
- a primitive (str, int, float, rational)
- a descriptor wrapper exposing a human-readable ``description``
- a value wrapper exposing a raw ``value``

Wrappers may be objects with those attributes or mappings with those keys.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Dict, Optional, Tuple, Union


_FLOAT_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


@dataclass(frozen=True)
class DescribedValue:
    """Tag value that carries a human-readable description"""
    description: Any


@dataclass(frozen=True)
class WrappedValue:
    """Tag value that carries the raw decoded value"""
    value: Any


# Objects exposing description/value attributes (such as ExifTag) are accepted too
RawTagValue = Union[str, bytes, Real, Tuple[Any, ...], DescribedValue, WrappedValue, Dict[str, Any]]


def _field(raw: Any, name: str) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(name)
    return getattr(raw, name, None)


def _from_description(raw: Any) -> Optional[Any]:
    description = _field(raw, 'description')
    # Empty descriptions and zero are skipped in favour of the raw value
    return description if description else None


def _from_value(raw: Any) -> Optional[Any]:
    return _field(raw, 'value')


def _as_is(raw: Any) -> Optional[Any]:
    return raw


_RESOLUTION_CHAIN: Tuple[Callable[[Any], Optional[Any]], ...] = (
    _from_description,
    _from_value,
    _as_is,
)


def resolve_tag(raw: RawTagValue) -> Any:
    """
    Unwrap a tag value to the most useful underlying value.

    Tries description, then value, then the object itself. The first
    strategy that yields something wins.
    """
    if raw is None or isinstance(raw, (str, bytes)) or is_real_number(raw):
        return raw
    for strategy in _RESOLUTION_CHAIN:
        resolved = strategy(raw)
        if resolved is not None:
            return resolved
    return None


def is_real_number(value: Any) -> bool:
    """True for ints, floats and rationals, but not for bools"""
    return isinstance(value, Real) and not isinstance(value, bool)


def stringify(value: Any) -> str:
    """Render a resolved value as text"""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace').rstrip('\x00')
    if isinstance(value, (list, tuple)):
        return ', '.join(stringify(item) for item in value)
    if is_real_number(value) and not isinstance(value, int):
        return format_number(float(value))
    return str(value)


def format_number(value: float) -> str:
    """Render a float without a trailing '.0' when it is integral"""
    if value.is_integer():
        return str(int(value))
    return str(value)


def parse_float(text: Any) -> Optional[float]:
    """
    Parse the leading floating point number of a string.

    Trailing text is ignored ("50 mm" -> 50.0). Returns None when the
    string does not start with a number.
    """
    if text is None:
        return None
    if is_real_number(text):
        number = float(text)
        return None if number != number else number
    match = _FLOAT_PREFIX.match(stringify(text))
    if not match:
        return None
    return float(match.group(1))


def extract_string(raw: RawTagValue) -> Optional[str]:
    """
    Extract a clean string from a tag value.

    Args:
        raw: Tag value in any supported shape

    Returns:
        Stripped string, or None for absent/falsy values
    """
    if not raw:
        return None
    if isinstance(raw, str):
        return raw.strip()
    return stringify(resolve_tag(raw)).strip()


def extract_number(raw: RawTagValue) -> Optional[Union[int, float]]:
    """
    Extract a number from a tag value.

    Zero is a valid value. Strings and wrapped values are parsed with
    leading-prefix float parsing.

    Args:
        raw: Tag value in any supported shape

    Returns:
        Number, or None when absent or not parseable
    """
    if raw is None:
        return None
    if is_real_number(raw):
        if isinstance(raw, (int, float)):
            return raw
        return float(raw)
    if not raw:
        return None
    return parse_float(resolve_tag(raw))


def first_present(*candidates: Any) -> Any:
    """Return the first candidate that is not None"""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None
