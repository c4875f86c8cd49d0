"""
GPS Coordinate Resolution

Converts the GPS tag group of a decoded image into decimal degrees.

Two encodings are understood:
- Pre-normalized: the decoder already computed signed Latitude/Longitude
- Raw tags: GPSLatitude/GPSLongitude with hemisphere references, given as
  DMS sequences, single decimal numbers or DMS text
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, Optional, Tuple

from ..models.metadata import GPSCoordinates, is_valid_coordinate
from .tag_values import extract_number, extract_string, is_real_number, resolve_tag

logger = logging.getLogger(__name__)

_DMS_TEXT = re.compile(r'(\d+)°?\s*(\d+)\'?\s*(\d+(?:\.\d+)?)?"?')

# Negative hemisphere per axis
LATITUDE = 'S'
LONGITUDE = 'W'


def dms_to_decimal(degrees: float, minutes: float, seconds: float, direction: str) -> float:
    """
    Convert degrees/minutes/seconds to decimal degrees.

    Only an exact 'S' or 'W' direction negates the result.
    """
    decimal = degrees + minutes / 60.0 + seconds / 3600.0
    if direction in ('S', 'W'):
        decimal = -decimal
    return decimal


def _component(value: Any) -> float:
    # EXIF rationals can arrive as (numerator, denominator) pairs
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return float(value[0]) / float(value[1])
    return float(value)


def _from_dms_sequence(value: Any, ref: str, axis: Optional[str]) -> Optional[float]:
    if not isinstance(value, (list, tuple)) or len(value) < 3:
        return None
    return dms_to_decimal(
        _component(value[0]), _component(value[1]), _component(value[2]), ref
    )


def _from_decimal(value: Any, ref: str, axis: Optional[str]) -> Optional[float]:
    if not is_real_number(value):
        return None
    decimal = float(value)
    negative = (ref == axis) if axis else ref in (LATITUDE, LONGITUDE)
    return -decimal if negative else decimal


def _from_dms_text(value: Any, ref: str, axis: Optional[str]) -> Optional[float]:
    match = _DMS_TEXT.search(str(value))
    # Degrees, minutes and seconds are all required
    if not match or match.group(3) is None:
        return None
    degrees, minutes, seconds = match.groups()
    return dms_to_decimal(float(degrees), float(minutes), float(seconds), ref)


_COORDINATE_STRATEGIES: Tuple[Callable[[Any, str, Optional[str]], Optional[float]], ...] = (
    _from_dms_sequence,
    _from_decimal,
    _from_dms_text,
)


def resolve_coordinate(raw: Any, ref: str, axis: Optional[str] = None) -> Optional[float]:
    """
    Resolve one raw GPS coordinate tag to signed decimal degrees.

    Args:
        raw: GPSLatitude or GPSLongitude tag value
        ref: Hemisphere reference (N/S/E/W)
        axis: LATITUDE or LONGITUDE; a plain decimal is then only negated
              by that axis' own hemisphere (S or W). None accepts either.

    Returns:
        Decimal degrees, or None if no encoding matched
    """
    value = resolve_tag(raw)
    for strategy in _COORDINATE_STRATEGIES:
        decimal = strategy(value, ref, axis)
        if decimal is not None:
            return decimal
    return None


def _is_normalized(gps_data: Mapping) -> bool:
    return gps_data.get('Latitude') is not None and gps_data.get('Longitude') is not None


def _normalized_position(gps_data: Mapping) -> Optional[Tuple[float, float]]:
    latitude = extract_number(gps_data.get('Latitude'))
    longitude = extract_number(gps_data.get('Longitude'))
    if latitude is None or longitude is None:
        return None
    if latitude != latitude or longitude != longitude:
        return None
    return float(latitude), float(longitude)


def _raw_refs(gps_data: Mapping) -> Optional[Tuple[str, str]]:
    required = ('GPSLatitude', 'GPSLongitude', 'GPSLatitudeRef', 'GPSLongitudeRef')
    if not all(gps_data.get(name) for name in required):
        return None
    return (
        extract_string(gps_data['GPSLatitudeRef']) or '',
        extract_string(gps_data['GPSLongitudeRef']) or '',
    )


def _raw_position(gps_data: Mapping) -> Optional[Tuple[float, float]]:
    refs = _raw_refs(gps_data)
    if refs is None:
        return None
    latitude = resolve_coordinate(gps_data['GPSLatitude'], refs[0], LATITUDE)
    longitude = resolve_coordinate(gps_data['GPSLongitude'], refs[1], LONGITUDE)
    if latitude is None or longitude is None:
        return None
    return latitude, longitude


def resolve_position(gps_data: Optional[Mapping]) -> Optional[Tuple[float, float]]:
    """
    Resolve (latitude, longitude) without range validation.

    Used to tell "no GPS" apart from "GPS present but out of range".
    Never raises.
    """
    try:
        if not gps_data:
            return None
        if _is_normalized(gps_data):
            return _normalized_position(gps_data)
        return _raw_position(gps_data)
    except Exception as e:
        logger.debug("Unable to resolve GPS position: %s", e)
        return None


def _from_normalized(gps_data: Mapping) -> Optional[GPSCoordinates]:
    # Expanded decoders sign Latitude/Longitude/Altitude themselves
    position = _normalized_position(gps_data)
    if position is None:
        return None
    latitude, longitude = position
    if not is_valid_coordinate(latitude, longitude):
        logger.debug("Pre-normalized GPS out of range: %s, %s", latitude, longitude)
        return None

    altitude = None
    if gps_data.get('Altitude') is not None:
        altitude = _finite(extract_number(gps_data['Altitude']))

    return GPSCoordinates(latitude=latitude, longitude=longitude, altitude=altitude)


def _from_raw_tags(gps_data: Mapping) -> Optional[GPSCoordinates]:
    position = _raw_position(gps_data)
    if position is None:
        return None
    latitude, longitude = position
    if not is_valid_coordinate(latitude, longitude):
        logger.debug("GPS out of range: %s, %s", latitude, longitude)
        return None

    lat_ref, lon_ref = _raw_refs(gps_data)
    return GPSCoordinates(
        latitude=latitude,
        longitude=longitude,
        altitude=_altitude(gps_data),
        latitude_ref=lat_ref,
        longitude_ref=lon_ref,
    )


def _altitude(gps_data: Mapping) -> Optional[float]:
    alt_tag = gps_data.get('GPSAltitude')
    if not alt_tag:
        return None
    altitude = _finite(extract_number(alt_tag))
    if altitude is None:
        return None
    # GPSAltitudeRef 1 means below sea level
    if extract_string(gps_data.get('GPSAltitudeRef')) == '1':
        altitude = -altitude
    return altitude


def _finite(value: Optional[float]) -> Optional[float]:
    if value is None or value != value:
        return None
    return float(value)


def parse_gps_coordinates(gps_data: Optional[Mapping]) -> Optional[GPSCoordinates]:
    """
    Parse GPS coordinates from a decoded GPS tag group.

    Never raises: anything that cannot be resolved yields None.

    Args:
        gps_data: Mapping of GPS tag name to tag value (may be None)

    Returns:
        GPSCoordinates or None
    """
    try:
        if not gps_data:
            return None
        if _is_normalized(gps_data):
            return _from_normalized(gps_data)
        return _from_raw_tags(gps_data)
    except Exception as e:
        logger.warning("Error parsing GPS coordinates: %s", e)
        return None

