"""
EXIF Decoding Module

Exposes the EXIF tags Pillow parsed from an image as tag groups:

    {
        "file": {...},   # always present for a decodable image
        "ifd0": {...},   # main image directory (Make, Model, ...)
        "exif": {...},   # EXIF sub-directory (ExposureTime, FNumber, ...)
        "gps":  {...},   # GPS sub-directory + pre-normalized Latitude/Longitude/Altitude
    }

Every tag is an ExifTag carrying the raw value and a human-readable
description.
"""

import logging
from dataclasses import dataclass
from io import BytesIO
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Union

from PIL import Image, UnidentifiedImageError
from PIL.ExifTags import GPSTAGS, TAGS

from ..exceptions import ExifDecodeError
from ..models.metadata import jsonable
from .gps import LATITUDE, LONGITUDE, resolve_coordinate
from .tag_values import format_number, stringify

logger = logging.getLogger(__name__)

try:
    from pillow_heif import register_heif_opener
    register_heif_opener()
    HEIF_AVAILABLE = True
except ImportError:
    HEIF_AVAILABLE = False


EXIF_IFD = 0x8769
GPS_IFD = 0x8825

TagGroups = Dict[str, Dict[str, Any]]


@dataclass(frozen=True)
class ExifTag:
    """
    A decoded EXIF tag.

    Attributes:
        tag_id: Numeric EXIF tag (None for synthesized tags)
        value: Raw value as decoded by Pillow
        description: Human-readable rendering of the value
    """
    tag_id: Optional[int]
    value: Any
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.tag_id,
            'value': jsonable(self.value),
            'description': self.description,
        }


class ExifDecoder:
    """Decode EXIF tag groups from image bytes with Pillow"""

    FLASH = {0: 'No Flash', 1: 'Fired'}

    WHITE_BALANCE = {0: 'Auto', 1: 'Manual'}

    COLOR_SPACE = {1: 'sRGB', 2: 'Adobe RGB', 65535: 'Uncalibrated'}

    EXPOSURE_PROGRAMS = {
        0: 'Not Defined', 1: 'Manual', 2: 'Program AE',
        3: 'Aperture Priority', 4: 'Shutter Priority',
        5: 'Creative (Slow Speed)', 6: 'Action (High Speed)',
        7: 'Portrait', 8: 'Landscape'
    }

    METERING_MODES = {
        0: 'Unknown', 1: 'Average', 2: 'Center Weighted Average',
        3: 'Spot', 4: 'Multi-Spot', 5: 'Multi-Segment', 6: 'Partial'
    }

    # IFD pointers are structure, not metadata
    POINTER_TAGS = {EXIF_IFD, GPS_IFD, 0xA005}

    @staticmethod
    def load(
        buffer: Union[bytes, bytearray, memoryview],
        expanded: bool = True,
        include_unknown: bool = True
    ) -> Union[TagGroups, Dict[str, Any]]:
        """
        Decode EXIF tags from image bytes.

        Args:
            buffer: Raw image file bytes
            expanded: Group tags by directory (file/ifd0/exif/gps) instead of
                      returning one flat mapping
            include_unknown: Keep tags Pillow has no name for

        Returns:
            Tag groups (expanded) or a flat tag mapping

        Raises:
            ExifDecodeError: If the bytes are not a readable image
        """
        try:
            with Image.open(BytesIO(bytes(buffer))) as img:
                groups: TagGroups = {'file': ExifDecoder._file_group(img)}
                exif = img.getexif()
                if exif:
                    ExifDecoder._read_directories(exif, groups, include_unknown)
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            raise ExifDecodeError(str(e) or type(e).__name__) from e

        if 'gps' in groups:
            groups['gps'].update(ExifDecoder._normalized_gps(groups['gps']))

        logger.debug("Decoded tag groups: %s", {k: len(v) for k, v in groups.items()})

        if expanded:
            return groups

        flat: Dict[str, Any] = {}
        for tags in groups.values():
            for name, tag in tags.items():
                flat.setdefault(name, tag)
        return flat

    @staticmethod
    def _file_group(img: Image.Image) -> Dict[str, ExifTag]:
        width, height = img.size
        return {
            'ImageWidth': ExifTag(None, width, f"{width}px"),
            'ImageHeight': ExifTag(None, height, f"{height}px"),
            'FileType': ExifTag(None, img.format, img.format),
        }

    @staticmethod
    def _read_directories(exif: Image.Exif, groups: TagGroups, include_unknown: bool):
        groups['ifd0'] = ExifDecoder._named_tags(
            {k: v for k, v in exif.items() if k not in ExifDecoder.POINTER_TAGS},
            TAGS, include_unknown
        )

        try:
            exif_ifd = exif.get_ifd(EXIF_IFD)
        except (KeyError, AttributeError):
            exif_ifd = {}
        if exif_ifd:
            groups['exif'] = ExifDecoder._named_tags(
                {k: v for k, v in exif_ifd.items() if k not in ExifDecoder.POINTER_TAGS},
                TAGS, include_unknown
            )

        try:
            gps_ifd = exif.get_ifd(GPS_IFD)
        except (KeyError, AttributeError):
            gps_ifd = {}
        if gps_ifd:
            groups['gps'] = ExifDecoder._named_tags(gps_ifd, GPSTAGS, include_unknown)

    @staticmethod
    def _named_tags(
        directory: Mapping[int, Any],
        names: Mapping[int, str],
        include_unknown: bool
    ) -> Dict[str, ExifTag]:
        tags = {}
        for tag_id, value in directory.items():
            name = names.get(tag_id)
            if name is None:
                if not include_unknown:
                    continue
                name = f"Unknown_0x{tag_id:04X}"
            tags[name] = ExifTag(tag_id, value, ExifDecoder.describe(name, value))
        return tags

    @staticmethod
    def describe(name: str, value: Any) -> Optional[str]:
        """
        Render a tag value as human-readable text.

        Args:
            name: Tag name (e.g. "Flash", "GPSLatitude")
            value: Raw value as decoded by Pillow

        Returns:
            Description string or None for empty values
        """
        try:
            if name in ('GPSLatitude', 'GPSLongitude'):
                return ExifDecoder._describe_dms(value)
            if name == 'Flash' and isinstance(value, int):
                return ExifDecoder.FLASH[value & 1]
            tables = {
                'WhiteBalance': ExifDecoder.WHITE_BALANCE,
                'ColorSpace': ExifDecoder.COLOR_SPACE,
                'ExposureProgram': ExifDecoder.EXPOSURE_PROGRAMS,
                'MeteringMode': ExifDecoder.METERING_MODES,
            }
            if name in tables and isinstance(value, int):
                return tables[name].get(value, 'Unknown')
            if isinstance(value, bytes) and len(value) == 1:
                return str(value[0])
            text = stringify(value).strip()
            return text or None
        except (TypeError, ValueError, ZeroDivisionError):
            return None

    @staticmethod
    def _describe_dms(value: Any) -> Optional[str]:
        if not isinstance(value, tuple) or len(value) < 3:
            return stringify(value)
        degrees, minutes, seconds = (float(v) for v in value[:3])
        return f"{format_number(degrees)}° {format_number(minutes)}' {format_number(round(seconds, 4))}\""

    @staticmethod
    def _normalized_gps(gps: Mapping[str, ExifTag]) -> Dict[str, float]:
        """Signed decimal Latitude/Longitude/Altitude from raw GPS tags"""
        normalized: Dict[str, float] = {}

        def raw(name: str) -> Any:
            tag = gps.get(name)
            return tag.value if tag is not None else None

        lat, lon = raw('GPSLatitude'), raw('GPSLongitude')
        lat_ref = str(raw('GPSLatitudeRef') or '').strip('\x00 ')
        lon_ref = str(raw('GPSLongitudeRef') or '').strip('\x00 ')
        if lat and lon and lat_ref and lon_ref:
            try:
                latitude = resolve_coordinate(lat, lat_ref, LATITUDE)
                longitude = resolve_coordinate(lon, lon_ref, LONGITUDE)
            except (TypeError, ValueError, ZeroDivisionError):
                latitude = longitude = None
            if latitude is not None and longitude is not None:
                normalized['Latitude'] = latitude
                normalized['Longitude'] = longitude

        altitude = raw('GPSAltitude')
        if isinstance(altitude, Real):
            altitude = float(altitude)
            if altitude == altitude:
                # GPSAltitudeRef 1 means below sea level
                if raw('GPSAltitudeRef') in (b'\x01', 1):
                    altitude = -altitude
                normalized['Altitude'] = altitude

        return normalized
