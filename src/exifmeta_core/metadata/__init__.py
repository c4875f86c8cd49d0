"""Metadata extraction module"""

from .assembler import MetadataAssembler
from .exif_decoder import HEIF_AVAILABLE, ExifDecoder, ExifTag
from .gps import dms_to_decimal, parse_gps_coordinates, resolve_coordinate, resolve_position
from .shutter import format_shutter_speed
from .tag_values import DescribedValue, WrappedValue, extract_number, extract_string

__all__ = [
    "MetadataAssembler",
    "ExifDecoder",
    "ExifTag",
    "HEIF_AVAILABLE",
    "dms_to_decimal",
    "parse_gps_coordinates",
    "resolve_coordinate",
    "resolve_position",
    "format_shutter_speed",
    "DescribedValue",
    "WrappedValue",
    "extract_number",
    "extract_string",
]
