"""Exceptions raised inside exifmeta-core"""


class ExifMetaError(Exception):
    """Base class for exifmeta-core errors"""


class ExifDecodeError(ExifMetaError):
    """Image bytes could not be decoded"""
