"""
Metadata Assembly

Builds the camera/image/date-time blocks of an ImageMetadata from decoded
tag groups. Decoders disagree on group names ("exif" vs "Exif",
"ifd0" vs "Image"), so both spellings are checked.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..models.metadata import (
    CameraInfo,
    DateTimeInfo,
    GPSCoordinates,
    ImageInfo,
    ImageMetadata,
)
from ..models.result import ExtractionOptions
from ..validation.input_validator import ImageSource
from .shutter import format_shutter_speed
from .tag_values import extract_number, extract_string, first_present


class MetadataAssembler:
    """Compose ImageMetadata from decoded tag groups"""

    EXIF_GROUPS = ('exif', 'Exif')
    IFD0_GROUPS = ('ifd0', 'Image')

    @staticmethod
    def tag_group(exif_data: Mapping[str, Any], *names: str) -> Mapping[str, Any]:
        """First non-empty group among the given names, or an empty mapping"""
        for name in names:
            group = exif_data.get(name)
            if group:
                return group
        return {}

    @staticmethod
    def camera_info(exif: Mapping[str, Any], ifd0: Mapping[str, Any]) -> CameraInfo:
        return CameraInfo(
            make=extract_string(ifd0.get('Make')),
            model=extract_string(ifd0.get('Model')),
            software=extract_string(ifd0.get('Software')),
            lens_model=extract_string(exif.get('LensModel')),
            iso=extract_number(first_present(exif.get('ISO'), exif.get('ISOSpeedRatings'))),
            aperture=extract_number(first_present(exif.get('FNumber'), exif.get('ApertureValue'))),
            shutter_speed=format_shutter_speed(
                first_present(exif.get('ExposureTime'), exif.get('ShutterSpeedValue'))
            ),
            focal_length=extract_number(exif.get('FocalLength')),
            flash=extract_string(exif.get('Flash')),
            white_balance=extract_string(exif.get('WhiteBalance')),
        )

    @staticmethod
    def image_info(exif: Mapping[str, Any], ifd0: Mapping[str, Any]) -> ImageInfo:
        return ImageInfo(
            width=extract_number(first_present(exif.get('ExifImageWidth'), ifd0.get('ImageWidth'))),
            height=extract_number(first_present(exif.get('ExifImageHeight'), ifd0.get('ImageLength'))),
            color_space=extract_string(exif.get('ColorSpace')),
            orientation=extract_number(ifd0.get('Orientation')),
            x_resolution=extract_number(ifd0.get('XResolution')),
            y_resolution=extract_number(ifd0.get('YResolution')),
            bits_per_sample=extract_number(ifd0.get('BitsPerSample')),
        )

    @staticmethod
    def date_time_info(exif: Mapping[str, Any], ifd0: Mapping[str, Any]) -> DateTimeInfo:
        return DateTimeInfo(
            date_time_original=extract_string(exif.get('DateTimeOriginal')),
            date_time=extract_string(ifd0.get('DateTime')),
            date_time_digitized=extract_string(exif.get('DateTimeDigitized')),
            offset_time=extract_string(
                first_present(exif.get('OffsetTime'), exif.get('OffsetTimeOriginal'))
            ),
        )

    @staticmethod
    def frozen_groups(exif_data: Mapping[str, Any]) -> Mapping[str, Any]:
        """Read-only copy of the decoded tag groups"""
        return MappingProxyType({
            group: MappingProxyType(dict(tags)) if isinstance(tags, Mapping) else tags
            for group, tags in exif_data.items()
        })

    @staticmethod
    def assemble(
        exif_data: Mapping[str, Any],
        gps: Optional[GPSCoordinates],
        options: ExtractionOptions,
        source: ImageSource
    ) -> ImageMetadata:
        """
        Build the final metadata record.

        Args:
            exif_data: Decoded tag groups
            gps: Resolved GPS coordinates (or None)
            options: Extraction options
            source: Validated input (carries file name/size for named inputs)

        Returns:
            ImageMetadata with has_gps == (gps is not None)
        """
        exif = MetadataAssembler.tag_group(exif_data, *MetadataAssembler.EXIF_GROUPS)
        ifd0 = MetadataAssembler.tag_group(exif_data, *MetadataAssembler.IFD0_GROUPS)

        return ImageMetadata(
            gps=gps,
            camera=MetadataAssembler.camera_info(exif, ifd0),
            image=MetadataAssembler.image_info(exif, ifd0),
            date_time=MetadataAssembler.date_time_info(exif, ifd0),
            has_gps=gps is not None,
            raw_exif=MetadataAssembler.frozen_groups(exif_data) if options.include_raw_exif else None,
            file_name=source.file_name,
            file_size=source.file_size,
        )
