"""
High-level API for exifmeta-core

Convenience functions for extracting metadata from images.
All of them return results as data; none of them raise.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional

from .metadata.assembler import MetadataAssembler
from .metadata.exif_decoder import ExifDecoder
from .metadata.gps import parse_gps_coordinates, resolve_position
from .models.metadata import is_valid_coordinate
from .models.result import (
    ExtractionError,
    ExtractionOptions,
    ExtractionResult,
    GPSResult,
)
from .validation.input_validator import InputValidator

logger = logging.getLogger(__name__)


def extract_image_metadata(
    source: Any,
    options: Optional[ExtractionOptions] = None,
    decoder: Any = None
) -> ExtractionResult:
    """
    Extract structured metadata from an image.

    Pipeline: validate input -> decode EXIF -> resolve GPS -> extract
    camera/image/date-time fields -> assemble.

    Args:
        source: Raw bytes, a path, or a binary file handle
        options: Extraction options (defaults to ExtractionOptions())
        decoder: EXIF decoder with a load(buffer, expanded=...) method
                 (defaults to the Pillow-based ExifDecoder)

    Returns:
        ExtractionResult with ImageMetadata on success, or the failure kind
        and message

    Example:
        >>> from pathlib import Path
        >>> from exifmeta_core import extract_image_metadata, ExtractionOptions
        >>>
        >>> result = extract_image_metadata(Path("photo.jpg"))
        >>> if result.success and result.data.has_gps:
        ...     print(result.data.gps.latitude, result.data.gps.longitude)
        >>>
        >>> # Keep the decoded tag groups, fail on out-of-range GPS
        >>> options = ExtractionOptions(include_raw_exif=True, validate_gps=True)
        >>> result = extract_image_metadata(Path("photo.jpg"), options)
    """
    options = options or ExtractionOptions()
    decoder = decoder or ExifDecoder

    try:
        image_source, failure = InputValidator.validate_input(source)
        if failure is not None:
            return ExtractionResult(success=False, error=failure)

        try:
            exif_data = decoder.load(image_source.buffer, expanded=True)
        except Exception as e:
            logger.debug("EXIF decode failed", exc_info=True)
            return ExtractionResult.fail(
                ExtractionError.CORRUPTED_DATA,
                f"Failed to read EXIF data: {e}"
            )

        if not exif_data:
            return ExtractionResult.fail(ExtractionError.NO_EXIF_DATA, "No EXIF data found in image")

        gps_data = exif_data.get('gps')
        gps = parse_gps_coordinates(gps_data)

        # Without validate_gps, out-of-range coordinates silently become gps=None
        if options.validate_gps and gps is None:
            position = resolve_position(gps_data)
            if position is not None and not is_valid_coordinate(*position):
                return ExtractionResult.fail(
                    ExtractionError.GPS_PARSING_ERROR,
                    f"Invalid GPS coordinates detected: {position[0]}, {position[1]}"
                )

        metadata = MetadataAssembler.assemble(exif_data, gps, options, image_source)
        return ExtractionResult.ok(metadata)

    except Exception as e:
        logger.warning("Unexpected error during metadata extraction", exc_info=True)
        return ExtractionResult.fail(
            ExtractionError.CORRUPTED_DATA,
            f"Unexpected error during metadata extraction: {e}"
        )


def extract_gps_only(source: Any, decoder: Any = None) -> GPSResult:
    """
    Extract only GPS coordinates (lightweight, best-effort).

    Unknown tags are skipped while decoding. Any failure gives
    GPSResult(gps=None, has_gps=False).

    Args:
        source: Raw bytes, a path, or a binary file handle
        decoder: EXIF decoder (defaults to ExifDecoder)

    Returns:
        GPSResult
    """
    decoder = decoder or ExifDecoder

    try:
        image_source, failure = InputValidator.validate_input(source)
        if failure is not None:
            logger.warning("Error extracting GPS data: %s", failure.message)
            return GPSResult()

        exif_data = decoder.load(image_source.buffer, expanded=True, include_unknown=False)
        gps = parse_gps_coordinates(exif_data.get('gps') if exif_data else None)
        return GPSResult(gps=gps, has_gps=gps is not None)

    except Exception as e:
        logger.warning("Error extracting GPS data: %s", e)
        return GPSResult()


def has_gps_data(source: Any, decoder: Any = None) -> bool:
    """
    Check if an image contains usable GPS coordinates.

    Args:
        source: Raw bytes, a path, or a binary file handle
        decoder: EXIF decoder (defaults to ExifDecoder)

    Returns:
        True if GPS coordinates were resolved
    """
    return extract_gps_only(source, decoder=decoder).has_gps


def batch_extract(
    sources: Iterable[Any],
    options: Optional[ExtractionOptions] = None,
    progress_callback: Optional[Callable[[int, int, ExtractionResult], None]] = None,
    decoder: Any = None
) -> List[ExtractionResult]:
    """
    Extract metadata from multiple images with optional progress tracking.

    Args:
        sources: Paths, buffers or file handles
        options: Extraction options applied to every image
        progress_callback: Optional callback(current, total, result)
        decoder: EXIF decoder (defaults to ExifDecoder)

    Returns:
        List of ExtractionResult objects, in input order

    Example:
        >>> from pathlib import Path
        >>> from exifmeta_core import batch_extract
        >>>
        >>> images = sorted(Path("./photos").glob("*.jpg"))
        >>>
        >>> def on_progress(current, total, result):
        ...     status = "ok" if result.success else result.error.kind.value
        ...     print(f"[{current}/{total}] {status}")
        >>>
        >>> results = batch_extract(images, progress_callback=on_progress)
        >>> located = [r for r in results if r.success and r.data.has_gps]
    """
    sources = list(sources)
    results = []
    total = len(sources)

    for i, source in enumerate(sources, 1):
        result = extract_image_metadata(source, options=options, decoder=decoder)
        results.append(result)

        if progress_callback:
            progress_callback(i, total, result)

    return results

