"""
Input Validation Module

Validates extraction inputs and reads their bytes.

Accepted inputs:
- Raw buffers (bytes, bytearray, memoryview): no file name or size
- Paths (str or os.PathLike)
- Binary file handles (anything with read(); the name is taken from .name)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple

from ..image.formats import FormatDetector
from ..models.result import ExtractionError, ExtractionFailure


@dataclass(frozen=True)
class ImageSource:
    """Bytes of one input plus what the input said about itself"""
    buffer: bytes
    file_name: Optional[str] = None
    file_size: Optional[int] = None


class InputValidator:
    """Validate extraction inputs before decoding"""

    BUFFER_TYPES = (bytes, bytearray, memoryview)

    @staticmethod
    def validate_input(source: Any) -> Tuple[Optional[ImageSource], Optional[ExtractionFailure]]:
        """
        Validate an input and read its bytes.

        Checks:
        - Input is present
        - Named inputs have a supported extension
        - Paths exist and are readable files

        Args:
            source: Buffer, path or binary file handle

        Returns:
            (image_source, failure) tuple; exactly one is None
        """
        if source is None:
            return None, ExtractionFailure(ExtractionError.INVALID_FILE, "No image file provided")

        if isinstance(source, InputValidator.BUFFER_TYPES):
            return ImageSource(buffer=bytes(source)), None

        if isinstance(source, (str, os.PathLike)):
            return InputValidator._from_path(Path(source))

        if callable(getattr(source, 'read', None)):
            return InputValidator._from_handle(source)

        return None, ExtractionFailure(
            ExtractionError.INVALID_FILE,
            f"Unsupported input type: {type(source).__name__}"
        )

    @staticmethod
    def _unsupported(file_name: str) -> ExtractionFailure:
        return ExtractionFailure(
            ExtractionError.UNSUPPORTED_FORMAT,
            f"Unsupported file format: {file_name}"
        )

    @staticmethod
    def _from_path(file_path: Path) -> Tuple[Optional[ImageSource], Optional[ExtractionFailure]]:
        if not FormatDetector.is_supported(file_path):
            return None, InputValidator._unsupported(file_path.name)

        if not file_path.exists():
            return None, ExtractionFailure(ExtractionError.INVALID_FILE, f"File not found: {file_path}")

        if not file_path.is_file():
            return None, ExtractionFailure(ExtractionError.INVALID_FILE, f"Not a file: {file_path}")

        try:
            buffer = file_path.read_bytes()
        except OSError as e:
            return None, ExtractionFailure(ExtractionError.INVALID_FILE, f"Cannot access file: {e}")

        return ImageSource(buffer=buffer, file_name=file_path.name, file_size=len(buffer)), None

    @staticmethod
    def _from_handle(handle: Any) -> Tuple[Optional[ImageSource], Optional[ExtractionFailure]]:
        name = getattr(handle, 'name', None)
        file_name = os.path.basename(os.fspath(name)) if isinstance(name, (str, os.PathLike)) else None

        if file_name is not None and not FormatDetector.is_supported(file_name):
            return None, InputValidator._unsupported(file_name)

        try:
            data = handle.read()
        except OSError as e:
            return None, ExtractionFailure(ExtractionError.INVALID_FILE, f"Cannot read file: {e}")

        if not isinstance(data, InputValidator.BUFFER_TYPES):
            return None, ExtractionFailure(
                ExtractionError.INVALID_FILE,
                "File handle must be opened in binary mode"
            )

        buffer = bytes(data)
        if file_name is None:
            return ImageSource(buffer=buffer), None
        return ImageSource(buffer=buffer, file_name=file_name, file_size=len(buffer)), None

    @staticmethod
    def is_valid(source: Any) -> bool:
        """
        Quick check if an input passes validation.

        Note: reads file handles to the end.
        """
        _, failure = InputValidator.validate_input(source)
        return failure is None
