"""
FastAPI service for exifmeta-core

Exposes metadata extraction as HTTP API for language-agnostic access.
"""

import logging
import os
from io import BytesIO
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from exifmeta_core import (
    ExtractionError,
    ExtractionOptions,
    __version__,
    extract_gps_only,
    extract_image_metadata,
)

logger = logging.getLogger("exifmeta_service")

# Initialize FastAPI app
app = FastAPI(
    title="exifmeta-core API",
    description="EXIF metadata extraction service - converts images to metadata JSON",
    version=__version__,
)

# CORS - allow browser clients to call this service
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure based on deployment
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

STATUS_CODES = {
    ExtractionError.INVALID_FILE: 400,
    ExtractionError.CORRUPTED_DATA: 400,
    ExtractionError.UNSUPPORTED_FORMAT: 415,
    ExtractionError.NO_EXIF_DATA: 422,
    ExtractionError.GPS_PARSING_ERROR: 422,
}


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    message: Optional[str] = None


class GPSResponse(BaseModel):
    """GPS-only response"""
    gps: Optional[Dict[str, Any]] = None
    has_gps: bool = False


async def _read_upload(file: UploadFile) -> BytesIO:
    # A named handle carries file name and size through the extraction
    handle = BytesIO(await file.read())
    handle.name = file.filename or "upload"
    return handle


# API Endpoints
@app.get("/")
def root():
    """API root - health check"""
    return {
        "service": "exifmeta-core API",
        "version": __version__,
        "status": "healthy"
    }


@app.post(
    "/v1/metadata",
    responses={
        400: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def extract_metadata_endpoint(
    file: UploadFile = File(..., description="Image file to inspect"),
    include_raw_exif: bool = Form(False, description="Attach decoded tag groups"),
    validate_gps: bool = Form(False, description="Fail on out-of-range GPS coordinates"),
):
    """
    Extract metadata from an uploaded image.

    Upload image via multipart/form-data (standard file upload).

    Returns:
        ImageMetadata as JSON (gps, camera, image, date_time, has_gps, ...)

    Raises:
        HTTPException 400: Missing or corrupted file
        HTTPException 415: Unsupported file extension
        HTTPException 422: No EXIF data, or invalid GPS with validate_gps

    Example:
        curl -X POST http://localhost:8766/v1/metadata \\
          -F "file=@photo.jpg" \\
          -F "validate_gps=true"
    """
    options = ExtractionOptions(
        include_raw_exif=include_raw_exif,
        validate_gps=validate_gps,
    )
    result = extract_image_metadata(await _read_upload(file), options)

    if result.failed:
        logger.info("Extraction failed for %s: %s", file.filename, result.error.message)
        raise HTTPException(
            status_code=STATUS_CODES.get(result.error.kind, 400),
            detail={"error": result.error.kind.value, "message": result.error.message},
        )

    return result.data.to_dict()


@app.post("/v1/gps", response_model=GPSResponse)
async def extract_gps_endpoint(
    file: UploadFile = File(..., description="Image file to inspect"),
):
    """
    Extract GPS coordinates only (best-effort, never fails).

    Returns:
        {"gps": {...} or null, "has_gps": bool}
    """
    gps_result = extract_gps_only(await _read_upload(file))
    return GPSResponse(
        gps=gps_result.gps.to_dict() if gps_result.gps else None,
        has_gps=gps_result.has_gps,
    )


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=os.environ.get("EXIFMETA_LOG_LEVEL", "INFO"))
    uvicorn.run(
        app,
        host=os.environ.get("EXIFMETA_HOST", "0.0.0.0"),
        port=int(os.environ.get("EXIFMETA_PORT", "8766")),
    )
