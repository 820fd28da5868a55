"""
FastAPI backend for Wind Lab.

This provides REST API endpoints for estimating the wind of a flight from its
GPS track, either uploaded as a GPX file or posted as JSON points.
"""

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Dict, List, Optional, Any
import logging
import io
import sys
import os

# core, services and config live next to this package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import (
    APP_NAME, APP_VERSION, APP_DESCRIPTION, CORS_ORIGINS, DEFAULT_WIND_UNIT,
    LOGGING_CONFIG, WIND_UNITS, WindConfig, TrimConfig, UploadConfig
)

logging.basicConfig(**LOGGING_CONFIG)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{APP_NAME} API",
    description=APP_DESCRIPTION,
    version=APP_VERSION
)

# Web frontend runs on a separate dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

from services.track_analysis_service import analyze_track_data, TrackAnalysisResult
from core.gpx import load_gpx_file
from core.models.track import GPSTrackPoint, track_to_dataframe
from core.validation import ValidationError, validate_track_dataframe, validate_optional_positive


# Request and response schemas
class TrackPointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    timestamp: datetime
    speed: Optional[float] = None
    altitude: Optional[float] = None


class TrackEstimateRequest(BaseModel):
    points: List[TrackPointModel]
    wing_type: Optional[str] = None
    wing_size: Optional[str] = None
    pilot_weight: Optional[float] = None
    unit: str = DEFAULT_WIND_UNIT


class WindEstimateResponse(BaseModel):
    speed: float
    speed_min: float
    speed_max: float
    direction: float
    direction_cardinal: str
    confidence: float
    confidence_level: str
    method: str
    formatted_speed: str
    formatted_range: str


class OctantResponse(BaseModel):
    octant: int
    label: str
    samples: int
    median_speed: Optional[float]


class WindAnalysisResponse(BaseModel):
    estimate: Optional[WindEstimateResponse]
    reason: Optional[str]
    octants: List[OctantResponse]
    track_summary: Dict[str, Any]


def build_response(result: TrackAnalysisResult, unit: str) -> WindAnalysisResponse:
    """Convert an analysis result into the API response."""
    estimate = None
    if result.wind_estimate is not None:
        wind = result.wind_estimate
        estimate = WindEstimateResponse(
            speed=wind.speed,
            speed_min=wind.speed_min,
            speed_max=wind.speed_max,
            direction=wind.direction,
            direction_cardinal=wind.direction_cardinal,
            confidence=wind.confidence,
            confidence_level=wind.confidence_level,
            method=wind.method,
            formatted_speed=wind.formatted_speed(unit),
            formatted_range=wind.formatted_range(unit)
        )

    track_summary = dict(result.summary)
    track_summary['filename'] = result.filename

    return WindAnalysisResponse(
        estimate=estimate,
        reason=result.reason,
        octants=[OctantResponse(**octant) for octant in result.octants],
        track_summary=track_summary
    )


def check_unit(unit: str) -> str:
    if unit not in WIND_UNITS:
        raise HTTPException(status_code=400, detail=f"Unknown unit '{unit}', expected one of {WIND_UNITS}")
    return unit


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": f"{APP_NAME} API",
        "version": APP_VERSION,
        "endpoints": {
            "POST /api/estimate-wind": "Estimate the wind from a GPX track file",
            "POST /api/estimate-wind/track": "Estimate the wind from JSON track points",
            "GET /api/config": "Engine thresholds and trim speed table",
            "GET /api/health": "Health check endpoint"
        }
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "wind-lab-api"}


@app.get("/api/config")
async def get_config():
    """Get engine thresholds, trim speeds and upload limits."""
    return {
        "wind": WindConfig.as_dict(),
        "trim": TrimConfig.as_dict(),
        "upload": UploadConfig.as_dict(),
        "units": WIND_UNITS,
        "default_unit": DEFAULT_WIND_UNIT
    }


@app.post("/api/estimate-wind", response_model=WindAnalysisResponse)
async def estimate_wind_from_file(
    file: UploadFile = File(...),
    wing_type: Optional[str] = None,
    wing_size: Optional[str] = None,
    pilot_weight: Optional[float] = None,
    unit: str = DEFAULT_WIND_UNIT
):
    """
    Estimate the wind from a GPX track file.

    Args:
        file: GPX file to analyze
        wing_type: Wing category (Soaring, Cross, Thermal, Speedflying, Acro)
        wing_size: Wing size, free text accepted ("18m²")
        pilot_weight: Pilot weight in kg
        unit: Display unit for formatted strings ("knots" or "kmh")

    Returns:
        Wind estimate (null when the track cannot support one) with track summary
    """
    check_unit(unit)

    if not file.filename or not file.filename.lower().endswith(UploadConfig.ALLOWED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Only GPX files are allowed")

    content = await file.read()

    if len(content) > UploadConfig.MAX_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is 50MB, received {len(content) / 1024 / 1024:.1f}MB"
        )

    # Anything this small cannot hold a track
    if len(content) < UploadConfig.MIN_SIZE:
        raise HTTPException(status_code=400, detail="File appears to be empty or corrupted")

    try:
        weight = validate_optional_positive(pilot_weight, "Pilot weight")

        logger.info(f"Processing file: {file.filename}")
        track_data, metadata = load_gpx_file(io.BytesIO(content))

        result = analyze_track_data(
            track_data=track_data,
            filename=file.filename,
            metadata=metadata,
            wing_type=wing_type,
            wing_size=wing_size,
            pilot_weight=weight
        )
    except ValidationError as e:
        logger.warning(f"Rejected {file.filename}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error estimating wind: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error estimating wind: {str(e)}")

    return build_response(result, unit)


@app.post("/api/estimate-wind/track", response_model=WindAnalysisResponse)
async def estimate_wind_from_track(request: TrackEstimateRequest):
    """
    Estimate the wind from track points posted as JSON.

    Args:
        request: Chronologically ordered points plus optional wing fields

    Returns:
        Wind estimate (null when the track cannot support one) with track summary
    """
    check_unit(request.unit)

    if not request.points:
        raise HTTPException(status_code=400, detail="No track points provided")

    try:
        weight = validate_optional_positive(request.pilot_weight, "Pilot weight")

        points = [GPSTrackPoint(**point.model_dump()) for point in request.points]
        track_data = validate_track_dataframe(track_to_dataframe(points), "Posted track")

        result = analyze_track_data(
            track_data=track_data,
            filename="posted_track",
            wing_type=request.wing_type,
            wing_size=request.wing_size,
            pilot_weight=weight
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error estimating wind: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error estimating wind: {str(e)}")

    return build_response(result, request.unit)


if __name__ == "__main__":
    import uvicorn
    from config.settings import API_HOST, API_PORT
    uvicorn.run(app, host=API_HOST, port=API_PORT)
