"""
Base models for the Namakarana API - Pydantic V2 compliant.

These base models provide standardized request/response patterns
for all API endpoints.
"""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.functional_validators import AfterValidator

from app.core.config import SERVICE_VERSION

# --- Validators ---


def _closed_range(label: str, low: float, high: float):
    def check(v: float) -> float:
        if not low <= v <= high:
            raise ValueError(f"{label} must be between {low:g} and {high:g}, got {v}")
        return v

    return check


validate_latitude = _closed_range("Latitude", -90, 90)
validate_longitude = _closed_range("Longitude", -180, 180)
validate_tz_offset = _closed_range("Timezone offset", -14, 14)


def validate_sidereal_longitude(v: float) -> float:
    """Chart longitudes are half-open: 360 is Aries again"""
    if not 0 <= v < 360:
        raise ValueError(f"Sidereal longitude must be in [0, 360), got {v}")
    return v


def as_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted"""
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)


# --- Type Aliases ---

Latitude = Annotated[float, AfterValidator(validate_latitude)]
Longitude = Annotated[float, AfterValidator(validate_longitude)]
SiderealLongitude = Annotated[float, AfterValidator(validate_sidereal_longitude)]
TzOffset = Annotated[float, AfterValidator(validate_tz_offset)]
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


# --- Base Response Models ---


class MetaInfo(BaseModel):
    """Metadata for API responses"""

    version: str = Field(default=SERVICE_VERSION, description="API version")
    compute_time_ms: float = Field(
        default=0.0, description="Computation time in milliseconds"
    )
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class BaseResponse(BaseModel):
    """Base response model with standard structure"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "success",
                "data": {},
                "meta": {"version": SERVICE_VERSION, "compute_time_ms": 0.42},
            }
        },
    )

    status: str = Field(default="success", description="Response status")
    data: dict[str, Any] = Field(default_factory=dict, description="Response data")
    meta: MetaInfo = Field(default_factory=MetaInfo, description="Response metadata")


class ErrorResponse(BaseModel):
    """Error response model"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "error",
                "error": "Feature disabled",
                "detail": "Feature 'katapayadi' is disabled",
                "code": "FEATURE_DISABLED",
            }
        },
    )

    status: str = Field(default="error")
    error: str = Field(..., description="Error message")
    detail: str | None = Field(default=None, description="Detailed error information")
    code: str | None = Field(default=None, description="Error code")


__all__ = [
    "BaseResponse",
    "ErrorResponse",
    "MetaInfo",
    "Latitude",
    "Longitude",
    "SiderealLongitude",
    "TzOffset",
    "UTCDateTime",
]
