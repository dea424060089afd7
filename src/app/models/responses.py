#!/usr/bin/env python3
"""
API response models using Pydantic V2.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from .base import BaseResponse, ErrorResponse, MetaInfo


class ServiceInfo(BaseModel):
    """Root endpoint payload"""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    docs: str = Field(..., description="OpenAPI docs path")
    features: list[str] = Field(default_factory=list, description="Enabled engines")


class HealthStatus(BaseModel):
    """Liveness payload"""

    status: str = Field(default="ok")
    timestamp: datetime = Field(..., description="Check time (UTC)")
    version: str = Field(..., description="Service version")
    features: dict[str, bool] = Field(default_factory=dict)


class KatapayadiResponse(BaseResponse):
    """Katapayadi entries plus the 12-sign overlay"""

    entries: list[dict[str, Any]] = Field(default_factory=list)
    by_rashi: dict[int, list[int]] = Field(
        default_factory=dict, description="Entry ids grouped by rashi (1-12)"
    )


__all__ = [
    "BaseResponse",
    "ErrorResponse",
    "MetaInfo",
    "ServiceInfo",
    "HealthStatus",
    "KatapayadiResponse",
]
