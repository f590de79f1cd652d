"""
Gateway Response Models
======================

Pydantic models for API responses that are not plain node values.
"""

from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Error response"""

    error: str
    detail: Optional[str] = None
    descriptor: Optional[str] = None  # Epoch descriptor for leader lookups


class HealthResponse(BaseModel):
    """Health check response"""

    service: str
    status: str
    build_id: str
    github_commit: str
    ssc_enabled: bool
    timestamp: str
