"""
Publication Assistant Backend - Shared Response Schemas
========================================================

What:  Error, health and client-manifest response models shared by all routes.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "precondition_failed",
            "message": "Referenced institute with ID '42' does not exist",
            "details": {"parent": "institute", "parent_id": "42"},
            "request_id": "1f0c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class ClientRouteGroup(BaseModel):
    """One client-side navigation module and the views it routes to."""
    name: str = Field(description="Route group / module name, e.g. 'journals'")
    title: str = Field(description="Navigation label")
    path: str = Field(description="Client-side base path, e.g. '/journals'")
    resource: Optional[str] = Field(
        default=None,
        description="API collection the group's views call (null if none yet)",
    )


class ClientManifest(BaseModel):
    module: str = Field(description="Root client module name")
    groups: List[ClientRouteGroup]
