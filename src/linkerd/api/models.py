"""
API Data Models - Linkerd public API request/response formats
"""

from pydantic import BaseModel, Field


class VersionInfo(BaseModel):
    """Response format for the /api/v1/Version endpoint"""

    release_version: str = Field(
        description="Release version of the control plane (<channel>-<revision>)"
    )
    python_version: str = Field(
        default="",
        description="Interpreter version the control plane runs on"
    )


class HealthResponse(BaseModel):
    """Response format for the /health endpoint"""

    status: str = Field(description="Server health status")
    version: str = Field(description="Release version of the control plane")
