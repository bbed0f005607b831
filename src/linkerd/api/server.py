"""
FastAPI Server - Linkerd control plane public API
"""

import logging
import platform
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from linkerd.version.running import RunningVersion
from .client import VERSION_PATH
from .metrics import get_metrics_collector
from .models import HealthResponse, VersionInfo

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(running: Optional[RunningVersion] = None, debug: bool = False) -> FastAPI:
    """
    Create and configure the public API application

    Args:
        running: Version this control plane reports. Resolved from the
                 build and environment when not provided.
        debug: Enable debug mode with verbose logging

    Returns:
        Configured FastAPI application
    """
    if running is None:
        running = RunningVersion.resolve()

    app = FastAPI(
        title="Linkerd Public API",
        description="Control plane public API",
        version=running.value,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    metrics = get_metrics_collector()
    logger.info(f"Control plane running version {running.value}")

    @app.get(VERSION_PATH, response_model=VersionInfo)
    async def version() -> VersionInfo:
        """Report the control plane's release version"""
        metrics.record_version_request(200)
        return VersionInfo(
            release_version=running.value,
            python_version=platform.python_version()
        )

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint"""
        return HealthResponse(status="healthy", version=running.value)

    @app.get("/metrics")
    async def prometheus_metrics() -> Response:
        """Prometheus metrics exposition"""
        metrics.update_uptime()
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    if debug:
        logger.setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled")

    return app
