"""
Linkerd public API - control plane version endpoint and client
"""

from .models import VersionInfo
from .client import PublicApiClient

__all__ = ["VersionInfo", "PublicApiClient"]
