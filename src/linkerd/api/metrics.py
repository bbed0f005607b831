"""
Metrics Collection Module - Prometheus-compatible metrics for the public API
"""

import time
from typing import Optional
from prometheus_client import Counter, Gauge


class MetricsCollector:
    """
    Centralized metrics collection for the Linkerd public API server.

    Provides Prometheus-compatible metrics for:
    - Version request counts by status
    - Server uptime
    """

    def __init__(self):
        """Initialize Prometheus metrics"""
        self._start_time = time.time()

        # Counter: Total version requests
        self.version_requests_total = Counter(
            'version_requests_total',
            'Total number of control plane version requests',
            ['status']
        )

        # Gauge: Server uptime in seconds
        self.uptime_seconds = Gauge(
            'uptime_seconds',
            'Server uptime in seconds'
        )

    def update_uptime(self):
        """Refresh the uptime gauge"""
        self.uptime_seconds.set(time.time() - self._start_time)

    def record_version_request(self, status: int):
        """
        Record a served version request.

        Args:
            status: HTTP status code of the response
        """
        self.version_requests_total.labels(status=str(status)).inc()


# Global metrics collector instance
_metrics_collector: Optional[MetricsCollector] = None


def get_metrics_collector() -> MetricsCollector:
    """
    Get or create the global metrics collector instance.

    Returns:
        MetricsCollector instance
    """
    global _metrics_collector
    if _metrics_collector is None:
        _metrics_collector = MetricsCollector()
    return _metrics_collector
