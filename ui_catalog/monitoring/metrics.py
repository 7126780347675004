"""
Metrics Collection
Prometheus metrics for catalog service performance tracking
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the catalog service.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.registry = registry

        # Tool metrics
        self.tool_requests_total = Counter(
            "catalog_tool_requests_total",
            "Total number of tool requests",
            ["tool", "status"],
            registry=registry,
        )
        self.tool_duration = Histogram(
            "catalog_tool_duration_seconds",
            "Tool request duration in seconds",
            ["tool"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
            registry=registry,
        )

        # Validation metrics
        self.validation_findings = Counter(
            "catalog_validation_findings_total",
            "Consistency findings emitted by the validator",
            ["severity"],
            registry=registry,
        )

        # Catalog metrics
        self.catalog_loads = Counter(
            "catalog_loads_total",
            "Catalog load attempts",
            ["status"],
            registry=registry,
        )
        self.catalog_components = Gauge(
            "catalog_components",
            "Number of component entries in the loaded catalog",
            registry=registry,
        )

        # Error metrics
        self.errors_total = Counter(
            "catalog_errors_total",
            "Total number of errors",
            ["error_type", "component"],
            registry=registry,
        )

        # System metrics
        self.uptime = Gauge(
            "catalog_uptime_seconds",
            "Service uptime in seconds",
            registry=registry,
        )
        self.start_time = time.time()

    def record_tool_request(self, tool: str, status: str, duration: float) -> None:
        """Record a tool request."""
        self.tool_requests_total.labels(tool=tool, status=status).inc()
        self.tool_duration.labels(tool=tool).observe(duration)

    def record_validation(self, errors: int, warnings: int) -> None:
        """Record validator findings."""
        if errors:
            self.validation_findings.labels(severity="error").inc(errors)
        if warnings:
            self.validation_findings.labels(severity="warning").inc(warnings)

    def record_catalog_load(self, status: str, components: int = 0) -> None:
        """Record a catalog load attempt."""
        self.catalog_loads.labels(status=status).inc()
        if status == "success":
            self.catalog_components.set(components)

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    def update_uptime(self) -> None:
        """Update the uptime metric."""
        self.uptime.set(time.time() - self.start_time)

    @contextmanager
    def measure_duration(self, callback: Callable[[float], None]) -> Iterator[None]:
        """Context manager to measure operation duration."""
        start = time.perf_counter()
        try:
            yield
        finally:
            callback(time.perf_counter() - start)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest(self.registry)


# Global metrics collector instance
metrics_collector = MetricsCollector()
