"""
Health endpoints for the bookmark API.

- /health: status of every registered check plus version and uptime
- /health/ready: 200 only when all checks are healthy
- /health/live: 200 while the process is serving
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class CheckResult:
    name: str
    status: HealthStatus
    message: str = ""
    latency_ms: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)

    def as_dict(self, full: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "message": self.message,
        }
        if full:
            data["latency_ms"] = self.latency_ms
            data["details"] = self.details
        return data


class HealthCheck(Protocol):
    name: str

    def check(self) -> CheckResult:
        ...


class StartupTracker:
    """Process-wide record of when the lifespan finished starting up."""

    _start_time: float | None = None

    @classmethod
    def mark_started(cls) -> None:
        cls._start_time = time.time()

    @classmethod
    def is_started(cls) -> bool:
        return cls._start_time is not None

    @classmethod
    def get_uptime_seconds(cls) -> float:
        return 0.0 if cls._start_time is None else time.time() - cls._start_time


class HealthCheckRegistry:
    def __init__(self) -> None:
        self._checks: list[HealthCheck] = []

    def register(self, check: HealthCheck) -> None:
        self._checks.append(check)

    def run_all(self) -> list[CheckResult]:
        return [c.check() for c in self._checks]


def overall_status(results: list[CheckResult]) -> HealthStatus:
    statuses = {r.status for r in results}
    if HealthStatus.UNHEALTHY in statuses:
        return HealthStatus.UNHEALTHY
    if HealthStatus.DEGRADED in statuses:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY


# --- Checks ---


class StartupCheck:
    """Healthy once the application lifespan has started."""

    name = "startup"

    def check(self) -> CheckResult:
        if not StartupTracker.is_started():
            return CheckResult(self.name, HealthStatus.UNHEALTHY, "Startup not complete")
        return CheckResult(
            self.name,
            HealthStatus.HEALTHY,
            "Startup complete",
            details={"uptime_seconds": StartupTracker.get_uptime_seconds()},
        )


class StoreCheck:
    """Reports record counts of the in-memory store."""

    name = "store"

    def __init__(self, counts_fn: Callable[[], dict[str, int]]) -> None:
        self._counts_fn = counts_fn

    def check(self) -> CheckResult:
        start = time.perf_counter()
        try:
            counts = self._counts_fn()
        except Exception as e:
            status_, message, counts = HealthStatus.UNHEALTHY, f"Store error: {e!s}", {}
        else:
            status_, message = HealthStatus.HEALTHY, "Store available"
        latency = (time.perf_counter() - start) * 1000
        return CheckResult(self.name, status_, message, latency_ms=latency, details=counts)


# --- Router ---


def _status_code(healthy: bool) -> int:
    return status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE


def create_health_router(version: str, registry: HealthCheckRegistry) -> APIRouter:
    """Build the health router over the given checks."""
    router = APIRouter(tags=["health"])

    @router.get(
        "/health",
        response_model=None,
        responses={503: {"description": "A check is failing"}},
    )
    def health_check() -> JSONResponse:
        results = registry.run_all()
        overall = overall_status(results)
        return JSONResponse(
            status_code=_status_code(overall == HealthStatus.HEALTHY),
            content={
                "status": overall.value,
                "version": version,
                "uptime_seconds": StartupTracker.get_uptime_seconds(),
                "checks": [r.as_dict() for r in results],
            },
        )

    @router.get("/health/ready", response_model=None)
    def readiness_check() -> JSONResponse:
        results = registry.run_all()
        ready = overall_status(results) == HealthStatus.HEALTHY
        return JSONResponse(
            status_code=_status_code(ready),
            content={"ready": ready, "checks": [r.as_dict(full=False) for r in results]},
        )

    @router.get("/health/live", response_model=None)
    def liveness_check() -> JSONResponse:
        return JSONResponse(
            content={"alive": True, "uptime_seconds": StartupTracker.get_uptime_seconds()}
        )

    return router
