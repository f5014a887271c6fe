"""Health probe for the sync bridge and its downstream services."""

from src.healthcheck.probe import (
    ProbeResult,
    ProbeStatus,
    ServiceTarget,
    build_targets,
    probe_service,
    run_probe,
)

__all__ = [
    "ProbeResult",
    "ProbeStatus",
    "ServiceTarget",
    "build_targets",
    "probe_service",
    "run_probe",
]
