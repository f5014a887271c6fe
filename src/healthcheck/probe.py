"""Standalone health probe for the sync bridge and its dependencies."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

import requests

from src.config import SyncSettings

logger = logging.getLogger(__name__)

# Timeout in seconds for each probe request
PROBE_TIMEOUT = 5.0


class ProbeStatus(StrEnum):
    """Outcome of probing a single service."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNREACHABLE = "unreachable"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ServiceTarget:
    """A named service to probe."""

    name: str
    url: str | None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ProbeResult:
    """Result of probing one service."""

    name: str
    status: ProbeStatus
    detail: str | None = None

    @property
    def counts_as_failure(self) -> bool:
        """Whether this result should fail the overall probe."""
        return self.status in (ProbeStatus.UNHEALTHY, ProbeStatus.UNREACHABLE)

    def format_line(self) -> str:
        """Format the result as a single console line."""
        match self.status:
            case ProbeStatus.HEALTHY:
                return f"✅ {self.name}: Healthy"
            case ProbeStatus.UNHEALTHY:
                return f"❌ {self.name}: Unhealthy (Status: {self.detail})"
            case ProbeStatus.UNREACHABLE:
                return f"❌ {self.name}: Unreachable ({self.detail})"
            case _:
                return f"⚠️  {self.name}: URL not configured"


def build_targets(settings: SyncSettings) -> list[ServiceTarget]:
    """Build the list of services to probe from settings.

    :param settings: Sync settings.
    :returns: Application, Netlify and Supabase targets, in that order.
    """
    supabase_url = (
        f"{settings.supabase_url.rstrip('/')}/rest/v1/" if settings.supabase_url else None
    )
    supabase_headers = {"apikey": settings.supabase_key} if settings.supabase_key else {}

    return [
        ServiceTarget(name="Application", url=settings.app_url),
        ServiceTarget(name="Netlify", url=settings.netlify_site_url),
        ServiceTarget(name="Supabase", url=supabase_url, headers=supabase_headers),
    ]


def probe_service(target: ServiceTarget, *, timeout: float = PROBE_TIMEOUT) -> ProbeResult:
    """GET a service URL and classify the response.

    Only HTTP 200 counts as healthy.

    :param target: The service to probe.
    :param timeout: Request timeout in seconds.
    :returns: The probe result.
    """
    if not target.url:
        return ProbeResult(name=target.name, status=ProbeStatus.SKIPPED)

    try:
        response = requests.get(target.url, headers=target.headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.debug(f"Probe of {target.name} failed: {e}")
        return ProbeResult(name=target.name, status=ProbeStatus.UNREACHABLE, detail=str(e))

    if response.status_code == 200:
        return ProbeResult(name=target.name, status=ProbeStatus.HEALTHY)
    return ProbeResult(
        name=target.name,
        status=ProbeStatus.UNHEALTHY,
        detail=str(response.status_code),
    )


def run_probe(
    targets: Sequence[ServiceTarget],
    *,
    timeout: float = PROBE_TIMEOUT,
    output: Callable[[str], None] = print,
) -> bool:
    """Probe every target and print one line per service.

    :param targets: Services to probe.
    :param timeout: Request timeout in seconds.
    :param output: Line writer.
    :returns: True if every configured service returned HTTP 200.
    """
    output("🏥 Starting health checks...\n")

    all_healthy = True
    for target in targets:
        result = probe_service(target, timeout=timeout)
        output(result.format_line())
        if result.counts_as_failure:
            all_healthy = False

    output("\n" + ("✅ All services healthy" if all_healthy else "❌ Some services unhealthy"))
    return all_healthy
