"""Entry point for the health probe.

Allows running with: python -m src.healthcheck
"""

import sys

from dotenv import load_dotenv

from src.config import SyncSettings
from src.healthcheck.probe import build_targets, run_probe
from src.paths import ENV_FILE


def main() -> None:
    """Probe all services and exit 0 if healthy, 1 otherwise."""
    load_dotenv(ENV_FILE)
    healthy = run_probe(build_targets(SyncSettings()))
    sys.exit(0 if healthy else 1)


if __name__ == "__main__":
    main()
