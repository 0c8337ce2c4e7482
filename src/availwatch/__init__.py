# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
availwatch package entrypoint.

Periodically checks a list of HTTP endpoints and reports a running
per-domain availability percentage. HTTP behavior is abstracted behind an
injectable client interface, and state is modeled with typed dataclasses.
"""

from .config import MonitorSettings, load_monitor_settings
from .endpoints import load_endpoints, parse_endpoints
from .errors import ConfigError, ErrorCategory, InvalidEndpoint, InvalidURL
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
    extract_domain,
)
from .ledger import AvailabilityLedger
from .log import setup_logging
from .models import DomainAvailability, DomainStats, EndpointSpec, ProbeResult
from .probe import EndpointProber
from .runtime import Monitor
from .scheduler import HealthCheckScheduler, IntervalTicker, SchedulerState
from .version import __version__

__all__ = [
    "AvailabilityLedger",
    "ConfigError",
    "DomainAvailability",
    "DomainStats",
    "EndpointProber",
    "EndpointSpec",
    "ErrorCategory",
    "HealthCheckScheduler",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "IntervalTicker",
    "InvalidEndpoint",
    "InvalidURL",
    "Monitor",
    "MonitorSettings",
    "ProbeResult",
    "SchedulerState",
    "StubHttpClient",
    "create_default_http_client",
    "extract_domain",
    "load_endpoints",
    "load_monitor_settings",
    "parse_endpoints",
    "setup_logging",
    "__version__",
]
