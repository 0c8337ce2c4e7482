# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for availwatch."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .availability import DomainAvailability, DomainStats
from .endpoint import EndpointSpec
from .probe import ProbeResult

__all__ = [
    "DomainAvailability",
    "DomainStats",
    "EndpointSpec",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeResult",
]
