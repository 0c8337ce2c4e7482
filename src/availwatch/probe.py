# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-shot endpoint checks."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .config import LATENCY_THRESHOLD_MS, REQUEST_TIMEOUT_SECONDS
from .errors import ErrorCategory, categorize_exception, error_category_to_reason
from .http.client import HttpClient
from .http.models import HttpRequest, HttpResponse
from .models.endpoint import EndpointSpec
from .models.probe import ProbeResult

logger = logging.getLogger(__name__)


def is_up(response: HttpResponse, elapsed_ms: float) -> bool:
    """A check is up when a 2xx response arrived in under the latency threshold."""
    if not response.ok or response.status_code is None:
        return False
    return 200 <= response.status_code < 300 and elapsed_ms < LATENCY_THRESHOLD_MS


class EndpointProber:
    """
    Issues exactly one request per endpoint and reduces it to an up/down verdict.

    Nothing raised by the HTTP client escapes `probe`; every failure becomes
    `up=False`. There are no retries: a down endpoint is simply checked again
    next round.
    """

    def __init__(self, http_client: HttpClient, *, clock: Callable[[], float] = time.perf_counter):
        self.http_client = http_client
        self._clock = clock

    def build_request(self, endpoint: EndpointSpec) -> HttpRequest:
        return HttpRequest(
            url=endpoint.url,
            method=endpoint.method,
            headers=dict(endpoint.headers),
            json=endpoint.payload(),
            timeout=REQUEST_TIMEOUT_SECONDS,
        )

    def probe(self, endpoint: EndpointSpec) -> ProbeResult:
        request = self.build_request(endpoint)
        start = self._clock()
        try:
            response = self.http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse(
                ok=False,
                error_message=str(exc),
                error_type=exc.__class__.__name__,
                meta={"error_category": categorize_exception(exc).value},
            )
        elapsed_ms = (self._clock() - start) * 1000.0

        up = is_up(response, elapsed_ms)
        result = ProbeResult(
            up=up,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
            error_category=response.meta.get("error_category"),
        )
        if not up:
            logger.debug("%s is down: %s", endpoint.label, _describe_failure(result, response))
        return result


def _describe_failure(result: ProbeResult, response: HttpResponse) -> str:
    if not response.ok:
        try:
            category = ErrorCategory(result.error_category) if result.error_category else ErrorCategory.UNKNOWN_ERROR
        except ValueError:
            category = ErrorCategory.UNKNOWN_ERROR
        reason = error_category_to_reason(category)
        return f"{reason} ({response.error_message})" if response.error_message else reason
    if result.status_code is not None and not 200 <= result.status_code < 300:
        return f"HTTP {result.status_code}"
    return f"slow response ({result.elapsed_ms:.0f} ms)"


__all__ = ["EndpointProber", "is_up"]
