# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import time
from collections.abc import Callable

import httpx

from ..config import REQUEST_TIMEOUT_SECONDS, MonitorSettings, load_monitor_settings
from ..errors import ErrorCategory, categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    httpx applies its timeout per connect/read/write operation, so a server
    that trickles bytes can outlive it. The request timeout here is a total
    deadline for the whole attempt, redirects and body included.
    """

    def __init__(
        self,
        settings: MonitorSettings | None = None,
        client: httpx.Client | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings or load_monitor_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=REQUEST_TIMEOUT_SECONDS,
            verify=self.settings.verify_ssl,
        )
        self._clock = clock

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        if not any(name.lower() == "user-agent" for name in headers):
            headers["User-Agent"] = self.settings.user_agent
        follow_redirects = request.allow_redirects
        if follow_redirects is None:
            follow_redirects = self.settings.allow_redirects

        try:
            timeout = request.timeout if request.timeout is not None else REQUEST_TIMEOUT_SECONDS
            deadline = self._clock() + timeout
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                json=request.json,
                timeout=timeout,
                follow_redirects=follow_redirects,
            ) as resp:
                if self._clock() >= deadline:
                    return _deadline_exceeded(request, timeout)
                # Drain the body so timing covers the full response.
                bytes_read = 0
                truncated = False
                for chunk in resp.iter_bytes():
                    if self._clock() >= deadline:
                        return _deadline_exceeded(request, timeout)
                    bytes_read += len(chunk)
                    if bytes_read >= self.settings.max_body_bytes:
                        truncated = True
                        break

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                url=str(resp.url),
                meta={
                    "body_truncated": truncated,
                    "body_bytes_read": bytes_read,
                },
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc),
                error_type=type(exc).__name__,
                meta={"error_category": categorize_exception(exc).value},
            )

    def close(self) -> None:
        self._client.close()


def _deadline_exceeded(request: HttpRequest, timeout: float) -> HttpResponse:
    return HttpResponse(
        ok=False,
        url=request.url,
        error_message=f"Request exceeded {timeout:g}s total timeout",
        error_type="ReadTimeout",
        meta={"error_category": ErrorCategory.TIMEOUT.value},
    )
