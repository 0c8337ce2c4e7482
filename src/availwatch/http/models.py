# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across availwatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    json: Any = None
    timeout: float | None = None
    allow_redirects: bool | None = None  # None: use the client setting


@dataclass
class HttpResponse:
    """
    Outcome of a single request attempt.

    `ok` reports whether the transport succeeded (a response was received),
    not whether the status code was a success.
    """

    ok: bool
    status_code: int | None = None
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)
