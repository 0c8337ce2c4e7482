# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint descriptor model."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import InvalidEndpoint


@dataclass(frozen=True)
class EndpointSpec:
    """
    One configured endpoint to check every round.

    `body` is kept as the raw JSON text from the configuration and is
    validated on construction; `payload()` returns the decoded value sent
    with each request. The URL is deliberately not validated here: an
    unparseable URL is skipped round by round by the scheduler.
    """

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.url, str):
            object.__setattr__(self, "url", self.url.strip())
        object.__setattr__(self, "method", (self.method or "GET").strip().upper())
        object.__setattr__(self, "headers", dict(self.headers or {}))
        if self.body:
            try:
                json.loads(self.body)
            except (TypeError, ValueError) as exc:
                raise InvalidEndpoint(f"{self.label}: body is not valid JSON ({exc})") from exc

    @property
    def label(self) -> str:
        return self.name or str(self.url)

    def payload(self) -> Any:
        """Decoded JSON body, or None when the endpoint has no body."""
        if not self.body:
            return None
        return json.loads(self.body)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EndpointSpec:
        """Build an endpoint from one entry of the configuration list."""
        url = data.get("url")
        name = data.get("name")
        name = str(name) if name is not None else None
        if url is None or (isinstance(url, str) and not url.strip()):
            raise InvalidEndpoint(f"{name or '<unnamed endpoint>'}: missing required 'url'")

        method = data.get("method")
        if method is not None and not isinstance(method, str):
            raise InvalidEndpoint(f"{name or url}: 'method' must be a string")

        raw_headers = data.get("headers") or {}
        if not isinstance(raw_headers, Mapping):
            raise InvalidEndpoint(f"{name or url}: 'headers' must be a mapping")
        headers = {str(k): "" if v is None else str(v) for k, v in raw_headers.items()}

        body = data.get("body")
        if body is not None and not isinstance(body, str):
            raise InvalidEndpoint(f"{name or url}: 'body' must be a JSON string")

        return cls(
            url=str(url),
            method=method or "GET",
            headers=headers,
            body=body or None,
            name=name,
        )
