# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

import socket
import ssl as ssl_module
from enum import Enum
from typing import Optional

import httpx


class AvailwatchError(Exception):
    """Base class for availwatch errors."""


class ConfigError(AvailwatchError):
    """The endpoint configuration could not be read or is structurally malformed."""


class InvalidEndpoint(ConfigError):
    """A single endpoint entry is unusable (missing url, non-JSON body, ...)."""


class InvalidURL(AvailwatchError, ValueError):
    """A URL could not be parsed as an absolute URL."""

    def __init__(self, url: object):
        super().__init__(f"Invalid URL: {url}")
        self.url = url


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def _exception_chain(exc: BaseException):
    seen: set[int] = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps lower-level socket/ssl errors, so the cause chain is inspected
    before falling back to the httpx class itself.
    """
    chain = list(_exception_chain(exc))
    if any(isinstance(e, (socket.gaierror, socket.herror)) for e in chain):
        return ErrorCategory.DNS_ERROR
    if any(isinstance(e, (ssl_module.SSLError, ssl_module.CertificateError)) for e in chain):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.DecodingError)):
        return ErrorCategory.PROTOCOL_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Request timed out",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.PROTOCOL_ERROR: "Malformed HTTP response",
        ErrorCategory.UNKNOWN_ERROR: "Network error during check",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Check failed due to network error")
