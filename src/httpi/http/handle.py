# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Capability interface for curl-style "easy" HTTP handles.

A handle is configured through ``setopt`` calls, told to perform one verb, and then
read back for the status code, raw header block and raw body. Adapters depend only
on this protocol so transport engines can be swapped without touching request mapping.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol


class Option(str, Enum):
    URL = "url"
    HEADERS = "headers"
    VERBOSE = "verbose"
    PROXY_URL = "proxy_url"
    TIMEOUT = "timeout"
    CONNECT_TIMEOUT = "connect_timeout"
    HTTP_AUTH_TYPES = "http_auth_types"
    USERNAME = "username"
    PASSWORD = "password"
    CERT = "cert"
    CERT_KEY = "cert_key"
    CACERT = "cacert"
    SSL_VERIFY_PEER = "ssl_verify_peer"


class AuthType(str, Enum):
    BASIC = "basic"
    DIGEST = "digest"


class EasyHandle(Protocol):
    """Minimal protocol for a configurable, single-shot HTTP handle."""

    def setopt(self, option: Option, value: Any) -> None: ...

    def http_get(self) -> None: ...

    def http_post(self, body: bytes | str | None) -> None: ...

    def http_put(self, body: bytes | str | None) -> None: ...

    def http_delete(self) -> None: ...

    def http_head(self) -> None: ...

    def response_code(self) -> int: ...

    def header_str(self) -> str: ...

    def body_bytes(self) -> bytes: ...

    def close(self) -> None:  # pragma: no cover - optional for handles
        ...


__all__ = ["AuthType", "EasyHandle", "Option"]
