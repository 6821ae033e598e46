# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level httpi facade: pick an adapter, log the call, delegate."""

from __future__ import annotations

import logging
from typing import Protocol

from .config import HttpSettings, load_http_settings
from .http.adapter import EasyAdapter
from .http.models import SUPPORTED_METHODS, Request, Response

logger = logging.getLogger(__name__)


class Adapter(Protocol):
    """Anything exposing one method per supported verb."""

    def get(self, request: Request) -> Response: ...

    def post(self, request: Request) -> Response: ...

    def put(self, request: Request) -> Response: ...

    def delete(self, request: Request) -> Response: ...

    def head(self, request: Request) -> Response: ...


class Httpi:
    """
    Convenience wrapper that routes requests through one adapter.

    Each call is logged (when enabled in HttpSettings) before it is handed to the
    adapter; errors from the adapter propagate unchanged.
    """

    def __init__(self, adapter: Adapter | None = None, settings: HttpSettings | None = None):
        self.settings = settings or load_http_settings()
        self.adapter = adapter or EasyAdapter(settings=self.settings)

    def request(self, method: str, request: Request | str) -> Response:
        verb = str(method or "").upper()
        if verb not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method!r}")
        if isinstance(request, str):
            request = Request(url=request, method=verb)
        self._log(verb)
        return getattr(self.adapter, verb.lower())(request)

    def get(self, request: Request | str) -> Response:
        return self.request("GET", request)

    def post(self, request: Request | str) -> Response:
        return self.request("POST", request)

    def put(self, request: Request | str) -> Response:
        return self.request("PUT", request)

    def delete(self, request: Request | str) -> Response:
        return self.request("DELETE", request)

    def head(self, request: Request | str) -> Response:
        return self.request("HEAD", request)

    @property
    def adapter_name(self) -> str:
        return str(getattr(self.adapter, "name", None) or type(self.adapter).__name__)

    def _log(self, verb: str) -> None:
        if not self.settings.log_requests:
            return
        level = getattr(logging, self.settings.log_level.upper(), logging.DEBUG)
        logger.log(level, "HTTPI executes HTTP %s using the %s adapter", verb, self.adapter_name)


def request(method: str, request: Request | str, adapter: Adapter | None = None) -> Response:
    """Execute ``request`` with ``method`` through ``adapter`` (default: EasyAdapter)."""
    return Httpi(adapter).request(method, request)


def get(request: Request | str, adapter: Adapter | None = None) -> Response:
    return Httpi(adapter).get(request)


def post(request: Request | str, adapter: Adapter | None = None) -> Response:
    return Httpi(adapter).post(request)


def put(request: Request | str, adapter: Adapter | None = None) -> Response:
    return Httpi(adapter).put(request)


def delete(request: Request | str, adapter: Adapter | None = None) -> Response:
    return Httpi(adapter).delete(request)


def head(request: Request | str, adapter: Adapter | None = None) -> Response:
    return Httpi(adapter).head(request)


__all__ = ["Adapter", "Httpi", "delete", "get", "head", "post", "put", "request"]
