# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Adapter mapping a Request onto an EasyHandle and its result back onto a Response."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from ..config import HttpSettings
from ..errors import TransportError
from .auth import BasicAuth, DigestAuth, SslAuth
from .handle import AuthType, EasyHandle, Option
from .models import Request, Response

logger = logging.getLogger(__name__)

HandleFactory = Callable[[], EasyHandle]


def _default_handle_factory(settings: HttpSettings | None = None) -> HandleFactory:
    from .httpx_handle import HttpxEasy

    return lambda: HttpxEasy(settings)


class EasyAdapter:
    """
    Adapter for curl-style easy handles.

    Every call takes a fresh handle from ``handle_factory``, configures it from the
    request, performs the verb and normalizes the result. Nothing carries over
    between calls.
    """

    name = "easy"

    def __init__(self, handle_factory: HandleFactory | None = None, settings: HttpSettings | None = None):
        self._handle_factory = handle_factory or _default_handle_factory(settings)

    def get(self, request: Request) -> Response:
        return self._perform(request, lambda handle: handle.http_get())

    def post(self, request: Request) -> Response:
        return self._perform(request, lambda handle: handle.http_post(request.body))

    def put(self, request: Request) -> Response:
        return self._perform(request, lambda handle: handle.http_put(request.body))

    def delete(self, request: Request) -> Response:
        return self._perform(request, lambda handle: handle.http_delete())

    def head(self, request: Request) -> Response:
        return self._perform(request, lambda handle: handle.http_head())

    def request(self, request: Request) -> Response:
        """Dispatch on ``request.method``."""
        return getattr(self, request.method.lower())(request)

    def _perform(self, request: Request, invoke: Callable[[EasyHandle], None]) -> Response:
        handle = self._handle_factory()
        try:
            self._setup(handle, request)
            invoke(handle)
            return Response(
                code=handle.response_code(),
                headers=handle.header_str(),
                raw_body=handle.body_bytes(),
            )
        except TransportError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.debug("Handle failed for %s %s: %s", request.method, request.url, exc)
            raise TransportError.from_exception(exc) from exc
        finally:
            with suppress(Exception):
                if hasattr(handle, "close"):
                    handle.close()

    def _setup(self, handle: EasyHandle, request: Request) -> None:
        handle.setopt(Option.URL, str(request.url))
        if request.proxy is not None:
            handle.setopt(Option.PROXY_URL, str(request.proxy))
        if request.read_timeout is not None:
            handle.setopt(Option.TIMEOUT, request.read_timeout)
        if request.open_timeout is not None:
            handle.setopt(Option.CONNECT_TIMEOUT, request.open_timeout)
        handle.setopt(Option.HEADERS, request.headers or {})
        handle.setopt(Option.VERBOSE, False)
        self._setup_auth(handle, request)

    def _setup_auth(self, handle: EasyHandle, request: Request) -> None:
        auth = request.auth
        if isinstance(auth, (BasicAuth, DigestAuth)):
            auth_type = AuthType.BASIC if isinstance(auth, BasicAuth) else AuthType.DIGEST
            username, password = auth.credentials
            handle.setopt(Option.HTTP_AUTH_TYPES, auth_type)
            handle.setopt(Option.USERNAME, username)
            handle.setopt(Option.PASSWORD, password)
        elif isinstance(auth, SslAuth) and auth.present:
            # Client certificates always imply verifying the server's chain.
            handle.setopt(Option.CERT_KEY, auth.cert_key_file)
            handle.setopt(Option.CERT, auth.cert_file)
            if auth.ca_cert_file is not None:
                handle.setopt(Option.CACERT, auth.ca_cert_file)
            handle.setopt(Option.SSL_VERIFY_PEER, True)


__all__ = ["EasyAdapter", "HandleFactory"]
