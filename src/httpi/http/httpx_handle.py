# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed EasyHandle implementation."""

from __future__ import annotations

import logging
import ssl
from collections.abc import Callable
from typing import Any

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import ErrorCategory, TransportError
from .handle import AuthType, Option

logger = logging.getLogger(__name__)


class HttpxEasy:
    """
    Single-shot easy handle over ``httpx.Client``.

    Options are only recorded by ``setopt``; the client is built when a verb is
    performed, so an option that was never set keeps the httpx (or HttpSettings)
    default. Redirects are not followed.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        client_factory: Callable[..., httpx.Client] | None = None,
    ):
        self.settings = settings or load_http_settings()
        self._client_factory = client_factory or httpx.Client
        self._options: dict[Option, Any] = {}
        self._response: httpx.Response | None = None
        self._raw_body = b""

    def setopt(self, option: Option, value: Any) -> None:
        self._options[Option(option)] = value

    def http_get(self) -> None:
        self._perform("GET")

    def http_post(self, body: bytes | str | None) -> None:
        self._perform("POST", body)

    def http_put(self, body: bytes | str | None) -> None:
        self._perform("PUT", body)

    def http_delete(self) -> None:
        self._perform("DELETE")

    def http_head(self) -> None:
        self._perform("HEAD")

    def response_code(self) -> int:
        return self._require_response().status_code

    def header_str(self) -> str:
        """Rebuild the raw header block (status line plus fields, CRLF-terminated)."""
        response = self._require_response()
        status_line = f"{response.http_version or 'HTTP/1.1'} {response.status_code} {response.reason_phrase}".rstrip()
        lines = [status_line]
        for name, value in response.headers.raw:
            lines.append(f"{name.decode('latin-1')}: {value.decode('latin-1')}")
        return "\r\n".join(lines) + "\r\n\r\n"

    def body_bytes(self) -> bytes:
        self._require_response()
        return self._raw_body

    def close(self) -> None:
        self._response = None
        self._raw_body = b""

    def _require_response(self) -> httpx.Response:
        if self._response is None:
            raise TransportError("No request has been performed on this handle")
        return self._response

    def _perform(self, method: str, body: bytes | str | None = None) -> None:
        url = self._options.get(Option.URL)
        if not url:
            raise TransportError("No URL configured on handle", category=ErrorCategory.INVALID_URL)
        headers = dict(self._options.get(Option.HEADERS) or {})
        verbose = bool(self._options.get(Option.VERBOSE))

        try:
            client_kwargs: dict[str, Any] = {
                "timeout": self._build_timeout(),
                "verify": self._build_verify(),
                "follow_redirects": False,
            }
            proxy = self._options.get(Option.PROXY_URL)
            if proxy is not None:
                client_kwargs["proxy"] = str(proxy)

            if verbose:
                logger.info("> %s %s", method, url)
            with self._client_factory(**client_kwargs) as client:
                with client.stream(
                    method,
                    str(url),
                    headers=headers,
                    content=body,
                    auth=self._build_auth(),
                ) as response:
                    # Keep the body exactly as sent; Content-Encoding is handled by Response.body.
                    raw_body = b"".join(response.iter_raw())
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            raise TransportError.from_exception(exc) from exc

        if verbose:
            logger.info("< %s %s (%d bytes)", response.status_code, response.reason_phrase, len(raw_body))
        self._response = response
        self._raw_body = raw_body

    def _build_timeout(self) -> httpx.Timeout:
        overrides: dict[str, float] = {}
        connect = self._options.get(Option.CONNECT_TIMEOUT)
        if connect is not None:
            overrides["connect"] = float(connect)
        read = self._options.get(Option.TIMEOUT)
        if read is not None:
            overrides["read"] = float(read)
        return httpx.Timeout(self.settings.default_timeout, **overrides)

    def _build_verify(self) -> bool | ssl.SSLContext:
        cert = self._options.get(Option.CERT)
        cert_key = self._options.get(Option.CERT_KEY)
        cacert = self._options.get(Option.CACERT)
        verify_peer = self._options.get(Option.SSL_VERIFY_PEER)
        verify = self.settings.verify_ssl if verify_peer is None else bool(verify_peer)

        if cert is None and cacert is None:
            return verify

        context = ssl.create_default_context(cafile=cacert)
        if not verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        if cert is not None:
            context.load_cert_chain(certfile=cert, keyfile=cert_key)
        return context

    def _build_auth(self) -> httpx.Auth | None:
        auth_type = self._options.get(Option.HTTP_AUTH_TYPES)
        if auth_type is None:
            return None
        username = str(self._options.get(Option.USERNAME) or "")
        password = str(self._options.get(Option.PASSWORD) or "")
        if AuthType(auth_type) is AuthType.DIGEST:
            return httpx.DigestAuth(username, password)
        return httpx.BasicAuth(username, password)


__all__ = ["HttpxEasy"]
