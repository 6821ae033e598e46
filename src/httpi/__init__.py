# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpi package entrypoint.

A common request/response shape for HTTP clients. Requests are mapped onto a
curl-style easy handle by ``EasyAdapter``; the default handle is backed by httpx
and can be swapped for any object implementing ``EasyHandle``.
"""

from . import runtime
from .config import HttpSettings, load_http_settings
from .errors import ErrorCategory, TransportError
from .http import (
    AuthType,
    BasicAuth,
    DigestAuth,
    EasyAdapter,
    EasyHandle,
    HttpxEasy,
    Option,
    Request,
    Response,
    SslAuth,
)
from .runtime import Httpi
from .version import __version__

__all__ = [
    "AuthType",
    "BasicAuth",
    "DigestAuth",
    "EasyAdapter",
    "EasyHandle",
    "ErrorCategory",
    "Httpi",
    "HttpSettings",
    "HttpxEasy",
    "Option",
    "Request",
    "Response",
    "SslAuth",
    "TransportError",
    "load_http_settings",
    "runtime",
    "__version__",
]
