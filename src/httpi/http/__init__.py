# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP adapter exports."""

from .adapter import EasyAdapter, HandleFactory
from .auth import Auth, BasicAuth, DigestAuth, SslAuth
from .handle import AuthType, EasyHandle, Option
from .headers import header_value, parse_header_block
from .httpx_handle import HttpxEasy
from .models import SUPPORTED_METHODS, Headers, Request, Response
from .stub import StubEasyHandle, StubHandleFactory

__all__ = [
    "SUPPORTED_METHODS",
    "Auth",
    "AuthType",
    "BasicAuth",
    "DigestAuth",
    "EasyAdapter",
    "EasyHandle",
    "HandleFactory",
    "Headers",
    "HttpxEasy",
    "Option",
    "Request",
    "Response",
    "SslAuth",
    "StubEasyHandle",
    "StubHandleFactory",
    "header_value",
    "parse_header_block",
]
