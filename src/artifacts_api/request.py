"""Transport-agnostic request descriptors.

A RequestDescriptor is plain data: method, path and query, headers, body bytes
and the rate limit category of the operation that produced it. It never does
I/O; a transport adapter turns it into a real HTTP request.
"""

import base64
import json
import logging
import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Generic, TypeVar
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict

from artifacts_api.errors import EncodingError
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import RateLimit
from artifacts_api.values import BearerToken, LoginName, LoginPassword, ValidatedValue

logger = logging.getLogger(__name__)

API_VERSION = "v1.3"
API_BASE_URL = "https://api.artifactsmmo.com/"

JSON_MEDIA_TYPE = "application/json"

# RFC 9110 token for names; visible ASCII with inner spaces/tabs for values.
_HEADER_NAME = re.compile(r"[!#$%&'*+.^_`|~0-9A-Za-z-]+")
_HEADER_VALUE = re.compile(r"(?:[\x21-\x7e](?:[\t\x20-\x7e]*[\x21-\x7e])?)?")

ResponseT = TypeVar("ResponseT")
QueryValue = ValidatedValue | Enum


class Method(str, Enum):
    GET = "GET"
    POST = "POST"


class RequestDescriptor(BaseModel, Generic[ResponseT]):
    """One HTTP request, ready to hand to a transport adapter.

    The type parameter is the response shape the body decodes to; see
    ``artifacts_api.correlation.decode_response``.
    """

    model_config = ConfigDict(frozen=True)

    operation: Operation
    method: Method
    path: str
    headers: tuple[tuple[str, str], ...]
    body: bytes = b""
    rate_limit: RateLimit

    @property
    def url(self) -> str:
        return API_BASE_URL.rstrip("/") + self.path

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None


def build_request(
    operation: Operation,
    method: Method,
    path_template: str,
    path_params: Mapping[str, ValidatedValue] | None = None,
    query_params: Sequence[tuple[str, QueryValue | None]] = (),
    headers: Sequence[tuple[str, str]] = (),
    body: Any = None,
    *,
    rate_limit: RateLimit,
) -> RequestDescriptor:
    """Encode one request.

    Path parameters must already be validated values; query parameters whose
    value is None are left out of the query string. A JSON body adds the
    ``Content-Type`` header. Raises EncodingError when a parameter, header or
    body cannot be encoded.
    """
    path = _render_path(path_template, path_params or {})
    query = _render_query(query_params)
    if query:
        path = f"{path}?{query}"

    all_headers = [("Accept", JSON_MEDIA_TYPE)]
    content = b""
    if body is not None:
        all_headers.append(("Content-Type", JSON_MEDIA_TYPE))
        content = _encode_body(body)
    all_headers.extend(headers)
    for name, value in all_headers:
        _check_header(name, value)

    logger.debug(
        "Encoded %s: %s %s (rate limit %s)",
        operation.value, method.value, path, rate_limit.id,
    )
    return RequestDescriptor(
        operation=operation,
        method=method,
        path=path,
        headers=tuple(all_headers),
        body=content,
        rate_limit=rate_limit,
    )


def bearer_auth(token: BearerToken) -> tuple[str, str]:
    """``Authorization`` header for authenticated operations."""
    return ("Authorization", f"Bearer {token.value}")


def basic_auth(username: LoginName, password: LoginPassword) -> tuple[str, str]:
    """``Authorization`` header for the token exchange."""
    credentials = f"{username.value}:{password.value}".encode("utf-8")
    return ("Authorization", f"Basic {base64.b64encode(credentials).decode('ascii')}")


def _render_path(template: str, params: Mapping[str, ValidatedValue]) -> str:
    encoded = {}
    for name, value in params.items():
        if not isinstance(value, ValidatedValue):
            raise EncodingError(
                f"path parameter {name!r} must be a validated value, got {type(value).__name__}"
            )
        encoded[name] = quote(str(value.value), safe="")
    try:
        return template.format_map(encoded)
    except (KeyError, IndexError, ValueError) as exc:
        raise EncodingError(f"cannot render path {template!r}: {exc}") from exc


def _render_query(params: Sequence[tuple[str, QueryValue | None]]) -> str:
    pairs = []
    for name, value in params:
        if value is None:
            continue
        if not isinstance(value, (ValidatedValue, Enum)):
            raise EncodingError(
                f"query parameter {name!r} must be a validated value, got {type(value).__name__}"
            )
        pairs.append((name, value.value))
    return urlencode(pairs)


def _encode_body(body: Any) -> bytes:
    try:
        text = json.dumps(body, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"cannot serialize body: {exc}") from exc
    return text.encode("utf-8")


def _check_header(name: str, value: str) -> None:
    if not isinstance(name, str) or not _HEADER_NAME.fullmatch(name):
        raise EncodingError(f"illegal header name {name!r}")
    if not isinstance(value, str) or not _HEADER_VALUE.fullmatch(value):
        # The value may be a credential, never echo it.
        raise EncodingError(f"illegal value for header {name!r}")
