"""Execute request descriptors against the EskomSePush API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode, urlsplit

import aiohttp

from .const import DEFAULT_BASE_URL, TOKEN_HEADER
from .endpoint import EndpointRequest
from .exceptions import (
    BadRequestError,
    DataCorruptedError,
    DecodingError,
    InvalidURLError,
    NoResponseError,
    NotAuthenticatedError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    TooManyRequestsError,
    UnexpectedStatusError,
    ValidationError,
)

_LOGGER = logging.getLogger(__name__)
DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)


def normalize_base_url(base_url: str | None) -> str:
    if base_url is None:
        return DEFAULT_BASE_URL
    if not isinstance(base_url, str) or not base_url.strip():
        raise InvalidURLError(str(base_url))
    normalized = base_url.strip().rstrip("/")
    parts = urlsplit(normalized)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidURLError(normalized)
    return normalized


class RequestExecutor:
    """Single-attempt HTTP execution with status code mapping.

    Requests are never retried: the API enforces a hard daily quota and every
    attempt counts against it.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        token: str,
        *,
        base_url: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        if session is None:
            raise ValidationError("Session is required.")
        if not isinstance(token, str) or not token.strip():
            raise ValidationError("token is required.")
        self._session = session
        self._token = token.strip()
        self._base_url = normalize_base_url(base_url)
        self._timeout = timeout or DEFAULT_TIMEOUT

    def build_url(self, request: EndpointRequest) -> str:
        path = request.path
        if not path.startswith("/"):
            path = f"/{path}"
        url = f"{self._base_url}{path}"
        if request.params:
            url = f"{url}?{urlencode(request.params)}"
        return url

    def build_headers(self, request: EndpointRequest) -> dict[str, str]:
        headers = dict(request.headers)
        headers[TOKEN_HEADER] = self._token
        return headers

    async def execute(self, request: EndpointRequest) -> Any:
        """Run one request and return the decoded JSON body."""
        url = self.build_url(request)
        _LOGGER.debug("Request %s %s started", request.method, request.path)
        try:
            async with self._session.request(
                request.method,
                url,
                headers=self.build_headers(request),
                timeout=self._timeout,
                ssl=True,
            ) as response:
                _LOGGER.debug(
                    "Request %s %s returned %s",
                    request.method,
                    request.path,
                    response.status,
                )
                self._raise_for_status(response, url)
                try:
                    return await response.json(content_type=None)
                except UnicodeDecodeError as exc:
                    raise DecodingError(url, "Response body is not valid UTF-8.") from exc
                except ValueError as exc:
                    raise DataCorruptedError(url) from exc
        except aiohttp.InvalidURL as exc:
            raise InvalidURLError(url) from exc
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise NoResponseError() from exc

    def _raise_for_status(self, response: aiohttp.ClientResponse, url: str) -> None:
        status = response.status
        if 200 <= status < 300:
            return
        if status == 400:
            raise BadRequestError()
        if status == 403:
            raise NotAuthenticatedError()
        if status == 404:
            raise NotFoundError(url)
        if status == 408:
            raise RequestTimeoutError()
        if status == 429:
            raise TooManyRequestsError()
        if 500 <= status < 600:
            raise ServerError(status)
        raise UnexpectedStatusError(status)
