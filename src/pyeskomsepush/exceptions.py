"""Library exceptions."""

from __future__ import annotations


class PyEskomSePushError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        text = message if message is not None else detail
        super().__init__(text or "")
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.detail = detail if detail is not None else text
        self.user_message = user_message


class ValidationError(PyEskomSePushError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"


class RequestError(PyEskomSePushError):
    """Raised when a request to the API does not yield a usable response."""

    error_type = "request"
    default_error_code = "request_error"


class InvalidURLError(RequestError):
    """Raised when a request URL cannot be built or is rejected."""

    default_error_code = "invalid_url"

    def __init__(self, url: str, **kwargs: str) -> None:
        super().__init__(f"Unknown endpoint {url}.", **kwargs)
        self.url = url


class NoResponseError(RequestError):
    """Raised when no response was received from the API."""

    error_type = "network"
    default_error_code = "no_response"

    def __init__(self, message: str = "No response.", **kwargs: str) -> None:
        super().__init__(message, **kwargs)


class BadRequestError(RequestError):
    """Raised on HTTP 400."""

    default_error_code = "bad_request"

    def __init__(self, message: str = "Bad request.", **kwargs: str) -> None:
        super().__init__(message, **kwargs)


class NotAuthenticatedError(RequestError):
    """Raised on HTTP 403: the token is invalid or disabled."""

    error_type = "auth"
    default_error_code = "not_authenticated"

    def __init__(
        self,
        message: str = "Not authenticated. Token is invalid or disabled.",
        **kwargs: str,
    ) -> None:
        super().__init__(message, **kwargs)


class NotFoundError(RequestError):
    """Raised on HTTP 404."""

    default_error_code = "not_found"

    def __init__(self, url: str, **kwargs: str) -> None:
        super().__init__(f"{url} not found.", **kwargs)
        self.url = url


class RequestTimeoutError(RequestError):
    """Raised on HTTP 408."""

    default_error_code = "timeout"

    def __init__(
        self,
        message: str = "Request timeout. Try again, gently.",
        **kwargs: str,
    ) -> None:
        super().__init__(message, **kwargs)


class TooManyRequestsError(RequestError):
    """Raised on HTTP 429: the token quota is exhausted."""

    error_type = "quota"
    default_error_code = "rate_limit"

    def __init__(
        self,
        message: str = "Too many requests. Token quota exceeded.",
        **kwargs: str,
    ) -> None:
        super().__init__(message, **kwargs)


class ServerError(RequestError):
    """Raised on HTTP 5xx."""

    default_error_code = "server_issue"

    def __init__(self, status: int, **kwargs: str) -> None:
        super().__init__(f"Server issue (status {status}).", **kwargs)
        self.status = status


class UnexpectedStatusError(RequestError):
    """Raised on any status code without a dedicated error."""

    default_error_code = "unexpected_status"

    def __init__(self, status: int, **kwargs: str) -> None:
        super().__init__(f"Server returned an unexpected status code of {status}.", **kwargs)
        self.status = status


class DecodeError(PyEskomSePushError):
    """Raised when a document cannot be decoded into a response model."""

    error_type = "decode"
    default_error_code = "decode_error"

    def __init__(self, message: str, *, source: str, path: str = "", **kwargs: str) -> None:
        super().__init__(message, **kwargs)
        self.source = source
        self.path = path


class KeyNotFoundError(DecodeError):
    """Raised when a required key is missing."""

    default_error_code = "key_not_found"

    def __init__(self, source: str, key: str, path: str = "", **kwargs: str) -> None:
        location = f" at '{path}'" if path else ""
        super().__init__(
            f"Failed to decode {source}: missing key '{key}'{location}.",
            source=source,
            path=path,
            **kwargs,
        )
        self.key = key


class TypeMismatchError(DecodeError):
    """Raised when a value has an unexpected JSON type."""

    default_error_code = "type_mismatch"

    def __init__(self, source: str, path: str, expected: str, **kwargs: str) -> None:
        super().__init__(
            f"Failed to decode {source}: expected {expected} at '{path or '<root>'}'.",
            source=source,
            path=path,
            **kwargs,
        )
        self.expected = expected


class ValueNotFoundError(DecodeError):
    """Raised when a required value is null."""

    default_error_code = "value_not_found"

    def __init__(self, source: str, path: str, expected: str, **kwargs: str) -> None:
        super().__init__(
            f"Failed to decode {source}: missing {expected} value at '{path}'.",
            source=source,
            path=path,
            **kwargs,
        )
        self.expected = expected


class DataCorruptedError(DecodeError):
    """Raised when a document or value cannot be parsed."""

    default_error_code = "data_corrupted"

    def __init__(self, source: str, path: str = "", **kwargs: str) -> None:
        if path:
            message = f"Failed to decode {source}: invalid value at '{path}'."
        else:
            message = f"Failed to decode {source}: it appears to be invalid JSON."
        super().__init__(message, source=source, path=path, **kwargs)


class DecodingError(DecodeError):
    """Raised for decoding failures without a more specific error."""

    def __init__(self, source: str, description: str, **kwargs: str) -> None:
        super().__init__(f"Failed to decode {source}: {description}", source=source, **kwargs)
        self.description = description


class BundleNotFoundError(PyEskomSePushError):
    """Raised when a bundled fixture cannot be located."""

    error_type = "fixture"
    default_error_code = "bundle_not_found"

    def __init__(self, filename: str, **kwargs: str) -> None:
        super().__init__(f"Failed to locate {filename} in bundle.", **kwargs)
        self.filename = filename
