"""Errors raised by :class:`api_connection.api_client.Connection`.

The set is closed: every failure of ``perform_request`` is one of these, or the
token provider's own exception, which is propagated unchanged. A token whose
header value is malformed (for example one containing CR or LF) is rejected
by requests before sending, as ``requests.exceptions.InvalidHeader``.
"""
from typing import Any, Dict, Optional


class APIConnectionError(Exception):
    """Base class for connection failures."""

    message = "Unknown network error"

    def __str__(self) -> str:
        return self.message


class CouldntCreateURLError(APIConnectionError):
    message = "Couldn't create url"

    def __init__(self, url: str):
        super().__init__(url)
        self.url = url


class NetworkError(APIConnectionError):
    """Transport-level failure: no response was obtained."""

    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"Network error: {self.cause}"


class NetworkCodeError(APIConnectionError):
    """The server answered with a status outside 200-299."""

    def __init__(self, payload: Optional[Dict[str, Any]], code: int):
        super().__init__(payload, code)
        self.payload = payload or {}
        self.code = code

    def __str__(self) -> str:
        return f"Network error with code {self.code}, data: {self.payload}"


class DataIsNilError(APIConnectionError):
    """The response carried no data, or not data of the requested shape."""


class DecodingError(DataIsNilError):
    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.message}: {self.cause}"
