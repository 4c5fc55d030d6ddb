# api_client.py - blocking HTTP connection wrapper around requests
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Type, TypeVar
from urllib.parse import urlsplit

import requests
from pydantic import ValidationError
from requests import Request, exceptions as req_exceptions

from .auth import TokenProvider
from .config import DEFAULT_TIMEOUT, ConnectionSettings
from .decoding import JSONValue, decode_json
from .errors import (
    CouldntCreateURLError,
    DataIsNilError,
    DecodingError,
    NetworkCodeError,
    NetworkError,
)
from .utils.payload_loader import body_preview, encode_params, format_block, get_logger, load_json_object

T = TypeVar("T")

GOOD_STATUS_CODES = range(200, 300)
AUTH_HEADER = "Authorization"
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "application/json"

_URL_ERRORS = (req_exceptions.InvalidURL, req_exceptions.MissingSchema, req_exceptions.InvalidSchema)


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class Connection:
    """Synchronous HTTP connection with optional token-based authorization.

    Each call blocks until the response arrives and either returns the decoded
    body or raises one of :mod:`api_connection.errors`. A connection holds only
    read-only configuration, so one instance can serve many threads.
    """

    def __init__(
        self,
        token_provider: Optional[TokenProvider] = None,
        should_log: bool = False,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        logger=None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.token_provider = token_provider
        self.should_log = should_log
        self.timeout = timeout
        self.logger = logger or get_logger()
        self.session_factory = session_factory

    @classmethod
    def from_settings(cls, settings: ConnectionSettings, token_provider: Optional[TokenProvider] = None, **kwargs):
        return cls(token_provider, settings.should_log, timeout=settings.timeout, **kwargs)

    def perform_request_as(self, shape: Type[T], url: str, method: Method, params: Optional[Mapping[str, str]] = None) -> T:
        """Perform the request and decode the JSON body into ``shape``."""
        data = self._get_data(url, method, params or {})
        if not data:
            raise DataIsNilError()
        try:
            return decode_json(shape, data)
        except (ValidationError, RecursionError) as e:
            raise DecodingError(e) from e

    def perform_request(self, url: str, method: Method, params: Optional[Mapping[str, str]] = None) -> Dict[str, JSONValue]:
        """Perform the request and return the body as a JSON object."""
        data = self._get_data(url, method, params or {})
        payload = load_json_object(data)
        if payload is None:
            raise DataIsNilError()
        return payload

    def _log(self, title: str, *lines: str) -> None:
        if self.should_log:
            self.logger.info(format_block(title, lines))

    def _get_data(self, url: str, method: Method, params: Mapping[str, str]) -> bytes:
        method = Method(method)
        _check_url(url)

        headers = {}
        used_token = None
        if self.token_provider is not None:
            token = self.token_provider.get_token()
            used_token = token.header_value
            headers[AUTH_HEADER] = used_token

        self._log(
            "Network request",
            f"URL: {url}",
            f"Token: {used_token or '<none>'}",
            f"Method: {method.value}",
            f"Params: {dict(params)}",
        )

        body = None
        if method in (Method.POST, Method.PUT):
            body = encode_params(params)
            # Content-Type only accompanies a body that was actually encoded
            if body is not None:
                headers[CONTENT_TYPE_HEADER] = CONTENT_TYPE_JSON

        req = Request(
            method.value,
            url,
            headers=headers,
            params=dict(params) if method is Method.GET else None,
            data=body,
        )

        with self.session_factory() as session:
            try:
                prepared = session.prepare_request(req)
            except _URL_ERRORS as e:
                raise CouldntCreateURLError(url) from e
            try:
                resp = session.send(prepared, timeout=self.timeout)
            except req_exceptions.RequestException as e:
                self._log("Network error", str(e))
                raise NetworkError(e) from e
            data = resp.content

        self._log("Network response", f"Code: {resp.status_code}", f"Data: {body_preview(data)}")

        if resp.status_code not in GOOD_STATUS_CODES:
            payload = load_json_object(data) or {}
            self._log("Network error", f"Code: {resp.status_code}", f"Payload: {payload}")
            raise NetworkCodeError(payload, resp.status_code)

        return data


def _check_url(url: str) -> None:
    try:
        parts = urlsplit(url)
        parts.port  # raises on a malformed port
    except (TypeError, ValueError) as e:
        raise CouldntCreateURLError(url) from e
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc or any(ch.isspace() for ch in url):
        raise CouldntCreateURLError(url)
