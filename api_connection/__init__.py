"""Minimal synchronous HTTP connection with pluggable token authorization."""
from .api_client import Connection, Method
from .auth import StaticTokenProvider, Token, TokenError, TokenProvider
from .config import ConnectionSettings, load_settings
from .decoding import JSONValue, decode_json
from .errors import (
    APIConnectionError,
    CouldntCreateURLError,
    DataIsNilError,
    DecodingError,
    NetworkCodeError,
    NetworkError,
)

__all__ = [
    "APIConnectionError",
    "Connection",
    "ConnectionSettings",
    "CouldntCreateURLError",
    "DataIsNilError",
    "DecodingError",
    "JSONValue",
    "Method",
    "NetworkCodeError",
    "NetworkError",
    "StaticTokenProvider",
    "Token",
    "TokenError",
    "TokenProvider",
    "decode_json",
    "load_settings",
]
