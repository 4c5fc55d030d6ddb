"""Token providers used to authorize outgoing requests."""
from abc import ABC, abstractmethod
from dataclasses import dataclass


class TokenError(Exception):
    """Raised by a provider that cannot produce a token."""


@dataclass(frozen=True)
class Token:
    token_type: str
    access_token: str

    @property
    def header_value(self) -> str:
        return f"{self.token_type} {self.access_token}"


class TokenProvider(ABC):
    @abstractmethod
    def get_token(self) -> Token:
        """Return the token for the Authorization header, or raise."""


class StaticTokenProvider(TokenProvider):
    def __init__(self, access_token: str, token_type: str = "Bearer") -> None:
        # accept a pasted "Bearer <jwt>" as well as the bare token
        prefix = f"{token_type.lower()} "
        if access_token.lower().startswith(prefix):
            access_token = access_token[len(prefix):]
        self._token = Token(token_type=token_type, access_token=access_token)

    def get_token(self) -> Token:
        return self._token
