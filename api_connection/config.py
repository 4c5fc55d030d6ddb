"""Environment-driven settings for a Connection.

    CONNECTION_TIMEOUT  seconds to wait for a response ("none" or "0" waits forever)
    CONNECTION_LOG      log request/response blocks (1/true/yes/on)
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_TIMEOUT = 30.0

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class ConnectionSettings:
    timeout: Optional[float] = DEFAULT_TIMEOUT
    should_log: bool = False


def _parse_timeout(raw: str) -> Optional[float]:
    if raw.strip().lower() in ("none", "0", "0.0"):
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"CONNECTION_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"CONNECTION_TIMEOUT must not be negative, got {raw!r}")
    return value


def _parse_flag(raw: str) -> bool:
    flag = raw.strip().lower()
    if flag in _TRUE:
        return True
    if flag in _FALSE:
        return False
    raise ValueError(f"CONNECTION_LOG must be a boolean flag, got {raw!r}")


def load_settings(environ: Mapping[str, str] = os.environ) -> ConnectionSettings:
    return ConnectionSettings(
        timeout=_parse_timeout(environ.get("CONNECTION_TIMEOUT", str(DEFAULT_TIMEOUT))),
        should_log=_parse_flag(environ.get("CONNECTION_LOG", "")),
    )
