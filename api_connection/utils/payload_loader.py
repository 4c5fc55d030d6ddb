# utils/payload_loader.py - logger setup and best-effort JSON payload helpers
import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

NO_DATA = "<no data>"


def get_logger(name: str = "api-connection"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def format_block(title: str, lines: Iterable[str]) -> str:
    """Render a boxed log block:

        ┌--------------------------┐
        |     Network request      |
        ├--------------------------┤
        | URL: http://...
        └--------------------------┘
    """
    rule = "-" * 26
    out = ["", f"┌{rule}┐", f"|{title:^26}|", f"├{rule}┤"]
    out.extend(f"| {line}" for line in lines)
    out.append(f"└{rule}┘")
    return "\n".join(out)


def load_json_object(data: Optional[bytes]) -> Optional[Dict[str, Any]]:
    """Parse data as JSON; return it only when the top-level value is an object."""
    if not data:
        return None
    try:
        parsed = json.loads(data)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def encode_params(params: Mapping[str, str]) -> Optional[bytes]:
    # best-effort: an unencodable mapping means "no body"
    try:
        return json.dumps(dict(params)).encode("utf-8")
    except (TypeError, ValueError):
        return None


def body_preview(data: Optional[bytes]) -> str:
    if not data:
        return NO_DATA
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return NO_DATA
