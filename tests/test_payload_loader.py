import logging

from api_connection.utils.payload_loader import (
    body_preview,
    encode_params,
    format_block,
    get_logger,
    load_json_object,
)


def test_get_logger_installs_handler_once():
    first = get_logger("api-connection-loader")
    second = get_logger("api-connection-loader")

    assert first is second
    assert len(first.handlers) == 1
    assert first.level == logging.INFO


def test_format_block():
    block = format_block("Network error", ["Code: 404"])

    assert block.splitlines() == [
        "",
        "┌--------------------------┐",
        "|      Network error       |",
        "├--------------------------┤",
        "| Code: 404",
        "└--------------------------┘",
    ]


def test_load_json_object():
    assert load_json_object(b'{"a": [1, null]}') == {"a": [1, None]}
    assert load_json_object(b"[1]") is None
    assert load_json_object(b"{broken") is None
    assert load_json_object(b"\xff\xfe\x00") is None
    assert load_json_object(b"") is None
    assert load_json_object(None) is None


def test_encode_params():
    assert encode_params({"a": "b"}) == b'{"a": "b"}'
    assert encode_params({}) == b"{}"
    assert encode_params({"a": {1, 2}}) is None


def test_body_preview():
    assert body_preview("héllo".encode("utf-8")) == "héllo"
    assert body_preview(b"") == "<no data>"
    assert body_preview(None) == "<no data>"
    assert body_preview(b"\xff\xfe") == "<no data>"


def test_load_json_object_survives_deep_nesting():
    assert load_json_object(b"[" * 100000 + b"]" * 100000) is None
