"""Tests for JSON request encoding and response decoding."""

import json
from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel

from slack_webapi.client.codec import decode_response_body, encode_request_body
from slack_webapi.errors import DecodeError, SerializeError
from slack_webapi.types.chat import (
    ChatPostMessageRequest,
    ChatPostMessageResponse,
    SlackApiResponse,
)


@dataclass
class Reaction:
    name: str
    channel: str
    timestamp: str


class UserInfo(BaseModel):
    ok: bool
    user: dict[str, Any]


class Metric(BaseModel):
    name: str
    value: float


@dataclass
class Sample:
    name: str
    value: float


class TestEncodeRequestBody:
    """Tests for encode_request_body."""

    def test_mapping(self) -> None:
        """Test a plain mapping round-trips through JSON."""
        payload = {"channel": "C1", "text": "héllo", "blocks": [{"type": "divider"}]}
        assert json.loads(encode_request_body(payload)) == payload

    def test_model_omits_none(self) -> None:
        """Test unset optional model fields are left out."""
        body = encode_request_body(ChatPostMessageRequest(channel="C1", text="hi"))
        assert json.loads(body) == {"channel": "C1", "text": "hi"}

    def test_dataclass(self) -> None:
        """Test dataclasses are accepted."""
        body = encode_request_body(Reaction(name="wave", channel="C1", timestamp="1.2"))
        assert json.loads(body) == {"name": "wave", "channel": "C1", "timestamp": "1.2"}

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float(self, value: float) -> None:
        """Test non-finite floats are rejected."""
        with pytest.raises(SerializeError) as exc_info:
            encode_request_body({"score": value})
        assert exc_info.value.payload_type == "dict"

    def test_non_finite_float_in_model(self) -> None:
        """Test model fields holding NaN are rejected, not dropped."""
        with pytest.raises(SerializeError) as exc_info:
            encode_request_body(Metric(name="latency", value=float("nan")))
        assert exc_info.value.payload_type == "Metric"

    def test_non_finite_float_in_dataclass(self) -> None:
        """Test dataclass fields holding infinity are rejected."""
        with pytest.raises(SerializeError) as exc_info:
            encode_request_body(Sample(name="latency", value=float("inf")))
        assert exc_info.value.payload_type == "Sample"

    def test_unknown_type(self) -> None:
        """Test values without a JSON form are rejected."""
        with pytest.raises(SerializeError):
            encode_request_body({"handle": object()})


class TestDecodeResponseBody:
    """Tests for decode_response_body."""

    def test_plain_json(self) -> None:
        """Test the default type returns parsed JSON."""
        assert decode_response_body(b'{"ok": true, "n": [1, 2]}') == {"ok": True, "n": [1, 2]}

    def test_model(self) -> None:
        """Test decoding into a pydantic model."""
        resp = decode_response_body(
            b'{"ok": true, "channel": "C1", "ts": "1.1"}', ChatPostMessageResponse
        )
        assert isinstance(resp, ChatPostMessageResponse)
        assert resp.ok is True
        assert resp.ts == "1.1"

    def test_api_level_error_is_data(self) -> None:
        """Test ok=false decodes normally."""
        resp = decode_response_body(b'{"ok": false, "error": "channel_not_found"}', SlackApiResponse)
        assert resp.ok is False
        assert resp.error == "channel_not_found"

    def test_generic_alias(self) -> None:
        """Test decoding into a parametrized builtin."""
        assert decode_response_body(b'{"a": 1}', dict[str, int]) == {"a": 1}

    def test_invalid_json(self) -> None:
        """Test a non-JSON body raises DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode_response_body(b"<html>bad gateway</html>", url="https://x/api/a", status_code=502)
        err = exc_info.value
        assert err.status_code == 502
        assert err.url == "https://x/api/a"
        assert err.body_preview == "<html>bad gateway</html>"

    @pytest.mark.parametrize("body", [b"NaN", b'{"x": NaN}', b'{"x": Infinity}', b'{"x": -Infinity}'])
    def test_non_finite_literals(self, body: bytes) -> None:
        """Test NaN and Infinity literals are not accepted as JSON."""
        with pytest.raises(DecodeError):
            decode_response_body(body)

    def test_non_finite_literals_typed(self) -> None:
        """Test a float field does not take an Infinity literal."""
        with pytest.raises(DecodeError):
            decode_response_body(b'{"name": "x", "value": Infinity}', Metric)

    def test_empty_body(self) -> None:
        """Test an empty body raises DecodeError."""
        with pytest.raises(DecodeError):
            decode_response_body(b"")

    def test_shape_mismatch(self) -> None:
        """Test JSON of the wrong shape raises DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode_response_body(b'{"ok": true}', UserInfo)
        assert exc_info.value.field_path == "user"
        assert "at 'user'" in str(exc_info.value)

    def test_nested_field_path(self) -> None:
        """Test the location of a nested mismatch is reported."""
        with pytest.raises(DecodeError) as exc_info:
            decode_response_body(b'{"ids": [1, "two"]}', dict[str, list[int]])
        assert exc_info.value.field_path == "ids.1"
