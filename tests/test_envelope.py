"""
Tests for the envelope model and its construction helpers.

No HTTP server involved; responses are inspected directly.
"""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from response_envelope.config import configuration
from response_envelope.data_models.envelope import Envelope
from response_envelope.domain.responses import (
    error,
    error_respond_to,
    success,
    success_respond_to,
    unauthorized,
    unauthorized_respond_to,
)
from response_envelope.utils.exceptions import UncaughtFailure


class TestEnvelopeModel:
    """Tests for the Envelope data model."""

    def test_defaults(self) -> None:
        """A bare envelope has code 0, no data and an empty message."""
        envelope = Envelope()
        assert envelope.code == 0
        assert envelope.data is None
        assert envelope.message == ""

    def test_absent_data_serialized_as_null(self) -> None:
        """All three keys are emitted, in order, with data as null."""
        assert Envelope(code=5, message="x").body_json() == '{"code":5,"data":null,"msg":"x"}'

    def test_str_is_json_body(self) -> None:
        envelope = Envelope(code=1, data=[1, 2], message="ok")
        assert str(envelope) == envelope.body_json()

    def test_round_trip(self) -> None:
        """Serializing then parsing reproduces code, data and msg."""
        sent = Envelope[dict[str, int]](code=7, data={"a": 1, "b": 2}, message="seven")
        parsed = Envelope[dict[str, int]].model_validate_json(sent.body_json())
        assert parsed.code == 7
        assert parsed.data == {"a": 1, "b": 2}
        assert parsed.message == "seven"

    def test_parse_accepts_wire_name(self) -> None:
        parsed = Envelope.model_validate({"code": 3, "data": None, "msg": "hi"})
        assert parsed.message == "hi"

    def test_unserializable_payload_raises_uncaught_failure(self) -> None:
        """A payload pydantic cannot serialize surfaces as an UncaughtFailure."""
        with pytest.raises(UncaughtFailure) as info:
            success(object()).respond_to()
        assert info.value.file.endswith("envelope.py")
        assert "not serializable" in info.value.message

    def test_non_ascii_message_kept(self) -> None:
        body = Envelope(code=1, message="成功").body_json()
        assert json.loads(body)["msg"] == "成功"


class TestHelpers:
    """Tests for success / error / unauthorized."""

    @pytest.mark.parametrize("payload", ["Hey test!", 42, [1, 2, 3], {"k": "v"}, None])
    def test_success(self, payload) -> None:
        """success(v) answers 200 with code 200, data v and msg success."""
        response = success_respond_to(None, payload)
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert json.loads(response.body) == {"code": 200, "data": payload, "msg": "success"}

    @pytest.mark.parametrize("payload", ["oops", 0, [None], None])
    def test_error(self, payload) -> None:
        """error(v) answers 200 with the generic failure code 0."""
        response = error_respond_to(None, payload)
        assert response.status_code == 200
        assert json.loads(response.body) == {"code": 0, "data": payload, "msg": "failure"}

    def test_unauthorized(self) -> None:
        """unauthorized() has a fixed shape with no payload."""
        response = unauthorized_respond_to(None)
        assert response.status_code == 200
        assert response.body == b'{"code":0,"data":null,"msg":"no permission"}'

    def test_helpers_return_envelopes(self) -> None:
        assert isinstance(success(1), Envelope)
        assert error().data is None
        assert unauthorized().code == 0

    def test_localized_messages(self, monkeypatch) -> None:
        """The configured locale picks the message catalog."""
        monkeypatch.setattr(configuration.messages, "locale", "zh")
        assert success().message == "成功"
        assert error().message == "失败"
        assert unauthorized().message == "无权限访问"


class TestConcurrency:
    """Envelopes built in parallel never interfere with each other."""

    def test_parallel_construction(self) -> None:
        def build(n: int) -> str:
            return success({"n": n, "tag": f"t{n}"}).body_json()

        with ThreadPoolExecutor(max_workers=16) as pool:
            bodies = list(pool.map(build, range(2000)))

        for n, body in enumerate(bodies):
            assert body == f'{{"code":200,"data":{{"n":{n},"tag":"t{n}"}},"msg":"success"}}'
