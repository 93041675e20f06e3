"""
Tests for ErrorCode, the registry and the shipped catalog.
"""

import json

import pytest
from pydantic import ValidationError

from response_envelope.data_models.error_code import ErrorCode, ErrorCodeRegistry
from response_envelope.domain import errcode
from response_envelope.domain.errcode import ERROR_CODES
from response_envelope.domain.responses import throw, throw_tips


class TestErrorCode:
    """Tests for a single catalog entry."""

    def test_accessors(self, missing: ErrorCode) -> None:
        assert missing.code == 1001
        assert missing.code_string() == "1001"
        assert missing.message == "missing %s"
        assert str(missing) == "(1001, missing %s)"

    def test_tips_substitutes_placeholder(self, missing: ErrorCode) -> None:
        assert missing.tips("user") == "missing user"

    def test_tips_without_placeholder_is_unchanged(self) -> None:
        """Templates without %s come back verbatim for any argument."""
        plain = ErrorCode.new(2000, "plain message")
        assert plain.tips("anything") == "plain message"
        assert plain.tips("") == "plain message"

    def test_tips_replaces_every_placeholder(self) -> None:
        twice = ErrorCode.new(2001, "%s or %s")
        assert twice.tips("x") == "x or x"

    def test_throw_keeps_raw_template(self, missing: ErrorCode) -> None:
        """throw() does not substitute the placeholder."""
        response = missing.throw(None)
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.body == b'{"code":1001,"data":null,"msg":"missing %s"}'

    def test_throw_tips(self, missing: ErrorCode) -> None:
        response = missing.throw_tips(None, "user")
        assert response.status_code == 200
        assert response.body == b'{"code":1001,"data":null,"msg":"missing user"}'

    def test_module_level_throw_functions(self, missing: ErrorCode) -> None:
        assert throw(None, missing).body == missing.throw(None).body
        assert throw_tips(None, missing, "id").body == missing.throw_tips(None, "id").body

    def test_to_envelope(self, missing: ErrorCode) -> None:
        envelope = missing.to_envelope("name")
        assert (envelope.code, envelope.data, envelope.message) == (1001, None, "missing name")

    def test_is_immutable(self, missing: ErrorCode) -> None:
        with pytest.raises(ValidationError):
            missing.code = 5

    def test_code_must_fit_in_64_bits(self) -> None:
        with pytest.raises(ValidationError):
            ErrorCode.new(2**63, "too big")


class TestErrorCodeRegistry:
    """Tests for the read-only registry."""

    def test_rejects_generic_failure_sentinel(self) -> None:
        with pytest.raises(ValueError, match="reserved"):
            ErrorCodeRegistry({"ZERO": ErrorCode.new(0, "zero")})

    def test_rejects_duplicate_codes(self) -> None:
        with pytest.raises(ValueError, match="duplicate"):
            ErrorCodeRegistry({"A": ErrorCode.new(7, "a"), "B": ErrorCode.new(7, "b")})

    def test_lookup(self) -> None:
        """Entries are reachable by name, by attribute and by code."""
        assert ERROR_CODES["NOT_EXIST"] is errcode.NOT_EXIST
        assert ERROR_CODES.NOT_EXIST is errcode.NOT_EXIST
        assert ERROR_CODES.by_code(1001) is errcode.NOT_EXIST
        assert ERROR_CODES.by_code(424242) is None

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            ERROR_CODES.NO_SUCH_CODE

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            ERROR_CODES["NEW"] = ErrorCode.new(9999, "new")  # type: ignore[index]

    def test_catalog_codes_are_unique_and_non_zero(self) -> None:
        codes = [entry.code for entry in ERROR_CODES.values()]
        assert 0 not in codes
        assert len(codes) == len(set(codes))

    def test_catalog_entry_renders(self) -> None:
        body = json.loads(errcode.NOT_EXIST.throw_tips(None, "user 42").body)
        assert body == {"code": 1001, "data": None, "msg": "user 42 does not exist"}
