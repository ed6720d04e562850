"""Tests for service error envelope decoding."""

import json

import pytest

from mgmtops.providers.azure.infrastructure.error_envelope import (
    FlatErrorDetail,
    NestedErrorEnvelope,
    UnparsedError,
    WrappedErrorEnvelope,
    decode_error_envelope,
    to_operation_error,
)


@pytest.mark.unit
class TestDecodeErrorEnvelope:
    def test_nested_envelope(self):
        body = json.dumps({"error": {"foo": {"code": "X", "message": "Y"}}})

        shape = decode_error_envelope(body)

        assert isinstance(shape, NestedErrorEnvelope)
        assert str(to_operation_error(shape, 400)) == "Error Code: X\nError Message: Y"

    def test_nested_envelope_first_entry_wins(self):
        body = json.dumps(
            {
                "error": {
                    "first": {"code": "A", "message": "first"},
                    "second": {"code": "B", "message": "second"},
                }
            }
        )

        error = to_operation_error(decode_error_envelope(body))

        assert error.code == "A"
        assert error.message == "first"

    def test_wrapped_envelope(self):
        body = json.dumps(
            {"error": {"code": "ResourceNotFound", "message": "gone", "details": []}}
        )

        shape = decode_error_envelope(body)

        assert isinstance(shape, WrappedErrorEnvelope)
        assert to_operation_error(shape, 404).code == "ResourceNotFound"

    def test_flat_envelope(self):
        shape = decode_error_envelope(json.dumps({"code": "X", "message": "Y"}))

        assert isinstance(shape, FlatErrorDetail)
        error = to_operation_error(shape, 409)
        assert (error.code, error.message, error.status_code) == ("X", "Y", 409)

    @pytest.mark.parametrize(
        "body",
        [
            None,
            "",
            "<html>Bad Gateway</html>",
            json.dumps({"error": {}}),
            json.dumps({"message": "no code"}),
            json.dumps(["code", "message"]),
        ],
    )
    def test_unparsed_bodies(self, body):
        shape = decode_error_envelope(body)

        assert isinstance(shape, UnparsedError)
        assert shape.body == body
        assert to_operation_error(shape) is None
