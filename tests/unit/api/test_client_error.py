"""Unit tests for error result to HTTP response mapping"""

import pytest

from libs.result import Error
from src.api.error import ClientError, status_for_error


class TestStatusForError:
    @pytest.mark.parametrize(
        "code,status",
        [
            ("CUSTOMER_NOT_FOUND", 404),
            ("INVOICE_NOT_FOUND", 404),
            ("DOCUMENT_NUMBER_CONFLICT", 409),
            ("VALIDATION_ERROR", 400),
            ("INVALID_INVOICE_STATUS", 400),
            ("UNKNOWN_DOCUMENT_SERIES", 400),
            ("LOG_VALIDATION_ERROR", 400),
            ("LOG_WRITE_ERROR", 500),
            ("DATABASE_ERROR", 500),
            ("CREATE_QUOTE_FAILED", 500),
        ],
    )
    def test_status_for_code(self, code, status):
        assert status_for_error(Error(code=code, message="m")) == status


class TestClientError:
    def test_explicit_status_wins(self):
        error = ClientError(Error(code="CUSTOMER_NOT_FOUND", message="m"), status_code=400)

        assert error.status_code == 400

    def test_body_omits_empty_optional_fields(self):
        error = ClientError(Error(code="QUOTE_NOT_FOUND", message="Quote with ID 9 not found"))

        assert error.to_body() == {
            "error": {"code": "QUOTE_NOT_FOUND", "message": "Quote with ID 9 not found"}
        }

    def test_body_includes_issues(self):
        error = ClientError(
            Error(
                code="VALIDATION_ERROR",
                message="Invalid request payload",
                reason="email: value is not a valid email address",
                issues=["email: value is not a valid email address"],
            )
        )

        body = error.to_body()["error"]
        assert body["reason"] == "email: value is not a valid email address"
        assert body["issues"] == ["email: value is not a valid email address"]
