"""
Tests for custom exception classes and their handlers

Tests exception initialization, messages, status codes, details and the
JSON error envelope.
"""

import json

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from negotiation.exception_handlers import create_error_response, get_error_type, register_exception_handlers
from negotiation.exceptions import InvalidInputError, NegotiationError, NotAcceptableError


class TestNegotiationError:
    """Test base NegotiationError class"""

    def test_default_values(self):
        exc = NegotiationError("Test error")
        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.details == {}

    def test_with_custom_status(self):
        exc = NegotiationError("Test error", status_code=status.HTTP_400_BAD_REQUEST)
        assert exc.status_code == status.HTTP_400_BAD_REQUEST

    def test_with_details(self):
        exc = NegotiationError("Test error", details={"key": "value"})
        assert exc.details["key"] == "value"


class TestInvalidInputError:
    def test_defaults(self):
        exc = InvalidInputError()
        assert exc.message == "Invalid comparator input"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.details == {}

    def test_argument_in_details(self):
        exc = InvalidInputError("missing", argument="second")
        assert exc.details == {"argument": "second"}


class TestNotAcceptableError:
    def test_status_and_details(self):
        exc = NotAcceptableError(header="Accept-Charset", supported=["utf-8"])
        assert exc.status_code == status.HTTP_406_NOT_ACCEPTABLE
        assert "Accept-Charset" in exc.message
        assert exc.details == {"header": "Accept-Charset", "supported": ["utf-8"]}


class TestErrorResponse:
    def test_envelope(self):
        response = create_error_response(406, "nope", details={"a": 1}, path="/x")
        body = json.loads(response.body)
        assert body == {
            "error": {
                "status_code": 406,
                "message": "nope",
                "type": "Not Acceptable",
                "details": {"a": 1},
                "path": "/x",
            }
        }

    def test_optional_fields_omitted(self):
        body = json.loads(create_error_response(500, "boom").body)
        assert set(body["error"]) == {"status_code", "message", "type"}

    @pytest.mark.parametrize("code,expected", [(404, "Not Found"), (406, "Not Acceptable"), (418, "Error")])
    def test_error_type(self, code, expected):
        assert get_error_type(code) == expected


class TestExceptionHandlers:
    def _client(self, exc):
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/boom")
        async def boom():
            raise exc

        return TestClient(app)

    def test_not_acceptable_exposes_message(self):
        response = self._client(NotAcceptableError(header="Accept", supported=["text/html"])).get("/boom")
        assert response.status_code == 406
        error = response.json()["error"]
        assert error["details"] == {"header": "Accept", "supported": ["text/html"]}
        assert error["path"] == "/boom"

    def test_invalid_input_hides_details(self):
        response = self._client(InvalidInputError("missing", argument="first")).get("/boom")
        assert response.status_code == 500
        error = response.json()["error"]
        assert "details" not in error
        assert error["message"] != "missing"

    def test_http_exception_uses_envelope(self):
        app = FastAPI()
        register_exception_handlers(app)
        response = TestClient(app).get("/missing")
        assert response.status_code == 404
        assert response.json()["error"]["type"] == "Not Found"
