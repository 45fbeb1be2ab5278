"""Tests for the error taxonomy."""

import pytest
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    ValidationError,
    require,
    status_for,
)


class TestStatusFor:

    @pytest.mark.parametrize("exc, expected", [
        (ValidationError("x"), 400),
        (AuthenticationError("x"), 401),
        (NotFoundError("x"), 404),
        (ConflictError("x"), 409),
        (ConfigurationError("x"), 500),
        (RuntimeError("x"), 500),
    ])
    def test_mapping(self, exc, expected):
        assert status_for(exc) == expected

    def test_request_validation_is_bad_request(self):
        assert status_for(RequestValidationError([])) == 400


class TestRequire:

    def test_passes_when_present(self):
        require(academyId="a1", playerId="p1")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_names_missing_field(self, value):
        with pytest.raises(ValidationError, match="academyId is required"):
            require(academyId=value)
