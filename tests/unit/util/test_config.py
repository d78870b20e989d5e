"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from lending.config import AuthSettings, Settings


def test_default_secret_rejected_in_production():
    """Should refuse to load production settings with the default secret."""
    with pytest.raises(ValidationError, match="AUTH__JWT_SECRET"):
        Settings(environment="production")


def test_production_with_secret():
    """Should allow production with an explicit secret."""
    settings = Settings(
        environment="production",
        frontend_host="lending.example.com",
        auth=AuthSettings(jwt_secret="s" * 40),
    )

    assert settings.cors_origins[0] == "https://lending.example.com"


def test_local_cors_origin():
    """Should allow the local frontend in development."""
    assert Settings(frontend_host="localhost").cors_origins == [
        "http://localhost:3000"
    ]
