"""Test configuration and fixtures."""

import logfire
import pytest

from lending.config import AuthSettings

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed test secret."""
    return AuthSettings(
        jwt_secret="test-secret-0123456789abcdef0123456789", jwt_expiry_days=1
    )
