"""Pytest configuration for all tests."""

from unittest.mock import AsyncMock

import pytest
import structlog

from signupflow.core.config import Settings, get_settings
from signupflow.core.hooks import HookRegistry
from signupflow.domain.services import SignupController
from signupflow.infrastructure.signup import SignupGateway, SignupResponse

VALID_PASSWORD = "Abcdefghi1"


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Make every test load settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo configure_logging so no test logs to a stream another test closed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake endpoint, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        environment="testing",
        api_base_url="https://signup.example.com/api/001/",
        signup_path="/challenge-signup",
        auth_token="test-token",
        request_timeout=5.0,
    )


@pytest.fixture
def gateway() -> AsyncMock:
    """Gateway mock answering 200 by default."""
    mock = AsyncMock(spec=SignupGateway)
    mock.create_user.return_value = SignupResponse(status_code=200)
    return mock


@pytest.fixture
def registry() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def controller(gateway: AsyncMock, registry: HookRegistry) -> SignupController:
    return SignupController(gateway, registry=registry)


@pytest.fixture
def filled_controller(controller: SignupController) -> SignupController:
    """Controller whose form is ready to submit."""
    controller.set_username("alice")
    controller.set_password(VALID_PASSWORD)
    return controller
