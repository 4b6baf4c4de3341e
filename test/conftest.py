"""
Test Configuration

- Environment setup that must happen before `src` modules read settings
- Service-level fixtures live next to the tests (test/service/checkout/conftest.py)

Architecture:
- Unit tests (test/**/unit/): ports replaced with AsyncMock
- Integration tests (test/**/integration/): real httpx adapters against an
  in-process FastAPI fake of the cinema backend (httpx.ASGITransport)
- BDD tests (test/**/bdd/): pytest-bdd scenarios driving the CheckoutController
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# core_setting.py instantiates Settings at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('API_BASE_URL', 'http://testserver/api')
    os.environ.setdefault('DEPLOY_ENV', 'test')
    os.environ.setdefault('OTEL_CONSOLE_EXPORT', 'false')


_early_setup_test_environment()

import pytest  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        API_BASE_URL='http://testserver/api',
        API_TIMEOUT_SECONDS=5.0,
        KEEP_ALIVE_INTERVAL_SECONDS=0.01,
    )
