import pytest
from fetchaller.core import config


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Restore settings that individual tests override"""
    settings = config.settings
    original = {
        "DEFAULT_MAX_TOKENS": settings.DEFAULT_MAX_TOKENS,
        "DEFAULT_TIMEOUT_SECONDS": settings.DEFAULT_TIMEOUT_SECONDS,
        "ERROR_BODY_LIMIT": settings.ERROR_BODY_LIMIT,
        "DEBUG": settings.DEBUG,
    }

    # Defaults the tests are written against
    settings.DEFAULT_MAX_TOKENS = 25000
    settings.DEFAULT_TIMEOUT_SECONDS = 10
    settings.ERROR_BODY_LIMIT = 1000
    settings.DEBUG = False

    yield

    for name, value in original.items():
        setattr(settings, name, value)
