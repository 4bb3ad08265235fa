import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from latchkey.core.config import Settings, get_settings
from latchkey.domain.exceptions import ConfigurationError


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.app_name == "Latchkey"
    assert settings.environment == "development"
    assert settings.token_lifetime_seconds == 86400
    assert settings.cookie_name == "token"
    assert settings.secret_key is None
    assert settings.is_development is True
    assert settings.is_production is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "LATCHKEY_ENVIRONMENT": "production",
        "LATCHKEY_SECRET_KEY": "from-env",
        "LATCHKEY_TOKEN_LIFETIME_SECONDS": "600",
    }):
        settings = get_settings()

        assert settings.is_production is True
        assert settings.secret_key == "from-env"
        assert settings.token_lifetime_seconds == 600

    get_settings.cache_clear()


def test_require_secret_missing():
    """A missing secret is a configuration error."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    with pytest.raises(ConfigurationError):
        settings.require_secret()


def test_blank_secret_treated_as_missing():
    settings = Settings(_env_file=None, secret_key="   ")

    assert settings.secret_key is None
    with pytest.raises(ConfigurationError):
        settings.require_secret()


def test_require_secret_present():
    settings = Settings(_env_file=None, secret_key="s3cret")

    assert settings.require_secret() == "s3cret"


def test_token_lifetime_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, token_lifetime_seconds=0)


def test_sqlite_rejects_multiple_workers():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, workers=4, database_url="sqlite+aiosqlite:///./x.db")


def test_cors_origins_from_comma_separated_string():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]
