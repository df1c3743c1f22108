"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from config import Settings, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.port == 8973
    assert settings.log_level == "INFO"


def test_environment_overrides():
    settings = load_settings({
        "COLOR_TOOLS_HOST": "127.0.0.1",
        "COLOR_TOOLS_PORT": "9000",
        "COLOR_TOOLS_LOG_LEVEL": "DEBUG",
        "UNRELATED": "x",
    })
    assert settings.host == "127.0.0.1"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_invalid_port():
    with pytest.raises(ValidationError):
        load_settings({"COLOR_TOOLS_PORT": "0"})
