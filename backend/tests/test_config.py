"""Test settings loading."""
from hospital_forms.core import config
from hospital_forms.core.config import Settings, get_settings


def test_module_level_settings_is_the_cached_instance():
    assert isinstance(config.settings, Settings)
    assert config.settings is get_settings()


def test_cors_list_splits_comma_separated_origins():
    settings = Settings(CORS_ORIGINS=" https://a.example , https://b.example ,")

    assert settings.cors_list() == ["https://a.example", "https://b.example"]


def test_smtp_requires_both_credentials():
    assert Settings(SMTP_USER="u", SMTP_PASS="p").smtp_configured is True
    assert Settings(SMTP_USER="u", SMTP_PASS=None).smtp_configured is False
