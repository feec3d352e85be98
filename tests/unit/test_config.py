import pytest

from sfdc_hubspot_sync.core.config import (
    Settings,
    get_settings,
    parse_suffix_list,
    require_hubspot_token,
)
from sfdc_hubspot_sync.shared.exceptions.base import ConfigurationError


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("HUBSPOT_TOKEN", raising=False)
    settings = Settings(_env_file=None)

    assert settings.HUBSPOT_BASE_URL == "https://api.hubapi.com"
    assert settings.LEAD_DISCRIMINATOR_FIELD == "contact_or_account"
    assert settings.SFDC_ID_DEDUPLICATE is False
    assert settings.compound_domain_suffixes == ["co.uk"]
    assert not {"APP_NAME", "APP_VERSION", "ENVIRONMENT"} & set(Settings.model_fields)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("HUBSPOT_TOKEN", "pat-123")
    monkeypatch.setenv("SFDC_ID_DEDUPLICATE", "true")
    monkeypatch.setenv("COMPOUND_DOMAIN_SUFFIXES", "co.uk, .com.au ,")

    settings = Settings(_env_file=None)

    assert require_hubspot_token(settings) == "pat-123"
    assert settings.SFDC_ID_DEDUPLICATE is True
    assert settings.compound_domain_suffixes == ["co.uk", "com.au"]


def test_missing_token_raises_configuration_error(monkeypatch):
    monkeypatch.delenv("HUBSPOT_TOKEN", raising=False)

    with pytest.raises(ConfigurationError) as exc_info:
        require_hubspot_token(Settings(_env_file=None))

    assert exc_info.value.details == {"setting": "HUBSPOT_TOKEN"}


def test_parse_suffix_list_handles_empty_input():
    assert parse_suffix_list("") == []
    assert parse_suffix_list("CO.UK") == ["co.uk"]


def test_get_settings_is_cached_until_cleared(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HUBSPOT_TOKEN", "pat-first")
    get_settings.cache_clear()
    try:
        first = get_settings()
        monkeypatch.setenv("HUBSPOT_TOKEN", "pat-second")

        assert get_settings() is first
        assert first.HUBSPOT_TOKEN == "pat-first"

        get_settings.cache_clear()
        assert get_settings().HUBSPOT_TOKEN == "pat-second"
    finally:
        get_settings.cache_clear()
