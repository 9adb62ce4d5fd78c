"""Tests for settings and the injected API configuration."""

import json

import pytest

from applicators import ConfigurationError
from config import ApiConfig, Settings, load_api_config


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MYSOLUTION_BASE_URL", "https://sandbox.my.salesforce.com/")
    monkeypatch.setenv("MYSOLUTION_CLIENT_ID", "client")
    monkeypatch.setenv("MYSOLUTION_CLIENT_SECRET", ' "secret" ')
    monkeypatch.setenv("MYSOLUTION_JOB_ID", "a0wd1000000Ju6XAAS")
    monkeypatch.setenv("SWEEP_DOMAINS", '["", "mysolution"]')

    app_settings = Settings(_env_file=None)
    api_config = app_settings.api_config()

    assert api_config.base_url == "https://sandbox.my.salesforce.com"
    assert api_config.client_secret == "secret"
    assert api_config.job_id == "a0wd1000000Ju6XAAS"
    assert app_settings.sweep_domains == ["", "mysolution"]


def test_defaults():
    app_settings = Settings(_env_file=None)

    assert app_settings.set_api_name == "jobbird"
    assert app_settings.cv_fallback == "VGhpcyBpcyBhIHRlc3QgQ1YgZmlsZQ=="
    assert "" in app_settings.sweep_domains


def test_api_config_accepts_camel_case():
    api_config = ApiConfig.model_validate({
        "baseUrl": "https://example.com",
        "clientId": "id",
        "clientSecret": "secret",
        "jobId": "job",
    })

    assert api_config.client_id == "id"
    assert api_config.require_credentials() is api_config


def test_require_credentials():
    with pytest.raises(ConfigurationError):
        ApiConfig(base_url="https://example.com").require_credentials()


def test_load_api_config_overrides_defaults(tmp_path):
    path = tmp_path / "mysolution.json"
    path.write_text(json.dumps({"jobId": "job-from-file", "client_secret": "file-secret"}))
    defaults = ApiConfig(base_url="https://example.com", client_id="id", client_secret="env-secret")

    api_config = load_api_config(path, defaults=defaults)

    assert api_config.base_url == "https://example.com"
    assert api_config.client_id == "id"
    assert api_config.client_secret == "file-secret"
    assert api_config.job_id == "job-from-file"


def test_load_api_config_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        load_api_config(tmp_path / "missing.json")

    path = tmp_path / "list.json"
    path.write_text("[]")
    with pytest.raises(ConfigurationError):
        load_api_config(path)

    path = tmp_path / "no_url.json"
    path.write_text(json.dumps({"clientId": "id"}))
    with pytest.raises(ConfigurationError):
        load_api_config(path)
