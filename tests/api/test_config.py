"""
Tests for Jobs API settings validation.
"""

import pytest
from pydantic import ValidationError

from jobs_api.config import ApiSettings


def _settings(**overrides):
    values = {"api_secret": None, "environment": "development", "cors_origins": ""}
    values.update(overrides)
    return ApiSettings(_env_file=None, **values)


class TestApiSettings:

    def test_environment_is_normalized(self):
        assert _settings(environment=" Production ", api_secret="k9f2m4x7q1w8e5r3").environment == "production"

    def test_unknown_environment(self):
        with pytest.raises(ValidationError):
            _settings(environment="qa")

    @pytest.mark.parametrize("secret", ["short", "aaaaaaaaaaaaaaaaaaaa", "abababababababababab"])
    def test_weak_secrets_rejected(self, secret):
        with pytest.raises(ValidationError):
            _settings(api_secret=secret)

    def test_mongodb_uri_scheme(self):
        with pytest.raises(ValidationError):
            _settings(mongodb_uri="http://db:27017")

    def test_auth_optional_without_secret_in_development(self):
        assert _settings().auth_required is False
        assert _settings(api_secret="k9f2m4x7q1w8e5r3").auth_required is True

    def test_allowed_origins(self):
        settings = _settings(cors_origins="https://a.example, ,https://b.example")
        assert settings.allowed_origins == ["https://a.example", "https://b.example"]

    def test_production_without_secret_is_critical(self):
        problems = _settings(environment="production").deployment_problems()
        assert any(p.startswith("CRITICAL") for p in problems)

    def test_development_has_no_deployment_problems(self):
        assert _settings().deployment_problems() == []
