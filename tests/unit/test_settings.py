import pytest
from pydantic import ValidationError

from watermark_eraser.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_provider_is_gemini(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("IMAGE_PROVIDER", raising=False)
        s = Settings()
        assert s.image_provider == "gemini"
        assert s.gemini_model_name == "gemini-2.5-flash-image"

    def test_default_api_key_is_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("API_KEY", raising=False)
        s = Settings()
        assert s.api_key == ""

    def test_default_openai_settings(self) -> None:
        s = Settings()
        assert s.openai_model_name == "gpt-image-1"
        assert s.openai_base_url is None


class TestSettingsFromEnv:
    def test_loads_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEY", "secret-key")
        s = Settings()
        assert s.api_key == "secret-key"

    def test_loads_image_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMAGE_PROVIDER", "openai")
        s = Settings()
        assert s.image_provider == "openai"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        s = Settings()
        assert s.port == 9000


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "abc")
        with pytest.raises(ValidationError):
            Settings()
