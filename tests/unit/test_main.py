from unittest.mock import patch

import pytest

from watermark_eraser.main import main


class TestMain:
    def test_exits_when_api_key_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMAGE_PROVIDER", "gemini")
        monkeypatch.setenv("API_KEY", "")

        with patch("watermark_eraser.main.uvicorn.run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        mock_run.assert_not_called()

    def test_serves_app_with_configured_address(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMAGE_PROVIDER", "example")
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "8123")

        with patch("watermark_eraser.main.uvicorn.run") as mock_run:
            main()

        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert mock_run.call_args.kwargs["port"] == 8123
