from pathlib import Path

import pytest
from pydantic import ValidationError

from morse_wav.settings import Settings


@pytest.mark.usefixtures("clean_env")
class TestSettings:
    """Tests for the tool configuration"""

    def test_defaults(self) -> None:
        """Test the defaults match the classic generator"""
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.wpm == 10
        assert settings.frequency == 800.0
        assert settings.word_gap_units == 4

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test MORSE_WAV_* variables override the defaults"""
        monkeypatch.setenv("MORSE_WAV_WPM", "20")
        monkeypatch.setenv("MORSE_WAV_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.wpm == 20
        assert settings.log_level == "DEBUG"

    def test_toml_file(self, tmp_path: Path) -> None:
        """Test values are read from morse_wav.toml in the working directory"""
        (tmp_path / "morse_wav.toml").write_text(
            'wpm = 15\nfrequency = 650.0\nword_gap_units = 7\nlog_level = "INFO"\n'
        )
        settings = Settings()
        assert settings.wpm == 15
        assert settings.frequency == 650.0
        assert settings.word_gap_units == 7
        assert settings.log_level == "INFO"

    def test_environment_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test environment variables take priority over the file"""
        (tmp_path / "morse_wav.toml").write_text("wpm = 15\n")
        monkeypatch.setenv("MORSE_WAV_WPM", "25")
        assert Settings().wpm == 25

    def test_init_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test explicit values take priority over everything else"""
        monkeypatch.setenv("MORSE_WAV_WPM", "25")
        assert Settings(wpm=5).wpm == 5

    @pytest.mark.parametrize(
        "field,value",
        [
            ("wpm", 0),
            ("frequency", 0.0),
            ("frequency", 30000.0),
            ("word_gap_units", 0),
            ("log_level", "LOUD"),
        ],
    )
    def test_invalid_values(self, field: str, value: object) -> None:
        """Test out of range values are rejected"""
        with pytest.raises(ValidationError):
            Settings(**{field: value})
