import os
from typing import Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .sink import SAMPLE_RATE

CONFIG_FILE = "morse_wav.toml"
if os.environ.get("MORSE_WAV_HOME") is not None:
    # Look for the configuration file in the configured home directory
    CONFIG_FILE = os.path.join(os.environ["MORSE_WAV_HOME"], CONFIG_FILE)


class Settings(BaseSettings):
    """Defaults for the morse-wav command line tool."""

    log_level: Literal["INFO", "DEBUG", "WARNING", "ERROR"] = (
        "WARNING"  # Log level (e.g., "INFO", "DEBUG", "ERROR")
    )
    wpm: int = Field(default=10, gt=0)  # Speed in words per minute
    frequency: float = Field(default=800.0, gt=0, lt=SAMPLE_RATE / 2)  # Tone in Hz
    word_gap_units: int = Field(default=4, ge=1)  # Extra silence between words
    model_config = SettingsConfigDict(env_prefix="MORSE_WAV_", toml_file=CONFIG_FILE)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, TomlConfigSettingsSource(settings_cls))
