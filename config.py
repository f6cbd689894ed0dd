"""Configuration settings for the console I/O server."""

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from suit_io import console
from suit_io.output_type import OutputType, check_complete


# Field of ColorSetting holding the color for each output type
COLOR_FIELDS = {
    OutputType.DEFAULT: "default_color",
    OutputType.PROMPT: "prompt_color",
    OutputType.ERROR: "error_color",
    OutputType.ALL_OK: "all_ok_color",
    OutputType.LIST_TITLE: "list_title_color",
    OutputType.CUSTOM_INFO: "custom_information_color",
    OutputType.MOBILE_SUIT_INFO: "information_color",
}

check_complete(COLOR_FIELDS, "COLOR_FIELDS")


class ColorSetting(BaseModel):
    """Color palette of an IOServer. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_color: str = Field(
        default=console.DEFAULT_COLOR,
        description="Color for OutputType.DEFAULT",
    )
    prompt_color: str = Field(
        default=console.PROMPT_COLOR,
        description="Color for OutputType.PROMPT",
    )
    error_color: str = Field(
        default=console.ERROR_COLOR,
        description="Color for OutputType.ERROR",
    )
    all_ok_color: str = Field(
        default=console.ALL_OK_COLOR,
        description="Color for OutputType.ALL_OK",
    )
    list_title_color: str = Field(
        default=console.LIST_TITLE_COLOR,
        description="Color for OutputType.LIST_TITLE",
    )
    custom_information_color: str = Field(
        default=console.CUSTOM_INFORMATION_COLOR,
        description="Color for OutputType.CUSTOM_INFO",
    )
    information_color: str = Field(
        default=console.INFORMATION_COLOR,
        description="Color for OutputType.MOBILE_SUIT_INFO",
    )

    def color_for(self, output_type: OutputType) -> str:
        """Palette entry for an output type."""
        return getattr(self, COLOR_FIELDS[OutputType(output_type)])


class Settings(BaseSettings):
    """Configuration settings loaded from environment variables or JSON file."""

    model_config = SettingsConfigDict(
        env_prefix="SUIT_IO_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    colors: ColorSetting = Field(
        default_factory=ColorSetting,
        description="Palette used by interactive output",
    )
    timestamp_timespec: Literal[
        "auto", "hours", "minutes", "seconds", "milliseconds", "microseconds"
    ] = Field(
        default="auto",
        description="Precision of timestamps on redirected lines",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level of the diagnostic logger",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def from_json(cls, json_path: Path) -> "Settings":
        """Load settings from a JSON config file.

        JSON keys use snake_case matching the field names.
        Fields absent from the file fall back to environment variables,
        .env and then the defaults.
        """
        with open(json_path) as f:
            config_data = json.load(f)
        return cls(**config_data)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def load_settings_from_json(json_path: Path) -> Settings:
    """Load settings from JSON file and set as global instance."""
    global _settings
    _settings = Settings.from_json(json_path)
    return _settings
