"""Configuration management with pydantic-settings."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from contools.colors import Color

COLOR_SYSTEMS = ("auto", "standard", "256", "truecolor", "windows", "none")


class ConToolsSettings(BaseSettings):
    """contools settings loaded from environment variables.

    All settings use the CONTOOLS_ prefix for environment variables. They only
    shape the default terminal and logging; per-call arguments always win.
    """

    # Terminal configuration
    foreground: Color = Field(
        default=Color.GRAY,
        description="Initial foreground color of the default terminal",
    )
    background: Color = Field(
        default=Color.BLACK,
        description="Initial background color of the default terminal",
    )
    color_system: str = Field(
        default="auto",
        description="Rich color system: auto, standard, 256, truecolor, windows, none",
    )
    force_terminal: bool | None = Field(
        default=None,
        description="Force (or disable) terminal control codes regardless of detection",
    )

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_json: bool = Field(default=False, description="Render log events as JSON")

    model_config = SettingsConfigDict(
        env_prefix="CONTOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("foreground", "background", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Color):
            return Color.parse(value)
        return value

    @field_validator("color_system")
    @classmethod
    def _check_color_system(cls, value: str) -> str:
        value = value.lower()
        if value not in COLOR_SYSTEMS:
            raise ValueError(
                f"Unsupported color system: {value}. Supported: {', '.join(COLOR_SYSTEMS)}"
            )
        return value

    def get_console_config(self) -> dict[str, Any]:
        """Get keyword arguments for constructing the default Rich console.

        Returns:
            Configuration dictionary for rich.console.Console.
        """
        if self.color_system == "none":
            return {"color_system": None, "force_terminal": self.force_terminal}
        return {"color_system": self.color_system, "force_terminal": self.force_terminal}


# Global settings instance
_settings: ConToolsSettings | None = None


def get_settings() -> ConToolsSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = ConToolsSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
