"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IndicatorSettings(BaseSettings):
    """Default lookbacks for chart overlays and volatility readouts."""

    model_config = SettingsConfigDict(env_prefix="INDICATOR_")

    sma_periods: list[int] = [10, 20, 50, 200]
    ema_periods: list[int] = [8, 21]
    adr_period: int = 20
    atr_period: int = 14
    atr_reference_sma: int = 50  # SMA the ATR multiple is measured from
    regression_period: int = 20

    @field_validator("sma_periods", "ema_periods")
    @classmethod
    def periods_positive(cls, v: list[int]) -> list[int]:
        if any(p < 1 for p in v):
            raise ValueError("moving average periods must be >= 1")
        return v


class RelativeStrengthSettings(BaseSettings):
    """Relative strength horizons (in daily bars) and composite weights.

    All fields configurable via RS_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="RS_")

    one_month_bars: int = 21
    three_month_bars: int = 63
    six_month_bars: int = 126
    one_year_bars: int = 252

    # Composite weights (must sum to ~1.0)
    weight_one_month: float = 0.2
    weight_three_month: float = 0.4  # most recent quarter counts double
    weight_six_month: float = 0.2
    weight_one_year: float = 0.2

    def horizons(self) -> dict[str, int]:
        """Return horizon name to bar count, shortest first."""
        return {
            "one_month": self.one_month_bars,
            "three_month": self.three_month_bars,
            "six_month": self.six_month_bars,
            "one_year": self.one_year_bars,
        }

    def weights(self) -> dict[str, float]:
        """Return horizon name to composite weight."""
        return {
            "one_month": self.weight_one_month,
            "three_month": self.weight_three_month,
            "six_month": self.weight_six_month,
            "one_year": self.weight_one_year,
        }


class RotationSettings(BaseSettings):
    """Relative rotation graph (RRG) parameters."""

    model_config = SettingsConfigDict(env_prefix="ROTATION_")

    rs_period: int = 125
    momentum_period: int = 10
    smoothing_period: int = 0  # 0 or 1 = no smoothing
    trail_length: int = 10


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    indicators: IndicatorSettings = IndicatorSettings()
    relative_strength: RelativeStrengthSettings = RelativeStrengthSettings()
    rotation: RotationSettings = RotationSettings()
