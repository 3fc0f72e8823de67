from typing import Literal

from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Switch to the virtualized machine list above this many visible rows
    VIRTUALIZATION_THRESHOLD: int = 50

    # Gantt layout
    WORKDAY_HOURS: float = 8.0
    MIN_BAR_WIDTH_PERCENT: float = 2.0
    BAR_ROW_HEIGHT_PX: int = 28
    BAR_TOP_PADDING_PX: int = 4

    # Virtualized machine list
    GANTT_ROW_HEIGHT: int = 80
    GANTT_VIEWPORT_HEIGHT: int = 600
    GANTT_OVERSCAN: int = 5
    DEFAULT_OVERSCAN: int = 3

    # Per-stage memoization
    PROJECTION_CACHE_SIZE: int = 64

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_local(self) -> bool:
        return self.ENVIRONMENT == "local"

    @model_validator(mode="after")
    def _check_layout_bounds(self) -> Self:
        if self.WORKDAY_HOURS <= 0:
            raise ValueError("WORKDAY_HOURS must be positive")
        if not 0 <= self.MIN_BAR_WIDTH_PERCENT <= 100:
            raise ValueError("MIN_BAR_WIDTH_PERCENT must be within 0..100")
        if self.GANTT_ROW_HEIGHT <= 0 or self.GANTT_VIEWPORT_HEIGHT <= 0:
            raise ValueError("Gantt row and viewport heights must be positive")
        if self.GANTT_OVERSCAN < 0 or self.DEFAULT_OVERSCAN < 0:
            raise ValueError("Overscan cannot be negative")
        if self.VIRTUALIZATION_THRESHOLD < 0:
            raise ValueError("VIRTUALIZATION_THRESHOLD cannot be negative")
        if self.PROJECTION_CACHE_SIZE < 1:
            raise ValueError("PROJECTION_CACHE_SIZE must be at least 1")
        return self


settings = Settings()
