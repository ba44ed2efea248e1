from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Game defaults
    default_radius: int = 5
    default_wall_density: float = 0.1
    default_spawn_mode: str = "fair"
    default_ai_strategy: str = "weighted"

    # Bot pacing (ticks of the driver's clock before an AI commits)
    bot_think_ticks: int = 10

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="HEXCAPTURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
