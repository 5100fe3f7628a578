"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Forgebay settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FORGEBAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Sandbox driver
    tick_rate: float = 10.0             # Hz
    random_seed: Optional[int] = None   # None = nondeterministic launch bays

    # Status events
    status_topic: str = "forge_status"

    # Default forge parameters
    forge_max_reserve: int = 3
    forge_max_deployed: int = 2
    forge_cooldown: float = 10.0        # seconds per regenerated drone
    forge_launch_delay: float = 2.0     # seconds between launches
    forge_launch_speed: float = 150.0
    drone_variant: str = "drone_wing"


settings = Settings()
