"""Core configuration derived from environment."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Generator limits with documented defaults."""

    model_config = SettingsConfigDict(env_prefix="RANDCORE_")

    debug: bool = False
    telemetry_enabled: bool = True

    # Count clamps
    max_count: int = 10_000
    list_max_count: int = 5_000
    ticket_max_draw: int = 5_000

    # Largest numeric ticket pool materialized per call
    ticket_max_pool: int = 100_000

    # Password
    password_max_length: int = 256
    password_max_batch: int = 200

    # Dice
    dice_max_rolls: int = 2_000
    dice_max_sides: int = 10_000

    # Prime sieve ceiling
    prime_max_limit: int = 1_000_000

    # Item text parsing
    list_text_max_items: int = 50_000


settings = Settings()
