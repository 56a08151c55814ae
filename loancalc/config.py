from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "LOANCALC_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Schedule generation
    payoff_tolerance: Decimal = Decimal("0.01")  # Balance at or below this counts as paid off
    schedule_cap_multiplier: int = 2  # Hard cap on periods, as a multiple of the nominal count

    # Presentation
    display_places: Decimal = Decimal("0.01")


settings = Settings()
