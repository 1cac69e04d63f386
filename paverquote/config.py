import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Business rules. Overriding any of these from the environment or a .env
    # in the working directory changes every quote computed afterwards.
    TAX_RATE: float = 0.15                  # GCT on subtotal
    SHOWROOM_MARKUP_PER_UNIT: float = 20.00  # added to price per sqft for showroom pickup
    AREA_OVERAGE_MULTIPLIER: float = 1.05

    # Stone catalog JSON; empty uses the packaged paverquote/data/stones.json
    STONE_CATALOG_PATH: str = ""

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()


def configure_logging(level: str = None) -> logging.Logger:
    """Apply LOG_LEVEL to the paverquote logger. Never touches the root logger."""
    logger = logging.getLogger("paverquote")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    return logger
