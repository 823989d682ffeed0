from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StoreSettings(BaseSettings):
    default_capacity: int = Field(10, ge=0, validation_alias="FRIDGE_CAPACITY")
    default_beverage_name: str = Field("Water", min_length=1, validation_alias="DEFAULT_BEVERAGE")

    log_level: LogLevel = Field("INFO", validation_alias="LOG_LEVEL")
    log_ring_size: int = Field(200, gt=0, validation_alias="LOG_RING_SIZE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> StoreSettings:
    return StoreSettings()
