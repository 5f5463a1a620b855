from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="RATEIO_"
    )

    app_name: str = "Rateio"
    log_level: str = "INFO"
    max_text_length: int = 2000
    default_locale: str = "pt-BR"


@lru_cache
def get_settings() -> Settings:
    return Settings()
