from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Grocery Engine API"
    log_level: str = "INFO"
    default_count_unit: str = "item"
    fallback_category_name: str = "other"
    min_match_word_length: int = 3

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
