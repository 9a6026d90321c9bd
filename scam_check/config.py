from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    openai_api_key: str = ""
    openai_timeout_seconds: float = 55.0

    ocr_model: str = "gpt-4o"
    ocr_max_tokens: int = 1000

    classifier_model: str = "gpt-4"
    classifier_temperature: float = 0.3
    classifier_max_tokens: int = 800
    classifier_json_mode: bool = False

    rate_limit_delay_seconds: float = 1.0
    request_timeout_seconds: float = 60.0
    max_image_bytes: int = 4 * 1024 * 1024

    log_level: str = "INFO"


settings = Settings()


def get_settings() -> Settings:
    return settings
