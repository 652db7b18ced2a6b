from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API Settings
    api_title: str = "Sentence Tokenizer API"
    api_description: str = "API for splitting text into typed tokens ahead of speech synthesis"
    api_version: str = "0.2.0"
    host: str = "0.0.0.0"
    port: int = 8880

    # Logging
    log_level: str = "INFO"

    # Text Processing Settings
    max_text_length: int = 100000  # Longest text accepted by the tokenize endpoint

    # CORS Settings
    cors_origins: list[str] = ["*"]
    cors_enabled: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
