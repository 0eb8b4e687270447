from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")
    APP_NAME: str = "Upload Validator"
    APP_VERSION: str = "1.0.2"
    DEBUG: bool = False
    # Uploads larger than this are rejected before any signature or content check.
    MAX_UPLOAD_SIZE_BYTES: int = 5 * 1024 * 1024
    CHECK_CONTENT: bool = True
    # PDF rule identifiers exempt for every request, e.g. '["Metadata"]'.
    # Request-level whitelists are merged on top of this.
    PDF_WHITELIST: set[str] = set()
    # CORS: comma-separated list of allowed origins (e.g. "http://localhost:3000,https://app.example.com"). Empty = same-origin only.
    CORS_ORIGINS: str = ""


settings = Settings()
