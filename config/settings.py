from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Ledger API (default matches `uvicorn src.main:app --port 8000`)
    API_BASE_URL: str = "http://localhost:8000/api/v1"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Server page size for paginatedTransactions; also feeds the "view more" label
    PAGE_SIZE: int = 5

    # App
    APP_NAME: str = "Ledger Review"
    DEBUG: bool = False


settings = Settings()
