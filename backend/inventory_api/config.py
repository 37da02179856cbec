from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./inventory.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8080
    FRONTEND_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    RESET_DB: bool = False
    SEED_SAMPLE_DATA: bool = True
    DEFAULT_LOW_STOCK_THRESHOLD: int = 10
    SERVICE_NAME: str = "Inventory Management API"
    SERVICE_VERSION: str = "1.0.0"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
