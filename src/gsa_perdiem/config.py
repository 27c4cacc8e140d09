from pydantic_settings import BaseSettings
from pydantic import AnyHttpUrl, SecretStr

class Settings(BaseSettings):
    GSA_API_KEY: SecretStr = SecretStr("")
    GSA_BASE_URL: AnyHttpUrl = "https://api.gsa.gov/travel/perdiem"
    REQUEST_TIMEOUT: float = 20.0
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"  # relative path from the working directory
        env_file_encoding = "utf-8"

settings = Settings()
# AnyHttpUrl normalizes a bare host with a trailing slash
BASE_URL = str(settings.GSA_BASE_URL).rstrip("/")
REQUEST_TIMEOUT = settings.REQUEST_TIMEOUT
