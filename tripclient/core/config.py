from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    # Backend REST service, including the /api prefix
    API_BASE_URL: str = "http://localhost:8080/api"

    REQUEST_TIMEOUT_SECONDS: float = 15.0
    MAX_RETRIES: int = 3
    RETRY_BASE_DELAY_MS: int = 1000
    RETRY_MAX_DELAY_MS: int = 5000

    DEFAULT_PAGE_SIZE: int = 20

    LOG_LEVEL: str = "INFO"

    PROJECT_NAME: str = "TripClient Gateway"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Gateway and typed client for the itinerary planning API"

    class Config:
        env_file = ".env"


settings = Settings()
