from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "ExportDesk Rules & Risk Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # OpenWeather API
    OPENWEATHER_BASE_URL: str = "https://api.openweathermap.org/data/2.5"
    OPENWEATHER_API_KEY: str = ""

    # Weather fetch settings
    WEATHER_REQUEST_TIMEOUT: float = 15.0
    WEATHER_MAX_CONCURRENT_REQUESTS: int = 3

    # Classification display
    CLASSIFY_DEFAULT_LIMIT: int = 4
    CONFIDENCE_JITTER: int = 3
    CONFIDENCE_FLOOR: int = 45
    CONFIDENCE_CEILING: int = 99

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
