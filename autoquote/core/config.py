from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    VEHICLE_API_BASE_URL: str = "https://vpic.nhtsa.dot.gov/api"
    VEHICLE_API_TIMEOUT: float = 10.0

    MODEL_CACHE_TTL: int = 3600  # 1 hour
    VEHICLE_YEARS_BACK: int = 30

    API_TITLE: str = "Auto Quote Service"
    API_DESCRIPTION: str = "Premium rating and vehicle reference data for the auto insurance quote wizard"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

settings = Settings()
