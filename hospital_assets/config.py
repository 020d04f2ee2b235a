from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./hospital_assets.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    app_title: str = "Hospital Asset Tracker"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
