from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    pricing_timezone: str = "Europe/Paris"
    app_base_url: str = "http://localhost:8080"
    max_pricing_metrics: int = 5000
