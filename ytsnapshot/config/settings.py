from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    api_key: str = Field(alias="API_KEY", min_length=1)
    channel_id: str = Field(alias="CHANNEL_ID", min_length=1)
    port: int = Field(default=3000, alias="PORT", ge=0, le=65535)
    refresh_interval_sec: float = Field(default=60, alias="REFRESH_INTERVAL_SEC", gt=0)
    http_timeout_sec: float = Field(default=10.0, alias="HTTP_TIMEOUT_SEC", gt=0)
    log_format: str = Field(default="plain", alias="LOG_FORMAT")
    metrics_port: int = Field(default=0, alias="METRICS_PORT", ge=0, le=65535)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

def load_settings(**overrides) -> Settings:
    """Build settings from env/.env, letting non-None overrides (keyed by env alias) win."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
