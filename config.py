import json
import os
from typing import Annotated, List, Optional, Union

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

DEFAULT_CORS_ORIGINS = ["http://localhost:5173"]


class Settings(BaseSettings):
    """
    Application settings.

    Sources, highest priority first: constructor arguments, environment
    variables, env.yaml next to this module, field defaults.
    """

    model_config = SettingsConfigDict(yaml_file=CONFIG_FILE_PATH, extra="ignore")

    DB_URI: str = "sqlite+aiosqlite:///./institute.db"
    DB_CREATE_TABLES: bool = True
    API_PREFIX: str = "/api"
    API_PORT: int = 5000
    API_HOST: str = "0.0.0.0"
    # Accepts a JSON array or a comma-separated string
    CORS_ORIGINS: Annotated[List[str], NoDecode] = DEFAULT_CORS_ORIGINS
    CORS_ALLOW_CREDENTIALS: bool = True
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # Token secrets and refresh TTL have no defaults: startup fails without them
    JWT_SECRET: Optional[str] = None
    JWT_REFRESH_SECRET: Optional[str] = None
    ACCESS_TOKEN_EXPIRATION: Union[int, str] = "15m"
    REFRESH_TOKEN_EXPIRATION: Optional[Union[int, str]] = None
    PASSWORD_HASH_ROUNDS: int = 10

    FRONTEND_URL: str = "http://localhost:5173"
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_TLS: bool = True
    MAIL_FROM: str = "no-reply@localhost"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (init_settings, env_settings, YamlConfigSettingsSource(settings_cls))


ApplicationConfig = Settings()
