from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / '.env'


class RedisConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='REDIS_',
        env_file=ENV_FILE,
        extra='ignore',  # Ignore extra environment variables
    )
    host: str = 'localhost'
    port: int = 6379
    db: int = 0
    # clear() deletes every key under this prefix, so it must not be empty
    key_prefix: str = Field(default="content_detector:", min_length=1)

    @computed_field
    @property
    def redis_url(self) -> str:
        return f"redis://{self.host}:{self.port}/{self.db}"


class Config(BaseSettings):
    app_name: str = "AI Content Detector"
    debug: bool = True
    json_logs: bool = False

    # "memory" keeps state per process, "redis" survives restarts
    storage_backend: Literal["memory", "redis"] = "memory"

    # Nested configs
    redis: RedisConfig = RedisConfig()

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )


config = Config()
