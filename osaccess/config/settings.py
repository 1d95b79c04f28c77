# osaccess/config/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 일반
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # OpenStack: clouds.yaml 경로를 직접 지정할 때만 사용 (없으면 openstacksdk 기본 경로)
    OS_CLIENT_CONFIG_FILE: Optional[str] = None

settings = Settings()
