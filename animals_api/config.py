from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    app_host: str = '0.0.0.0'
    app_port: int = 3000
    public_url: str = 'http://localhost:3000'

    db_url: str
    sql_echo: bool = False

    log_level: str = 'INFO'

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')


@lru_cache()
def get_settings():
    return Settings()
