from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Database (defaults match the local docker setup)
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "selsila_airdrop"
    DB_USER: str = "selsila"
    DB_PASSWORD: str = "selsiladb"
    DB_POOL_SIZE: int = 20
    DB_IDLE_TIMEOUT: int = 30  # seconds before an idle connection is recycled
    DB_CONNECT_TIMEOUT: int = 10  # seconds

    # Redis
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_PASSWORD: str | None = None
    REDIS_DB: int = 0
    REDIS_SOCKET_TIMEOUT: int = 5  # seconds, connect and per-command

    # Cache
    CACHE_DEFAULT_TTL: int = 3600
    CACHE_COALESCE_FILLS: bool = False

    # App
    APP_NAME: str = "Selsila Airdrop API"
    APP_VERSION: str = "2.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    PORT: int = 3001

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{quote(self.DB_USER, safe='')}:{quote(self.DB_PASSWORD, safe='')}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def redis_url(self) -> str:
        auth = f":{quote(self.REDIS_PASSWORD, safe='')}@" if self.REDIS_PASSWORD else ""
        return f"redis://{auth}{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"


settings = Settings()
