import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "WARNING"

    # API keys
    COINGECKO_API_KEY: str | None = None

    # RPC endpoints
    NEAR_RPC_URL: str = "https://rpc.mainnet.near.org"
    BASE_RPC_URL: str = "https://base.llamarpc.com"
    ARB_RPC_URL: str = "https://arbitrum.llamarpc.com"

    # None disables the timeout entirely
    HTTP_TIMEOUT: float | None = None

    # Monitoring
    SENTRY_DSN: str | None = None

    model_config = SettingsConfigDict(env_file=os.environ.get("ENV_FILE", ".env"))


settings = Settings()
