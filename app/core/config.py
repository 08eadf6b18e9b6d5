from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "devops-resource-lists"
    LOG_LEVEL: str = "INFO"

    # Page size used when a request carries no usable limit.
    LIST_DEFAULT_LIMIT: int = 10

    @property
    def list_default_limit(self) -> int:
        return self.LIST_DEFAULT_LIMIT if self.LIST_DEFAULT_LIMIT > 0 else 10


settings = Settings()
