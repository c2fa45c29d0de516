from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VaultFlowBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )

    app_env: str = Field(
        default="dev",
        description="Application deployment environment (e.g., dev, qa, uat, prod, local)"
    )
    log_level: str = Field(
        default="INFO",
        description="Base log level passed to setup_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
