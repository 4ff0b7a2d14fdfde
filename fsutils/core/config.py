from typing import Literal, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FSUTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="fsutils", description="Service name used in logs")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment mode"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log output format", validate_default=True
    )

    default_dir_mode: Optional[int] = Field(
        default=None,
        description="Mode for created directories (derived from umask if unset)",
    )
    copy_chunk_size: int = Field(
        default=64 * 1024, description="Bytes read per chunk in async copies"
    )

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v, info: ValidationInfo):
        if info.data.get("environment") == "production":
            return "json"
        return v

    @field_validator("default_dir_mode", mode="before")
    @classmethod
    def validate_default_dir_mode(cls, v):
        # Accept octal strings from the environment, e.g. FSUTILS_DEFAULT_DIR_MODE=0755
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            return int(v, 8)
        return v

    @field_validator("default_dir_mode")
    @classmethod
    def check_default_dir_mode(cls, v):
        if v is not None and not 0 <= v <= 0o7777:
            raise ValueError("default_dir_mode must be a permission mask")
        return v

    @field_validator("copy_chunk_size")
    @classmethod
    def check_copy_chunk_size(cls, v):
        if v <= 0:
            raise ValueError("copy_chunk_size must be positive")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
