from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Development
    DEV_MODE: bool = Field(default=True, description="Enable debug mode")
    LOG_LEVEL: Optional[str] = Field(default=None, description="Log level overriding the DEV_MODE default")

    # Lot file format
    SECTION_DELIMITER: str = Field(default="###", description="Line separating the design and occupancy sections")
    FIELD_SEPARATOR: str = Field(default=",", description="Separator between fields on a line")

    # CLI
    LOT_FILE: Optional[str] = Field(default=None, description="Lot file to load instead of prompting for one")


# Create settings instance
settings = Settings()
