from enum import Enum
from functools import cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Transport(Enum):
    STDIO = "stdio"
    HTTP = "http"


class Settings(BaseSettings):
    # Sandbox root for tool paths; unset means paths are used as given
    PDF_ROOT: str | None = Field(
        None, validation_alias=AliasChoices("APP_PDF_ROOT", "APP_FS_ROOT")
    )

    # Transport
    MCP_TRANSPORT: Transport = Transport.STDIO
    MCP_HOST: str = "0.0.0.0"
    MCP_PORT: int = 5000

    # Logging
    LOG_LEVEL: str = "INFO"

    # Largest PDF we are willing to load
    MAX_FILE_SIZE_MB: int = 100


@cache
def get_settings() -> Settings:
    return Settings()
