"""
Server settings and logging setup.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "COLOR_TOOLS_"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseModel):
    host: str = Field("0.0.0.0", description="Interface the server binds to")
    port: int = Field(8973, ge=1, le=65535, description="TCP port")
    log_level: str = Field("INFO", description="Root logging level")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from COLOR_TOOLS_* environment variables."""
    environ = os.environ if environ is None else environ
    values = {}
    for name in Settings.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in environ:
            values[name] = environ[key]
    return Settings(**values)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
