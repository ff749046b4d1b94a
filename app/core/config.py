"""Gateway configuration via environment variables."""

from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore", "populate_by_name": True}

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")

    # Upstream prediction API
    medical_api_url: str = Field(
        default="http://127.0.0.1:8000/",
        validation_alias="MEDICAL_API_URL",
    )
    medical_api_timeout: float = Field(default=30.0, validation_alias="MEDICAL_API_TIMEOUT")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Comma-separated list; "*" allows any origin
    cors_origins_raw: str = Field(default="*", validation_alias="CORS_ORIGINS")

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.cors_origins_raw.split(",")]
        return [o for o in origins if o] or ["*"]
