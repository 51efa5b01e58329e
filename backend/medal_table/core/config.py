from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Any
import json


DEFAULT_MEDALS_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "medals.json"


class Settings(BaseSettings):
    """Application settings"""

    # Application
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Olympic Medal Table"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, str) and v.startswith("["):
            return json.loads(v)
        elif isinstance(v, list):
            # If it's already a list, ensure it's not a nested list like [['a', 'b']]
            if len(v) == 1 and isinstance(v[0], list):
                return v[0]
            return v
        return v

    # Medal data
    MEDALS_DATA_PATH: Path = DEFAULT_MEDALS_DATA_PATH
    MEDALS_CACHE_CONTROL: str = "public, s-maxage=300, stale-while-revalidate=600"

    # Dashboard client
    API_URL: str = "http://localhost:8000"
    API_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


settings = Settings()
