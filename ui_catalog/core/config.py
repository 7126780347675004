"""Configuration Management."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .validate import MAX_JSON_DEPTH, MAX_PAYLOAD_SIZE

# Load environment variables from .env file
load_dotenv()


DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "components-catalog.json"


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Catalog source
    catalog_path: Path | None = Field(
        default=None, description="Catalog JSON document (packaged catalog when unset)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Design system
    design_system_name: str = Field(default="Andes", description="Design system display name")
    design_system_version: str = Field(
        default="latest", description="Default design system version for guidelines"
    )

    # Listing
    collapse_variants: bool = Field(
        default=True, description="List one item per component name (base entry preferred)"
    )

    # Validation
    max_payload_size: int = Field(
        default=MAX_PAYLOAD_SIZE, gt=0, description="Max size of a submitted response (bytes)"
    )
    max_json_depth: int = Field(
        default=MAX_JSON_DEPTH, gt=0, description="Max nesting of a submitted response"
    )

    def resolved_catalog_path(self) -> Path:
        """Catalog path, falling back to the packaged catalog."""
        return self.catalog_path or DEFAULT_CATALOG_PATH


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
