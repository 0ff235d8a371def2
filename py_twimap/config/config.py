from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

from ..core.assignment import ResolverOptions
from ..core.coastline import CoastlineOptions

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")
    allowed_origins: str = Field(default="*", description="CORS allowed origins, comma separated")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Landmass assignment (tunable, not derived)
    acceptance_radius: float = Field(default=180.0, gt=0, description="Proximity fallback cutoff")
    outlier_radius: float = Field(default=200.0, gt=0, description="Maximum member distance from anchor")

    # Coastline shape
    coast_points: int = Field(default=64, ge=8, description="Vertices per coastline ring")
    coast_padding: float = Field(default=25.0, ge=0, description="Margin beyond the outermost member")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def origins(self) -> list:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    def resolver_options(self) -> ResolverOptions:
        return ResolverOptions(
            acceptance_radius=self.acceptance_radius,
            outlier_radius=self.outlier_radius,
        )

    def coastline_options(self) -> CoastlineOptions:
        return CoastlineOptions(num_points=self.coast_points, padding=self.coast_padding)


# Instantiate singleton settings object
settings = Settings()
