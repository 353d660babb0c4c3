"""Runtime configuration for Minr."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MINR_", env_file=".env", extra="ignore")

    app_name: str = "minr"
    log_level: str = "INFO"
    default_tunnel_depth: int = Field(default=50, ge=1)
    default_tunnel_height: int = Field(default=3, ge=2)
    low_fuel_threshold: int = Field(
        default=50,
        ge=0,
        description="Refuel from inventory whenever the fuel level drops below this value.",
    )
    max_clear_attempts: int = Field(
        default=64,
        ge=1,
        description="Upper bound on digs spent clearing falling material from a single cell.",
    )
    catalog_path: str | None = Field(default=None, description="Optional JSON material catalog override.")


class MiningConfig(BaseModel):
    """Shape of the strip to excavate; fixed once mining starts."""

    model_config = ConfigDict(frozen=True)

    depth: int = Field(ge=1)
    height: int = Field(ge=2)
    auto_refuel: bool = False


settings = Settings()
