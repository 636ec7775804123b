from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Point budget constraints
    points_min: int = Field(default=2, description="Minimum point budget accepted by the API")
    points_max: int = Field(default=2000, description="Maximum point budget accepted by the API")
    default_points: int = Field(default=150, description="Default point budget for a rendered series")
    sampling_floor: int = Field(default=50, description="Series at or below this size are never sampled")

    # Variation window half-width, as a fraction of the spacing between target positions
    window_half_width: float = Field(default=0.5, gt=0, description="Sampler window padding factor")

    # Axis / display settings
    target_ticks: int = Field(default=8, ge=2, description="Target number of visible axis ticks")
    display_timezone: str = Field(default="America/Bogota", description="Timezone used for axis labels")
    display_locale: str = Field(default="es", description="Locale used for axis labels (es|en)")

    # Compression Settings
    gzip_enabled: bool = True
    gzip_min_size: int = 2048      # 2 KiB
    gzip_level: int = 6

    # Application Settings
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    # CORS Settings
    allowed_origins: str = Field(default="*", description="Allowed CORS origins")

    def get_allowed_origins(self) -> list:
        """Split the comma separated CORS origins."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    def get_api_constraints(self) -> dict:
        """Return API constraints for frontend."""
        return {
            "points": {
                "min": self.points_min,
                "max": self.points_max,
                "default": self.default_points
            },
            "sampling_floor": self.sampling_floor,
            "target_ticks": self.target_ticks,
            "display": {
                "timezone": self.display_timezone,
                "locale": self.display_locale
            }
        }


# Global settings instance
app_settings = AppSettings()
