"""Chart shaping service for the aquaponics monitoring dashboard."""

__version__ = "0.1.0"
