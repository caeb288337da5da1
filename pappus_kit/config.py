# pappus_kit/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class AppConfig:
    """Global application configuration."""

    # App metadata
    app_name: str = "RevolveCraft"
    app_subtitle: str = "Pappus-Guldinus Surface of Revolution Calculator"
    version: str = "0.1.0"

    # Numerics
    epsilon: float = 1e-6  # Segments at or below this length are dropped
    display_decimals: int = 2

    # Revolution defaults
    default_axis: str = 'y'
    default_sweep_angle: float = 360.0  # degrees, display only
    sweep_angle_range: Tuple[float, float] = (0.0, 360.0)

    # API
    cors_origins: List[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    def __post_init__(self):
        if self.cors_origins is None:
            self.cors_origins = ['http://localhost:3000', 'http://127.0.0.1:3000']


# Global config instance
CONFIG = AppConfig()
