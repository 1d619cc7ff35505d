# NavConfig, LoggingConfig dataclasses
# src/env/schema.py

from dataclasses import dataclass
from typing import Optional

from nav.grid import Glyphs


@dataclass
class LoggingConfig:
    """Logging level for CLI runs."""
    level: str = "INFO"   # any name logging understands: DEBUG, INFO, ...


@dataclass
class NavConfig:
    """Resolved navigation configuration."""
    glyphs: Glyphs                 # passed straight to nav.build_grid()
    logging: LoggingConfig
    default_map: Optional[str]     # absolute path, or None if not configured
