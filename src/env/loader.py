from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from app.logging_config import is_level_name
from nav.grid import DEFAULT_GLYPHS, Glyphs

from .schema import LoggingConfig, NavConfig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"

CONFIG_FILE = "nav.yaml"
MAP_COMMENT = "#"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from path."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    raw = cfg.get(name) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"'{name}' in {CONFIG_FILE} must be a mapping, got {type(raw)}")
    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_nav_config(config_root: Path = CONFIG_ROOT) -> NavConfig:
    """Main entry point: returns a validated NavConfig from config_root/nav.yaml."""
    cfg = _load_yaml(Path(config_root) / CONFIG_FILE)

    glyph_raw = _section(cfg, "glyphs")
    glyphs = Glyphs(
        blocked=glyph_raw.get("blocked", DEFAULT_GLYPHS.blocked),
        free=glyph_raw.get("free", DEFAULT_GLYPHS.free),
        start=glyph_raw.get("start", DEFAULT_GLYPHS.start),
        goal=glyph_raw.get("goal", DEFAULT_GLYPHS.goal),
    )

    log_raw = _section(cfg, "logging")
    logging_cfg = LoggingConfig(level=str(log_raw.get("level", "INFO")).upper())

    default_map = cfg.get("default_map")
    if default_map is not None:
        # relative map paths are resolved against the config directory
        default_map = str((Path(config_root) / default_map).resolve())

    _validate_config(glyphs, logging_cfg)

    return NavConfig(glyphs=glyphs, logging=logging_cfg, default_map=default_map)


def load_map_rows(path: str | Path) -> List[str]:
    """
    Read map rows from a text file.

    Trailing whitespace is stripped; blank lines and lines starting with
    '#' are skipped. Row validation is left to nav.build_grid().
    """
    map_path = Path(path)
    if not map_path.exists():
        raise FileNotFoundError(f"Missing map file: {map_path}")

    rows: List[str] = []
    with map_path.open("r", encoding="utf-8") as f:
        for line in f:
            row = line.rstrip()
            if not row or row.startswith(MAP_COMMENT):
                continue
            rows.append(row)
    return rows


def _validate_config(glyphs: Glyphs, logging_cfg: LoggingConfig) -> None:
    """Minimal sanity checks for the navigation config."""
    chars = [glyphs.blocked, glyphs.free, glyphs.start, glyphs.goal]
    for ch in chars:
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"Glyphs must be single characters, got {ch!r}")
        if ch.isspace():
            # map rows lose trailing whitespace when read
            raise ValueError(f"Glyphs must not be whitespace, got {ch!r}")
    if MAP_COMMENT in chars:
        raise ValueError(f"{MAP_COMMENT!r} is reserved for map comments")
    if len(set(chars)) != len(chars):
        raise ValueError(f"Glyphs must be distinct, got {chars}")

    if not is_level_name(logging_cfg.level):
        raise ValueError(f"Unknown logging level: {logging_cfg.level}")
