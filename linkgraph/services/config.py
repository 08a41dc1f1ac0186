"""Application configuration helpers."""

from __future__ import annotations

from functools import lru_cache
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ENV_PREFIX = "LINKGRAPH_"
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class GraphConfig(BaseModel):
    """Runtime configuration loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    # Force simulation
    repulsion_constant: float = Field(default=5000.0, gt=0, description="Pairwise repulsion strength")
    attraction_constant: float = Field(default=0.05, gt=0, description="Spring strength along edges")
    ideal_edge_length: float = Field(default=120.0, gt=0, description="Rest length of an edge spring")
    gravity_constant: float = Field(default=0.01, ge=0, description="Pull toward the graph origin")
    damping_factor: float = Field(default=0.85, gt=0, le=1, description="Force-to-velocity factor")
    max_speed: float = Field(default=10.0, gt=0, description="Velocity magnitude cap per tick")
    min_distance: float = Field(default=1.0, gt=0, description="Floor applied to distances before dividing")
    tick_interval_ms: int = Field(default=16, gt=0, description="Delay between simulation ticks")

    # Initial layout
    initial_radius_base: float = Field(default=150.0, ge=0)
    initial_radius_growth: float = Field(default=10.0, ge=0)
    initial_radius_cap: float = Field(default=300.0, ge=0)

    # Viewport
    hit_test_radius: float = Field(default=30.0, gt=0, description="Graph-space selection radius")
    zoom_min: float = Field(default=0.3, gt=0)
    zoom_max: float = Field(default=3.0, gt=0)
    zoom_step: float = Field(default=1.2, gt=1)

    # Render hints
    node_radius_base: float = Field(default=12.0, ge=0)
    node_radius_growth: float = Field(default=4.0, ge=0)
    node_radius_cap: float = Field(default=20.0, ge=0)

    documents_path: Optional[Path] = Field(
        default=None, description="Directory of Markdown documents to graph"
    )
    autostart: bool = Field(default=True, description="Start the simulation after every rebuild")
    log_level: str = Field(default="INFO")

    @field_validator("documents_path", mode="before")
    @classmethod
    def _normalize_documents_path(cls, value: str | Path | None) -> Optional[Path]:
        if value is None or value == "":
            return None
        path = value if isinstance(value, Path) else Path(value)
        return path.expanduser().resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        cleaned = str(value).strip().upper()
        if cleaned not in LOG_LEVELS:
            raise ValueError(f"LINKGRAPH_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return cleaned

    @model_validator(mode="after")
    def _check_zoom_range(self) -> GraphConfig:
        if self.zoom_min > self.zoom_max:
            raise ValueError("zoom_min must not exceed zoom_max")
        return self


def _read_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


def _env_overrides() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in GraphConfig.model_fields:
        raw = _read_env(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw
    return values


@lru_cache(maxsize=1)
def get_config() -> GraphConfig:
    """Load and cache application configuration."""
    return GraphConfig(**_env_overrides())


def reload_config() -> GraphConfig:
    """Clear cached config (useful for tests) and reload."""
    get_config.cache_clear()
    return get_config()


__all__ = ["GraphConfig", "get_config", "reload_config", "ENV_PREFIX"]
