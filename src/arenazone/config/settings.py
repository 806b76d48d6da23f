"""Configuration settings using Pydantic Settings.

Region geometry defaults to the built-in arena constants; every field can
be overridden through ARENA_* environment variables or a .env file.

Usage:
    from arenazone.config import ArenaSettings

    settings = ArenaSettings()              # defaults + environment
    settings = ArenaSettings(radius=150.0)  # explicit override
"""

from __future__ import annotations

try:
    from pydantic import Field, model_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e

from arenazone.core.types import Vec3


class ArenaSettings(BaseSettings):  # type: ignore[misc]
    """Arena territory and spawn configuration.

    Attributes:
        cell_size: World units per grid block.
        center_x: Arena centre X.
        center_y: Arena centre Y (ignored by territory checks).
        center_z: Arena centre Z.
        radius: Arena radius in world units (must be > 0).
        grid_index: Grid index reported for points inside the arena.
        region_tag: Region tag reported for points inside the arena.
        spawn_x: Spawn point X (defaults to centre).
        spawn_y: Spawn point Y (defaults to centre).
        spawn_z: Spawn point Z (defaults to centre).
        log_level: Root log level used by the CLI.

    Environment Variables:
        ARENA_CELL_SIZE
        ARENA_CENTER_X / ARENA_CENTER_Y / ARENA_CENTER_Z
        ARENA_RADIUS
        ARENA_GRID_INDEX
        ARENA_REGION_TAG
        ARENA_SPAWN_X / ARENA_SPAWN_Y / ARENA_SPAWN_Z
        ARENA_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ARENA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cell_size: float = Field(default=10.0, gt=0)
    center_x: float = -1000.0
    center_y: float = 0.0
    center_z: float = 500.0
    radius: float = Field(default=300.0, gt=0)
    grid_index: int = 500
    region_tag: int = 5
    spawn_x: float | None = None
    spawn_y: float | None = None
    spawn_z: float | None = None
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _spawn_all_or_nothing(self) -> ArenaSettings:
        given = [v is not None for v in (self.spawn_x, self.spawn_y, self.spawn_z)]
        if any(given) and not all(given):
            raise ValueError("spawn_x, spawn_y and spawn_z must be set together")
        return self

    @property
    def center(self) -> Vec3:
        return Vec3(self.center_x, self.center_y, self.center_z)

    @property
    def spawn_point(self) -> Vec3:
        """Configured spawn point, or the arena centre when unset."""
        if self.spawn_x is None or self.spawn_y is None or self.spawn_z is None:
            return self.center
        return Vec3(self.spawn_x, self.spawn_y, self.spawn_z)
