"""Configuration management."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.board import DOT_RADIUS, MAX_EDGE_LENGTH, BoardRules
from .core.layouts import DEFAULT_HEIGHT, DEFAULT_WIDTH, LayoutConfig, plane_size

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PREFIX = "TESSELATE_"


def load_env_file(env_file: Path = BASE_DIR / ".env") -> None:
    """Copy values from a local .env into the environment without overriding it."""
    if not env_file.exists():
        return
    for key, value in dotenv_values(env_file).items():
        if key not in os.environ and value is not None:
            os.environ[key] = value


class GameSettings(BaseSettings):
    """Game settings pulled from ``TESSELATE_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    # Board
    board_width: float = Field(default=DEFAULT_WIDTH, ge=0, description="Plane width")
    board_height: float = Field(default=DEFAULT_HEIGHT, ge=0, description="Plane height")
    scale: float = Field(default=1.0, gt=0, description="Layout and threshold scale factor")
    auto_scale: bool = Field(
        default=False, description="Derive scale from the plane size instead of using scale"
    )

    # Rules, in unscaled units
    dot_radius: float = Field(default=DOT_RADIUS, gt=0, description="Dot radius")
    max_edge_length: float = Field(default=MAX_EDGE_LENGTH, gt=0, description="Longest drawable edge")

    # Randomness
    seed: Optional[str] = Field(default=None, description="Seed for the shared PRNG")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["plain", "json"] = Field(default="plain", description="Log renderer")

    @property
    def effective_scale(self) -> float:
        """Scale actually applied to layouts and rules."""
        if not self.auto_scale:
            return self.scale
        width, height = plane_size(self.board_width, self.board_height)
        return min(width / DEFAULT_WIDTH, height / DEFAULT_HEIGHT)

    def rules(self) -> BoardRules:
        return BoardRules(self.dot_radius, self.max_edge_length).scaled(self.effective_scale)

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(self.board_width, self.board_height, self.effective_scale)


@lru_cache(maxsize=1)
def get_settings() -> GameSettings:
    """Settings singleton, read once from the environment."""
    load_env_file()
    return GameSettings()
