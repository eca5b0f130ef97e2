"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Game configuration."""

    pair_count: int = Field(default=8, ge=1)
    columns: int = Field(default=4, ge=1)  # 4x4 grid for 8 pairs
    match_reward: int = Field(default=10, ge=0)
    mismatch_penalty: int = Field(default=2, ge=0)
    seed: int | None = None


class TimingConfig(BaseModel):
    """Timer configuration (seconds of wall-clock time)."""

    tick_interval: float = Field(default=1.0, gt=0)
    mismatch_delay: float = Field(default=1.0, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class GameLogConfig(BaseModel):
    """Configuration for the JSONL event log."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    timing: TimingConfig = TimingConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
