"""Application configuration loaded from YAML."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from .maze.models import MazeSymbols


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppConfig(BaseModel):
    """Configuration for the solver front end."""
    inputs_dir: str = "inputs"
    file_extension: str = ".txt"
    symbols: MazeSymbols = Field(default_factory=MazeSymbols)
    show_timing: bool = True
    log_level: LogLevel = "WARNING"

    @property
    def inputs_path(self) -> Path:
        return Path(self.inputs_dir)


def load_config(config_path: str | Path) -> AppConfig:
    """Load solver configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return AppConfig(**(data or {}))
