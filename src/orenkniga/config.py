"""Application configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from orenkniga.core.paginator import CHARS_PER_PAGE
from orenkniga.core.transition import SETTLE_INTERVAL

HOME_ENV_VAR = "ORENKNIGA_HOME"
DEFAULT_DATA_DIR = Path.home() / ".orenkniga"


@dataclass
class AppConfig:
    """Runtime configuration shared by the CLI and the TUI."""

    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    store_name: str = "storage.json"
    chars_per_page: int = CHARS_PER_PAGE
    settle_interval: float = SETTLE_INTERVAL

    @property
    def store_file(self) -> Path:
        return self.data_dir / self.store_name


def load_config(data_dir: Path | None = None) -> AppConfig:
    """Build configuration from an explicit directory or the environment."""
    if data_dir is None:
        env_dir = os.environ.get(HOME_ENV_VAR)
        data_dir = Path(env_dir).expanduser() if env_dir else DEFAULT_DATA_DIR
    return AppConfig(data_dir=data_dir)
