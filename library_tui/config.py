"""Configuration management for library-tui."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from library_tui.logging_config import get_logger

logger = get_logger(__name__)

CONFIG_DIR = Path.home() / ".config" / "library-tui"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_FONT_SIZE = "base"


@dataclass
class Config:
    """Application configuration."""

    data_dir: Optional[str] = None
    font_size: str = DEFAULT_FONT_SIZE
    progress_file: str = field(default_factory=lambda: str(CONFIG_DIR / "progress.json"))
    log_dir: str = field(default_factory=lambda: str(CONFIG_DIR / "logs"))

    @property
    def progress_path(self) -> Path:
        return Path(self.progress_file).expanduser()

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir).expanduser()

    @property
    def data_path(self) -> Optional[Path]:
        return Path(self.data_dir).expanduser() if self.data_dir else None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            defaults = cls()
            return cls(
                data_dir=data.get("data_dir"),
                font_size=data.get("font_size", DEFAULT_FONT_SIZE),
                progress_file=data.get("progress_file", defaults.progress_file),
                log_dir=data.get("log_dir", defaults.log_dir),
            )
        except (ValueError, OSError, AttributeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "data_dir": self.data_dir,
            "font_size": self.font_size,
            "progress_file": self.progress_file,
            "log_dir": self.log_dir,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
