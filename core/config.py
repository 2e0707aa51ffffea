from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from core.config_file import find_config_file, load_config, get_config_value

DEFAULT_LOG_LEVEL = "WARNING"
TRUTHY = ("true", "1", "yes", "on")


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip().lower() in TRUTHY


def default_repo_root() -> Path:
    """Directory searched for .factorial.toml (env: FACT_REPO_ROOT, else cwd)."""
    return Path(os.getenv("FACT_REPO_ROOT") or Path.cwd())


@dataclass
class Config:
    repo_root: Path = field(default_factory=default_repo_root)
    profile: Optional[str] = None
    strict: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    config_path: Optional[Path] = None
    _config_file_data: dict = field(default_factory=dict, repr=False)

    def __post_init__(self):
        """Load config file, then apply environment overrides."""
        self._load_config_file()
        self._apply_env()

    def _load_config_file(self):
        file_config = load_config(str(self.repo_root), profile=self.profile)
        if not file_config:
            return
        self._config_file_data = file_config
        self.config_path = find_config_file(str(self.repo_root))
        self.strict = get_config_value(file_config, "factorial.strict", self.strict)
        self.log_level = get_config_value(file_config, "logging.level", self.log_level).upper()

    def _apply_env(self):
        strict = _env_flag("FACT_STRICT")
        if strict is not None:
            self.strict = strict
        level = os.getenv("FACT_LOG_LEVEL")
        if level:
            self.log_level = level.strip().upper()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value from config file."""
        return get_config_value(self._config_file_data, key, default)
