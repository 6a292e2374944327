"""Configuration state management."""

import json
import os
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

_ENV_OVERRIDES = {"type": "FINDUP_TYPE", "stop_at": "FINDUP_STOP_AT"}


def _default_config_dir() -> Path:
    override = os.getenv("FINDUP_CONFIG_DIR")
    if override:
        return Path(override) / ".findup"
    if os.getenv("PYTEST_CURRENT_TEST"):
        return Path(tempfile.gettempdir()) / f"findup-tests-{os.getpid()}"
    return Path.home() / ".findup"


@dataclass
class Config:
    """CLI defaults persisted to ~/.findup/findup.json."""

    type: str = "file"
    stop_at: str | None = None
    debug_mode: bool = False
    config_dir: Path = field(default_factory=_default_config_dir)
    config_file: Path = field(init=False)

    def __post_init__(self) -> None:
        self.config_file = self.config_dir / "findup.json"

    def load(self) -> None:
        """Load stored values, then apply environment overrides."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    for key, value in json.load(f).items():
                        if key in self.to_dict():
                            setattr(self, key, value)
            except (OSError, json.JSONDecodeError, AttributeError) as e:
                print(
                    f"Warning: Could not load config from {self.config_file}. Error: {e}. Using default settings.",
                    file=sys.stderr,
                )
        for key, var in _ENV_OVERRIDES.items():
            value = os.getenv(var)
            if value:
                setattr(self, key, value)

    def save(self) -> None:
        if not self.config_dir.exists():
            self.config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    def update(self, **kwargs) -> None:
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
        self.save()

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "stop_at": self.stop_at,
            "debug_mode": self.debug_mode,
        }

    @classmethod
    def load_or_default(cls, **kwargs) -> "Config":
        config = cls(**kwargs)
        config.load()
        return config
