"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class GatewayConfig:
    api_url: str = "https://api.deepseek.com/v1/chat/completions"
    model: str = "deepseek-chat"
    timeout: int = 60
    api_key_env: str = "DEEPSEEK_API_KEY"

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"timeout must be between 1 and 600, got {self.timeout}")
        if not self.api_url.startswith(("http://", "https://")):
            raise ValueError(f"api_url must be an http(s) URL, got {self.api_url!r}")


@dataclass(frozen=True)
class ExtractionConfig:
    temperature: float = 0.3
    resume_max_tokens: int = 1500
    feedback_max_tokens: int = 600
    brief_temperature: float = 0.5
    brief_max_tokens: int = 300

    def __post_init__(self) -> None:
        for name in ("temperature", "brief_temperature"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        for name in ("resume_max_tokens", "feedback_max_tokens", "brief_max_tokens"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class StoreConfig:
    db_path: str = "~/.resume-insight/records.db"
    usage_db_path: str = "~/.resume-insight/usage.db"

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()

    @property
    def resolved_usage_db_path(self) -> Path:
        return Path(self.usage_db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    gateway: GatewayConfig = field(default_factory=GatewayConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    store: StoreConfig = field(default_factory=StoreConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        gateway=GatewayConfig(**raw.get("gateway", {})),
        extraction=ExtractionConfig(**raw.get("extraction", {})),
        store=StoreConfig(**raw.get("store", {})),
    )
