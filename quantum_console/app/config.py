from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_BASE_URL = "http://localhost:8000/quantum"
DEFAULT_EXPORT_DIR = "out/exports"


@dataclass(frozen=True)
class AppConfig:
    base_url: str
    timeout_seconds: float
    verify_ssl: bool
    retry_max_attempts: int
    retry_backoff_ms: int
    items_per_page: int = 10
    export_dir: str = DEFAULT_EXPORT_DIR

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "AppConfig":
        _load_dotenv(env_file)
        config = cls(
            base_url=os.getenv("QUANTUM_BASE_URL", DEFAULT_BASE_URL).strip(),
            timeout_seconds=float(os.getenv("QUANTUM_TIMEOUT_SECONDS", "30")),
            verify_ssl=os.getenv("QUANTUM_VERIFY_SSL", "true").lower() == "true",
            retry_max_attempts=int(os.getenv("QUANTUM_RETRY_MAX_ATTEMPTS", "3")),
            retry_backoff_ms=int(os.getenv("QUANTUM_RETRY_BACKOFF_MS", "150")),
            items_per_page=int(os.getenv("QUANTUM_ITEMS_PER_PAGE", "10")),
            export_dir=os.getenv("QUANTUM_EXPORT_DIR", DEFAULT_EXPORT_DIR).strip(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("QUANTUM_BASE_URL must not be empty")
        if self.timeout_seconds <= 0:
            raise ValueError("QUANTUM_TIMEOUT_SECONDS must be greater than 0")
        if self.retry_max_attempts < 1:
            raise ValueError("QUANTUM_RETRY_MAX_ATTEMPTS must be >= 1")
        if self.retry_backoff_ms < 0:
            raise ValueError("QUANTUM_RETRY_BACKOFF_MS must be >= 0")
        if self.items_per_page <= 0:
            raise ValueError("QUANTUM_ITEMS_PER_PAGE must be greater than 0")
        if not self.export_dir:
            raise ValueError("QUANTUM_EXPORT_DIR must not be empty")


def _load_dotenv(path: str) -> None:
    dotenv_path = Path(path)
    if not dotenv_path.exists():
        return
    for raw_line in dotenv_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip().strip('"'))
