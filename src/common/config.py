"""Configuration for the invoicing simulator.

Defaults live on the ``Config`` dataclass; a ``.env`` file at the project
root and environment variables override them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# === Paths ===
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_CATALOG_URL = "https://api.clever-cloud.com/v2/products/instances"
DEFAULT_USER_AGENT = "invoicing-simulator/0.1.0"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Central configuration loaded from environment variables."""

    # Catalog
    catalog_url: str = DEFAULT_CATALOG_URL
    preload_logos: bool = False

    # HTTP
    request_timeout: float | None = None  # None = no timeout of our own
    user_agent: str = DEFAULT_USER_AGENT
    extra_headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Load overrides from environment."""
        if url := os.getenv("CATALOG_URL"):
            self.catalog_url = url
        if timeout := os.getenv("REQUEST_TIMEOUT"):
            self.request_timeout = float(timeout)
        if preload := os.getenv("PRELOAD_LOGOS"):
            self.preload_logos = preload.strip().lower() in _TRUTHY
        if ua := os.getenv("USER_AGENT"):
            self.user_agent = ua

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        headers.update(self.extra_headers)
        return headers
