"""
Shared components used by the product instance and simulator packages:
- Configuration
- Async HTTP client
"""

from .config import Config, PROJECT_ROOT
from .http_client import HTTPClient

__all__ = [
    "Config",
    "HTTPClient",
    "PROJECT_ROOT",
]
