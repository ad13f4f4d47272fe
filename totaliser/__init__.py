"""Campaign totaliser package exposing the scrape-and-fallback workflow."""
from .cache import FreshnessCache
from .config import TotaliserConfig, create_config_from_env
from .handler import HandlerResponse, ScoreTotalHandler

__all__ = [
    "FreshnessCache",
    "HandlerResponse",
    "ScoreTotalHandler",
    "TotaliserConfig",
    "create_config_from_env",
]
