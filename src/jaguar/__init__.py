"""Jaguar Image Generator - Browser front-end for a hosted Shuttle-Jaguar model."""

__version__ = "0.1.0"

from jaguar.core.client import JaguarAPIClient
from jaguar.core.config import JaguarConfig, config
from jaguar.core.models import GenerationParameters, GenerationResult

__all__ = [
    "GenerationParameters",
    "GenerationResult",
    "JaguarAPIClient",
    "JaguarConfig",
    "config",
]
