"""Core functionality for talking to the remote generation service.

This package holds everything that does not depend on Gradio:

1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with JAGUAR_ in .env files

2. **Data Model** (models.py):
   - Request/response shapes, defaults and parameter limits

3. **Validation** (validation.py):
   - Pure functions returning readable violation messages

4. **API Client** (client.py, errors.py):
   - One HTTP request per call via httpx
   - Failures raised as JaguarError subclasses

5. **Imaging** (imaging.py):
   - Base64 payload decoding and download files
"""

from jaguar.core.client import JaguarAPIClient
from jaguar.core.config import JaguarConfig, config
from jaguar.core.errors import (
    HttpStatusError,
    JaguarError,
    NetworkError,
    ParseError,
    ValidationError,
)
from jaguar.core.validation import validate_batch_options, validate_generation_options

__all__ = [
    "JaguarAPIClient",
    "JaguarConfig",
    "config",
    "JaguarError",
    "ValidationError",
    "NetworkError",
    "HttpStatusError",
    "ParseError",
    "validate_generation_options",
    "validate_batch_options",
]
