"""HTTP client for the Shuttle-Jaguar Modal deployment.

The client performs exactly one request per call: no retries, no caching.
Failures are raised as :mod:`jaguar.core.errors` exceptions whose messages
are ready to be shown to the user.

Usage Example
-------------
    from jaguar.core.client import JaguarAPIClient
    from jaguar.core.models import GenerationParameters

    client = JaguarAPIClient("https://username--shuttle-jaguar")
    result = client.generate(GenerationParameters(prompt="a jaguar at dawn"))
    print(result.parameters.seed, result.generation_time)
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import config
from .errors import HttpStatusError, NetworkError, ParseError, ValidationError
from .models import API_ENDPOINTS, GenerationParameters, GenerationResult, ModelInfo
from .validation import validate_generation_options

logger = logging.getLogger(__name__)


class JaguarAPIClient:
    """Client for one Modal deployment of the Jaguar model.

    Args:
        base_url: Deployment base URL, without the endpoint suffix
            (e.g. ``https://username--shuttle-jaguar``)
        timeout: Request timeout in seconds; ``None`` waits indefinitely
        domain_suffix: Domain appended after the endpoint label
            (default: ``config.endpoint_domain_suffix``)
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        domain_suffix: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.strip().rstrip("/")
        self.timeout = timeout
        self.domain_suffix = (
            config.endpoint_domain_suffix if domain_suffix is None else domain_suffix
        )
        self._transport = transport

    def endpoint_url(self, endpoint: str) -> str:
        """Build the URL of a named endpoint.

        Args:
            endpoint: Key of ``API_ENDPOINTS`` (generate, batch, info, reload)

        Returns:
            ``<base_url>-<endpoint label><domain_suffix>``
        """
        return f"{self.base_url}-{API_ENDPOINTS[endpoint]}{self.domain_suffix}"

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue a single request, translating transport failures."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, **kwargs)
        except (httpx.TransportError, httpx.InvalidURL) as e:
            logger.warning(f"{method} {url} failed before a response: {e}")
            raise NetworkError(str(e) or type(e).__name__) from e

        logger.debug(f"{method} {response.request.url} -> {response.status_code}")
        if response.is_error:
            raise HttpStatusError(_error_message(response), response.status_code)
        return response

    def generate(self, options: GenerationParameters) -> GenerationResult:
        """Generate one image.

        Validation runs first; if it fails no request is made.

        Args:
            options: Generation parameters (omitted fields use defaults)

        Returns:
            Parsed generation result

        Raises:
            ValidationError: If the options violate any parameter limit
            NetworkError: If the service could not be reached
            HttpStatusError: If the service answered with a non-2xx status
            ParseError: If the response body is not a generation result
        """
        errors = validate_generation_options(options)
        if errors:
            raise ValidationError(errors)

        params = options.to_query_params()
        url = self.endpoint_url("generate")
        logger.info(f"Requesting generation: {params}")

        response = self._request("GET", url, params=params)
        result = _parse(response, GenerationResult)

        logger.info(
            f"Generation complete in {result.generation_time}s "
            f"(seed={result.parameters.seed})"
        )
        return result

    def get_model_info(self) -> ModelInfo:
        """Fetch model metadata and recommended settings."""
        response = self._request("GET", self.endpoint_url("info"))
        return _parse(response, ModelInfo)

    def reload_model(self) -> dict[str, Any]:
        """Ask the deployment to reload the model weights.

        Returns:
            The JSON body returned by the service
        """
        logger.info("Requesting model reload")
        response = self._request("POST", self.endpoint_url("reload"))
        try:
            body = response.json()
        except ValueError as e:
            raise ParseError() from e
        if not isinstance(body, dict):
            raise ParseError()
        return body


def _error_message(response: httpx.Response) -> str:
    """Extract a readable message from a failed response.

    Uses the ``error`` field of a JSON body when present, otherwise
    falls back to a message containing the status code.
    """
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"

    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP error! status: {response.status_code}"


def _parse(response: httpx.Response, model: type):
    """Parse a 2xx JSON body into ``model``, raising ParseError on failure."""
    try:
        return model.model_validate(response.json())
    except (ValueError, PydanticValidationError) as e:
        logger.warning(f"Unexpected response body from {response.request.url}: {e}")
        raise ParseError() from e
