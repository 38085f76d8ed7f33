"""Generation client: one validated request/response cycle with UI state.

:class:`ImageGenerator` drives the state machine

    Idle -> Loading -> Success(result) | Failure(message)

and reports the outcome three ways: the return value (or raised
exception), the optional callbacks, and its ``state`` attribute.
"""

import logging
from typing import Callable

from jaguar.core.client import JaguarAPIClient
from jaguar.core.errors import JaguarError
from jaguar.core.models import GenerationParameters, GenerationResult

from .state import Failure, GenerationState, Idle, Loading, Success, is_loading

logger = logging.getLogger(__name__)


class ImageGenerator:
    """Submit generation requests and track their outcome.

    Only one cycle is tracked at a time; a new call to :meth:`generate`
    simply starts a new cycle.  There is no cancellation.

    Args:
        client: API client bound to a deployment
        on_image_generated: Called with the result after each success
        on_error: Called with the error message after each failure
        on_loading_change: Called with True when a cycle starts and with
            False when it ends
    """

    def __init__(
        self,
        client: JaguarAPIClient,
        on_image_generated: Callable[[GenerationResult], None] | None = None,
        on_error: Callable[[str], None] | None = None,
        on_loading_change: Callable[[bool], None] | None = None,
    ):
        self.client = client
        self.on_image_generated = on_image_generated
        self.on_error = on_error
        self.on_loading_change = on_loading_change
        self.state: GenerationState = Idle()

    @property
    def loading(self) -> bool:
        return is_loading(self.state)

    @property
    def result(self) -> GenerationResult | None:
        return self.state.result if isinstance(self.state, Success) else None

    @property
    def image_url(self) -> str | None:
        return self.state.image_url if isinstance(self.state, Success) else None

    @property
    def error(self) -> str | None:
        return self.state.message if isinstance(self.state, Failure) else None

    def _set_loading(self, loading: bool) -> None:
        if self.on_loading_change is not None:
            self.on_loading_change(loading)

    def generate(self, options: GenerationParameters) -> GenerationResult:
        """Run one request/response cycle.

        Args:
            options: Parameters built from the current form state

        Returns:
            The generation result

        Raises:
            JaguarError: Validation, network, HTTP or parse failure (the
                message has already been stored and passed to ``on_error``)
        """
        self.state = Loading()
        self._set_loading(True)

        try:
            result = self.client.generate(options)

            self.state = Success(result=result, image_url=result.data_uri)
            if self.on_image_generated is not None:
                self.on_image_generated(result)
            return result

        except Exception as e:
            message = error_message(e)
            if isinstance(e, JaguarError):
                logger.warning(f"Generation failed: {message}")
            else:
                logger.error(f"Unexpected error during generation: {e}", exc_info=True)

            self.state = Failure(message=message)
            if self.on_error is not None:
                self.on_error(message)
            raise

        finally:
            # Release the loading flag on every exit path
            if is_loading(self.state):
                self.state = Idle()
            self._set_loading(False)


def error_message(error: BaseException) -> str:
    """Collapse any failure to the single string shown in the UI."""
    return str(error) or "Unknown error occurred"
