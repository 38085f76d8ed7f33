"""State management for the Jaguar UI.

Generation state is a tagged union: exactly one of :class:`Idle`,
:class:`Loading`, :class:`Success` or :class:`Failure`.  A result and an
error can therefore never be shown at the same time.

The session helpers below create and tear down the per-session
:class:`~jaguar.ui.models.UIState` components.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from jaguar.core.config import config

if TYPE_CHECKING:
    from jaguar.core.models import GenerationResult

    from .models import UIState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No request in flight and nothing to show."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True)
class Success:
    """Last request succeeded.

    Attributes:
        result: Parsed generation result
        image_url: Data URI of the generated image
    """

    result: "GenerationResult"
    image_url: str


@dataclass(frozen=True)
class Failure:
    """Last request failed.

    Attributes:
        message: User-facing error message
    """

    message: str


GenerationState = Union[Idle, Loading, Success, Failure]


def is_loading(state: GenerationState) -> bool:
    return isinstance(state, Loading)


def initialize_ui_state(state: "UIState | None", api_base_url: str) -> "UIState":
    """Bind the session to a deployment base URL.

    Creates a fresh API client and :class:`~jaguar.ui.generator.ImageGenerator`
    whose success/error callbacks feed the session history.

    Args:
        state: Existing UIState or None
        api_base_url: Deployment base URL entered by the user

    Returns:
        Initialized UIState instance
    """
    # Imported here to avoid a circular import with generator -> state
    from jaguar.core.client import JaguarAPIClient

    from .generator import ImageGenerator
    from .models import UIState

    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    state.api_base_url = api_base_url.strip().rstrip("/")
    client = JaguarAPIClient(state.api_base_url, timeout=config.request_timeout)
    state.generator = ImageGenerator(
        client,
        on_image_generated=state.add_result,
        on_error=state.record_error,
    )

    logger.info(f"UIState configured for {state.api_base_url}")
    return state


def reset_ui_state(state: "UIState | None") -> "UIState":
    """Forget the base URL, the generator and the session history."""
    from .models import UIState

    if state is None:
        return UIState()

    logger.info(f"Resetting UIState (had {len(state.history)} results)")
    state.api_base_url = ""
    state.generator = None
    state.history = []
    state.last_error = None
    return state
