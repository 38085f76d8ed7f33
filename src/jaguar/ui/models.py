"""Data models for Jaguar UI session state."""

import logging
from dataclasses import dataclass, field
from typing import Any

from jaguar.core.models import GenerationResult

logger = logging.getLogger(__name__)


@dataclass
class SessionStats:
    """Aggregate numbers shown under the history list."""

    images_generated: int = 0
    average_generation_time: float = 0.0

    @classmethod
    def from_history(cls, history: list[GenerationResult]) -> "SessionStats":
        if not history:
            return cls()
        total = sum(result.generation_time for result in history)
        return cls(images_generated=len(history), average_generation_time=total / len(history))


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each browser session gets its own UIState.  Nothing here is persisted;
    reloading the page starts a new session.

    Attributes
    ----------
    api_base_url : str
        Deployment base URL entered on the configuration screen
    generator : Any | None
        ImageGenerator bound to ``api_base_url`` (None until configured)
    history : list[GenerationResult]
        Successful results of this session, newest first
    last_error : str | None
        Message of the most recent failure
    """

    api_base_url: str = ""
    generator: Any | None = None  # ImageGenerator instance
    history: list[GenerationResult] = field(default_factory=list)
    last_error: str | None = None

    def is_configured(self) -> bool:
        """Check if a deployment URL has been entered and bound."""
        return bool(self.api_base_url) and self.generator is not None

    def add_result(self, result: GenerationResult) -> None:
        """Prepend a successful result to the history."""
        self.history.insert(0, result)
        self.last_error = None

    def record_error(self, message: str) -> None:
        self.last_error = message

    @property
    def stats(self) -> SessionStats:
        return SessionStats.from_history(self.history)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(configured={self.is_configured()}, "
            f"api_base_url={self.api_base_url!r}, "
            f"history={len(self.history)})"
        )


# UI Constants
DIMENSION_STEP = 64
GUIDANCE_STEP = 0.5
PROMPT_PLACEHOLDER = "Describe the image you want to generate..."
API_URL_PLACEHOLDER = "https://your-username--shuttle-jaguar"
READY_MESSAGE = "*Ready to generate images*"
