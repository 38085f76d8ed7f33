"""Gradio event handlers for the Jaguar UI.

Handlers take raw component values plus the session :class:`UIState` and
return plain values / ``gr.update`` objects.  They never raise: every
failure is logged and rendered as a message so the UI stays interactive.
"""

import logging
import random

import gradio as gr

from jaguar.core.config import config
from jaguar.core.errors import JaguarError, ValidationError
from jaguar.core.imaging import decode_image, save_download
from jaguar.core.models import (
    DEFAULT_OPTIONS,
    MAX_RANDOM_SEED,
    GenerationParameters,
    GenerationResult,
)

from .formatting import (
    format_error,
    format_history,
    format_model_info,
    format_result_info,
    format_stats,
)
from .generator import error_message
from .models import READY_MESSAGE, UIState
from .state import initialize_ui_state, reset_ui_state

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Please enter your Modal API base URL first."
PREVIEW_UNAVAILABLE_MESSAGE = "*Preview unavailable: the returned image could not be decoded.*"


def configure_api_url(url: str, state: UIState) -> tuple[dict, dict, str, UIState]:
    """Bind the session to the entered deployment URL and show the generator.

    Args:
        url: Base URL typed on the configuration screen
        state: UI state

    Returns:
        Tuple of (config_group_update, generator_group_update, status_message, updated_state)
    """
    if not url or not url.strip():
        return (
            gr.update(visible=True),
            gr.update(visible=False),
            format_error("Enter your Modal deployment base URL.", title="Missing API URL"),
            state,
        )

    state = initialize_ui_state(state, url)
    return (
        gr.update(visible=False),
        gr.update(visible=True),
        f"✅ Connected to `{state.api_base_url}`",
        state,
    )


def change_api_url(state: UIState) -> tuple:
    """Return to the configuration screen, clearing the session's results.

    Returns:
        Tuple of (config_group_update, generator_group_update, url_value,
        image, info_markdown, prompt_text, download_path, history_html,
        stats_markdown, updated_state)
    """
    state = reset_ui_state(state)
    return (
        gr.update(visible=True),
        gr.update(visible=False),
        "",
        None,
        READY_MESSAGE,
        "",
        None,
        format_history(state.history),
        format_stats(state.history),
        state,
    )


def random_seed() -> int:
    """Pick a fresh random seed (re-randomized on every click)."""
    return random.randint(0, MAX_RANDOM_SEED - 1)


def build_parameters(
    prompt: str,
    width: float | None,
    height: float | None,
    guidance_scale: float | None,
    steps: float | None,
    seed: float | None,
) -> GenerationParameters:
    """Build request parameters from raw form values.

    Gradio number inputs deliver floats (or None when empty).  An empty
    seed stays None so the remote service picks one.
    """
    return GenerationParameters(
        prompt=prompt or "",
        width=None if width is None else int(width),
        height=None if height is None else int(height),
        guidance_scale=None if guidance_scale is None else float(guidance_scale),
        steps=None if steps is None else int(steps),
        max_seq_length=DEFAULT_OPTIONS["max_seq_length"],
        seed=None if seed is None else int(seed),
    )


def generate_image(
    prompt: str,
    width: float,
    height: float,
    guidance_scale: float,
    steps: float,
    seed: float | None,
    state: UIState,
) -> tuple:
    """Generate one image from the UI inputs.

    Args:
        prompt: Text prompt
        width: Image width
        height: Image height
        guidance_scale: Guidance scale
        steps: Inference steps
        seed: Seed, or None for a server-chosen seed
        state: UI state

    Returns:
        Tuple of (image, info_markdown, prompt_text, download_path,
        history_html, stats_markdown, updated_state)
    """
    if state is None or not state.is_configured():
        return (
            None,
            format_error(NOT_CONFIGURED_MESSAGE),
            "",
            None,
            format_history([]),
            "",
            state,
        )

    try:
        params = build_parameters(prompt, width, height, guidance_scale, steps, seed)
        result = state.generator.generate(params)
    except JaguarError as e:
        title = "Validation Error" if isinstance(e, ValidationError) else "Error"
        return (
            None,
            format_error(str(e), title=title),
            "",
            None,
            format_history(state.history),
            format_stats(state.history),
            state,
        )

    except Exception as e:
        # Unexpected error (already logged by the generator if raised there)
        logger.error(f"Error generating image: {e}", exc_info=True)
        return (
            None,
            format_error(
                "An unexpected error occurred. Check logs for details.\n\n"
                f"`{error_message(e)}`"
            ),
            "",
            None,
            format_history(state.history),
            format_stats(state.history),
            state,
        )

    return render_success(result, state)


def render_success(result: GenerationResult, state: UIState) -> tuple:
    """Render a completed generation.

    The generation has already succeeded at this point, so a preview or
    download that cannot be produced is reported inline and never turns
    the result into an error.

    Returns:
        Same tuple shape as :func:`generate_image`
    """
    info = format_result_info(result)

    try:
        image = decode_image(result.image)
    except ValueError as e:
        logger.warning(f"Preview unavailable for generated image: {e}")
        image = None
        info += f"\n\n{PREVIEW_UNAVAILABLE_MESSAGE}"

    try:
        download_path = str(save_download(result, config.downloads_dir))
    except (ValueError, OSError) as e:
        logger.warning(f"Could not write download file: {e}")
        download_path = None

    return (
        image,
        info,
        result.parameters.prompt,
        download_path,
        format_history(state.history),
        format_stats(state.history),
        state,
    )


def fetch_model_info(state: UIState) -> str:
    """Fetch and render model metadata from the deployment."""
    if state is None or not state.is_configured():
        return format_error(NOT_CONFIGURED_MESSAGE)

    try:
        info = state.generator.client.get_model_info()
        return format_model_info(info)
    except JaguarError as e:
        logger.warning(f"Model info request failed: {e}")
        return format_error(str(e), title="Model Info Unavailable")


def reload_model(state: UIState) -> str:
    """Ask the deployment to reload the model."""
    if state is None or not state.is_configured():
        return format_error(NOT_CONFIGURED_MESSAGE)

    try:
        body = state.generator.client.reload_model()
    except JaguarError as e:
        logger.warning(f"Model reload failed: {e}")
        return format_error(str(e), title="Reload Failed")

    detail = body.get("message") or body.get("status") or "Model reloaded"
    return f"✅ {detail}"
