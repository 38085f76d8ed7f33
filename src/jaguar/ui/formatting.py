"""Formatting utilities for Jaguar UI output."""

import html

from jaguar.core.models import GenerationResult, ModelInfo

from .models import SessionStats

EMPTY_HISTORY_HTML = """
<div class="jaguar-history-empty">
  <p>No images generated yet</p>
  <p><small>Your generated images will appear here</small></p>
</div>
""".strip()


def format_result_info(result: GenerationResult) -> str:
    """Format the info panel shown under a generated image.

    Args:
        result: Successful generation result

    Returns:
        Markdown text
    """
    params = result.parameters
    seed = params.seed if params.seed is not None else "random"
    info = f"""
✅ **Generation Complete!**

**Prompt:** {params.prompt}
**Dimensions:** {params.width}x{params.height}
**Steps:** {params.num_steps}
**Guidance Scale:** {params.guidance_scale}
**Max Sequence Length:** {params.max_seq_length}
**Seed:** {seed}
**Generation Time:** {result.generation_time}s
    """
    return info.strip()


def format_error(message: str, title: str = "Error") -> str:
    """Format an error message for display.

    Args:
        message: User-facing error message
        title: Heading shown above the message

    Returns:
        Markdown text
    """
    return f"❌ **{title}**\n\n{message}"


def format_history(history: list[GenerationResult]) -> str:
    """Render the session history as HTML cards, newest first."""
    if not history:
        return EMPTY_HISTORY_HTML

    cards = []
    for result in history:
        params = result.parameters
        prompt = html.escape(params.prompt)
        cards.append(
            '<div class="jaguar-history-card">'
            f'<img src="{result.data_uri}" alt="{prompt}" />'
            f"<p>{prompt}</p>"
            f"<p><small>{params.width}×{params.height} · {result.generation_time}s</small></p>"
            "</div>"
        )
    return '<div class="jaguar-history">' + "".join(cards) + "</div>"


def format_stats(history: list[GenerationResult]) -> str:
    """Format the session statistics panel (empty when there is no history)."""
    if not history:
        return ""

    stats = SessionStats.from_history(history)
    return (
        "### Session Stats\n\n"
        f"**Images Generated:** {stats.images_generated}\n"
        f"**Avg Generation Time:** {stats.average_generation_time:.1f}s"
    )


def format_model_info(info: ModelInfo) -> str:
    """Format model metadata and recommended settings."""
    rec = info.recommended_settings
    capabilities = ", ".join(info.capabilities) if info.capabilities else "none listed"
    text = f"""
**Model:** {info.model} ({info.version})
**Parameters:** {info.parameters}
**Format:** {info.format}
**Source:** {info.source}
**Capabilities:** {capabilities}

**Recommended Settings:** {rec.width}x{rec.height}, {rec.num_steps} steps, \
guidance {rec.guidance_scale}, max sequence length {rec.max_seq_length}
    """
    return text.strip()
