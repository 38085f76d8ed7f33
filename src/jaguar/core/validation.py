"""Client-side validation of generation parameters.

Validators here are pure: they never raise and never touch the network.
They return an ordered list of user-facing messages, one per violated rule;
an empty list means the input is valid.
"""

import logging

from .models import PARAMETER_LIMITS, BatchParameters, GenerationParameters

logger = logging.getLogger(__name__)

# (field, label) in the order violations are reported
_RANGE_RULES = (
    ("height", "Height"),
    ("width", "Width"),
    ("guidance_scale", "Guidance scale"),
    ("steps", "Steps"),
    ("max_seq_length", "Max sequence length"),
)


def _is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def _range_message(field: str, label: str, value: float | None) -> str | None:
    """Return a violation message if ``value`` is outside its limits.

    ``None`` means "use the default" and is exempt from range checking.
    """
    if value is None:
        return None

    limits = PARAMETER_LIMITS[field]
    if not (limits["min"] <= value <= limits["max"]):
        return f"{label} must be between {limits['min']} and {limits['max']}"
    return None


def validate_generation_options(options: GenerationParameters) -> list[str]:
    """Check a generation request against the parameter limits.

    Rules are checked independently (not short-circuited), in this order:
    prompt, height, width, guidance scale, steps, max sequence length.

    Args:
        options: Candidate parameters

    Returns:
        List of violation messages (empty if valid)
    """
    errors: list[str] = []

    if _is_blank(options.prompt):
        errors.append("Prompt is required and cannot be empty")

    for field, label in _RANGE_RULES:
        message = _range_message(field, label, getattr(options, field))
        if message:
            errors.append(message)

    if errors:
        logger.debug(f"Generation options failed validation: {errors}")

    return errors


def validate_batch_options(options: BatchParameters) -> list[str]:
    """Check a batch request.

    Reports one message per violated rule class: all blank prompts
    collapse into a single message.

    Args:
        options: Candidate batch parameters

    Returns:
        List of violation messages (empty if valid)
    """
    errors: list[str] = []
    max_batch = PARAMETER_LIMITS["batch_size"]["max"]

    if not options.prompts:
        errors.append("Prompts array is required and cannot be empty")
        return errors

    if len(options.prompts) > max_batch:
        errors.append(f"Batch size cannot exceed {max_batch} prompts")

    if any(_is_blank(prompt) for prompt in options.prompts):
        errors.append("All prompts must be non-empty strings")

    return errors
