"""Pydantic data models for the Shuttle-Jaguar generation API.

These models describe both what the front-end sends and what the remote
Modal deployment returns.

Models
------
GenerationParameters
    One text-to-image submission.  Every field except ``prompt`` is
    optional; ``None`` means "use the default".  Bounds are *not* enforced
    here: :mod:`jaguar.core.validation` reports them as readable messages.
GenerationResult
    Successful response of the generate endpoint: a base64 PNG, the
    server-confirmed parameters and the generation time.
BatchParameters / BatchResult
    Shape of the batch endpoint.  Only the batch validator consumes
    ``BatchParameters``; no screen issues batch requests.
ModelInfo
    Response of the model-info endpoint.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Endpoint labels on the Modal deployment.  Each label becomes its own host:
# "<base>-<label><endpoint_domain_suffix>".
API_ENDPOINTS = {
    "generate": "shuttlejaguarmodel-generate-api",
    "batch": "shuttlejaguarmodel-batch-api",
    "info": "shuttlejaguarmodel-info",
    "reload": "shuttlejaguarmodel-reload-model",
}

DEFAULT_OPTIONS = {
    "height": 1024,
    "width": 1024,
    "guidance_scale": 3.5,
    "steps": 4,
    "max_seq_length": 256,
}

# Inclusive [min, max] bounds checked by the validator
PARAMETER_LIMITS = {
    "height": {"min": 128, "max": 2048},
    "width": {"min": 128, "max": 2048},
    "guidance_scale": {"min": 1.0, "max": 20.0},
    "steps": {"min": 1, "max": 50},
    "max_seq_length": {"min": 1, "max": 512},
    "batch_size": {"min": 1, "max": 10},
}

# Upper bound (exclusive) for seeds picked by the "Random" button
MAX_RANDOM_SEED = 1_000_000

PNG_MIME_TYPE = "image/png"


class GenerationParameters(BaseModel):
    """Parameters for a single image generation request.

    Attributes:
        prompt: Text description of the image.  Must be non-empty after trim.
        height: Image height in pixels.
        width: Image width in pixels.
        guidance_scale: Classifier-free guidance scale.
        steps: Number of inference steps.
        max_seq_length: Maximum prompt token sequence length.
        seed: Random seed.  ``None`` lets the remote service pick one.
    """

    prompt: str = Field(..., description="Text prompt for the image.")
    height: int | None = Field(default=None, description="Image height in pixels.")
    width: int | None = Field(default=None, description="Image width in pixels.")
    guidance_scale: float | None = Field(default=None, description="Guidance scale.")
    steps: int | None = Field(default=None, description="Number of inference steps.")
    max_seq_length: int | None = Field(default=None, description="Max sequence length.")
    seed: int | None = Field(
        default=None,
        description="Random seed.  None = the server picks a random seed.",
    )

    def effective_parameters(self) -> dict[str, Any]:
        """Resolve omitted fields against ``DEFAULT_OPTIONS``.

        ``seed`` is only present when the caller supplied one.

        Returns:
            Fully resolved parameter mapping, in request order
        """
        effective: dict[str, Any] = {"prompt": self.prompt}
        for name, default in DEFAULT_OPTIONS.items():
            value = getattr(self, name)
            effective[name] = default if value is None else value

        if self.seed is not None:
            effective["seed"] = self.seed

        return effective

    def to_query_params(self) -> dict[str, str]:
        """Return the effective parameters string-encoded for a query string."""
        return {name: str(value) for name, value in self.effective_parameters().items()}


class ResultParameters(BaseModel):
    """Parameters echoed back by the server, including the resolved seed."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    height: int
    width: int
    guidance_scale: float
    num_steps: int
    max_seq_length: int
    seed: int | None = None


class GenerationResult(BaseModel):
    """Successful response from the generate endpoint.

    Immutable once received.
    """

    model_config = ConfigDict(frozen=True)

    image: str = Field(..., description="Base64 encoded PNG.")
    parameters: ResultParameters
    generation_time: float = Field(..., ge=0, description="Generation time in seconds.")

    @property
    def data_uri(self) -> str:
        """Image wrapped in ``data:image/png;base64,`` framing."""
        return f"data:{PNG_MIME_TYPE};base64,{self.image}"


class BatchParameters(BaseModel):
    """Parameters for a batch generation request (1-10 prompts)."""

    prompts: list[str] = Field(default_factory=list)
    height: int | None = None
    width: int | None = None
    guidance_scale: float | None = None
    steps: int | None = None
    max_seq_length: int | None = None
    base_seed: int | None = None


class BatchImageResult(BaseModel):
    """One image of a batch response."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    image: str
    seed: int
    generation_time: float = Field(..., ge=0)


class BatchResultParameters(BaseModel):
    """Shared parameters echoed back for a batch."""

    model_config = ConfigDict(frozen=True)

    height: int
    width: int
    guidance_scale: float
    num_steps: int
    max_seq_length: int
    base_seed: int | None = None


class BatchResult(BaseModel):
    """Response of the batch endpoint."""

    model_config = ConfigDict(frozen=True)

    results: list[BatchImageResult]
    parameters: BatchResultParameters
    total_generation_time: float = Field(..., ge=0)
    images_generated: int


class RecommendedSettings(BaseModel):
    """Settings the deployment recommends for this model."""

    height: int
    width: int
    guidance_scale: float
    num_steps: int
    max_seq_length: int


class ModelInfo(BaseModel):
    """Response of the model-info endpoint."""

    model: str
    version: str
    parameters: str
    format: str
    source: Literal["volume", "huggingface"]
    capabilities: list[str] = Field(default_factory=list)
    recommended_settings: RecommendedSettings
    volume_path: str = ""
