"""Shared pytest fixtures for Jaguar tests."""

import base64
import io
import json
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator

import httpx
import pytest
from PIL import Image

from jaguar.core.client import JaguarAPIClient
from jaguar.core.config import JaguarConfig
from jaguar.core.models import GenerationParameters
from jaguar.ui.models import UIState

BASE_URL = "https://tester--shuttle-jaguar"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> JaguarConfig:
    """Create a test configuration writing downloads to a temporary directory."""
    return JaguarConfig(
        _env_file=None,
        api_base_url=BASE_URL,
        downloads_dir=temp_dir / "downloads",
    )


@pytest.fixture
def valid_params() -> GenerationParameters:
    """Generation parameters with every field inside its limits."""
    return GenerationParameters(
        prompt="A jaguar resting on a branch",
        height=512,
        width=512,
        guidance_scale=3.5,
        steps=4,
        max_seq_length=256,
        seed=42,
    )


@pytest.fixture
def png_b64() -> str:
    """A real 4x4 PNG, base64 encoded."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 120, 40)).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def success_body() -> dict:
    """Body returned by the generate endpoint on success."""
    return {
        "image": "QQ==",
        "parameters": {
            "prompt": "cat",
            "height": 512,
            "width": 512,
            "guidance_scale": 3.5,
            "num_steps": 4,
            "max_seq_length": 256,
            "seed": 42,
        },
        "generation_time": 1.2,
    }


@pytest.fixture
def make_client() -> Callable[..., tuple[JaguarAPIClient, list[httpx.Request]]]:
    """Build a client whose requests are answered by a fixed response.

    Returns a factory taking ``status``, and either ``json_body`` or raw
    ``content``.  The factory returns ``(client, requests)``; every request
    the client sends is appended to ``requests``.
    """

    def factory(status: int = 200, json_body=None, content: bytes | None = None):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if json_body is not None:
                return httpx.Response(status, content=json.dumps(json_body).encode("utf-8"))
            return httpx.Response(status, content=content or b"")

        client = JaguarAPIClient(
            BASE_URL,
            domain_suffix=".modal.run",
            transport=httpx.MockTransport(handler),
        )
        return client, requests

    return factory


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing."""
    return UIState()
