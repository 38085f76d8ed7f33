"""Unit tests for Gradio event handlers."""

from unittest.mock import MagicMock, patch

import httpx
import pytest
from PIL import Image

from jaguar.core.client import JaguarAPIClient
from jaguar.core.errors import HttpStatusError
from jaguar.core.models import MAX_RANDOM_SEED, ModelInfo
from jaguar.ui.handlers import (
    NOT_CONFIGURED_MESSAGE,
    PREVIEW_UNAVAILABLE_MESSAGE,
    build_parameters,
    change_api_url,
    configure_api_url,
    fetch_model_info,
    generate_image,
    random_seed,
    reload_model,
)
from jaguar.ui.models import READY_MESSAGE
from jaguar.ui.state import Success, initialize_ui_state

BASE_URL = "https://tester--shuttle-jaguar"


@pytest.fixture
def configured_state(ui_state, make_client):
    """Return a factory binding the session to a mock deployment."""

    def factory(**response):
        state = initialize_ui_state(ui_state, BASE_URL)
        state.generator.client, requests = make_client(**response)
        return state, requests

    return factory


class TestConfigureApiUrl:
    """Tests for configure_api_url and change_api_url."""

    def test_blank_url_keeps_config_screen(self, ui_state):
        config_vis, generator_vis, message, state = configure_api_url("   ", ui_state)

        assert config_vis["visible"] is True
        assert generator_vis["visible"] is False
        assert "Missing API URL" in message
        assert not state.is_configured()

    def test_url_switches_to_generator(self, ui_state):
        config_vis, generator_vis, message, state = configure_api_url(
            "https://u--shuttle-jaguar", ui_state
        )

        assert config_vis["visible"] is False
        assert generator_vis["visible"] is True
        assert "https://u--shuttle-jaguar" in message
        assert state.is_configured()

    def test_change_url_resets_session(self, ui_state):
        state = initialize_ui_state(ui_state, "https://u--shuttle-jaguar")

        (
            config_vis,
            generator_vis,
            url,
            image,
            info,
            prompt,
            download,
            history,
            stats,
            state,
        ) = change_api_url(state)

        assert config_vis["visible"] is True
        assert generator_vis["visible"] is False
        assert url == ""
        assert "No images generated yet" in history
        assert stats == ""
        assert not state.is_configured()

    def test_change_url_clears_previous_result(
        self, configured_state, success_body, png_b64, test_config
    ):
        """The last image, info, prompt echo and download do not survive a URL change."""
        success_body["image"] = png_b64
        state, _ = configured_state(json_body=success_body)
        with patch("jaguar.ui.handlers.config", test_config):
            generate_image("cat", 512, 512, 3.5, 4, None, state)

        _, _, _, image, info, prompt, download, *_ = change_api_url(state)

        assert image is None
        assert info == READY_MESSAGE
        assert prompt == ""
        assert download is None


class TestRandomSeed:
    """Tests for random_seed."""

    def test_in_range(self):
        for _ in range(50):
            assert 0 <= random_seed() < MAX_RANDOM_SEED

    def test_rerandomized_per_call(self):
        with patch("jaguar.ui.handlers.random.randint", side_effect=[1, 2]):
            assert random_seed() == 1
            assert random_seed() == 2


class TestBuildParameters:
    """Tests for build_parameters."""

    def test_converts_gradio_floats(self):
        params = build_parameters("cat", 512.0, 768.0, 3.5, 4.0, 42.0)

        assert params.width == 512
        assert params.height == 768
        assert params.steps == 4
        assert params.seed == 42
        assert params.max_seq_length == 256

    def test_empty_seed_stays_none(self):
        assert build_parameters("cat", 512, 512, 3.5, 4, None).seed is None

    def test_none_prompt_becomes_empty(self):
        assert build_parameters(None, 512, 512, 3.5, 4, None).prompt == ""


class TestGenerateImage:
    """Tests for the generate_image handler."""

    def test_not_configured(self, ui_state):
        image, info, prompt, download, history, stats, state = generate_image(
            "cat", 512, 512, 3.5, 4, None, ui_state
        )

        assert image is None
        assert NOT_CONFIGURED_MESSAGE in info
        assert download is None

    def test_success(self, configured_state, success_body, png_b64, test_config):
        success_body["image"] = png_b64
        state, requests = configured_state(json_body=success_body)

        with patch("jaguar.ui.handlers.config", test_config):
            image, info, prompt, download, history, stats, state = generate_image(
                "cat", 512, 512, 3.5, 4, None, state
            )

        assert isinstance(image, Image.Image)
        assert "Generation Complete" in info
        assert prompt == "cat"
        assert download.startswith(str(test_config.downloads_dir))
        assert len(state.history) == 1
        assert "data:image/png;base64," in history
        assert "**Images Generated:** 1" in stats
        assert "seed" not in requests[0].url.params

    def test_seed_forwarded(self, configured_state, success_body, png_b64, test_config):
        success_body["image"] = png_b64
        state, requests = configured_state(json_body=success_body)

        with patch("jaguar.ui.handlers.config", test_config):
            generate_image("cat", 512, 512, 3.5, 4, 1234.0, state)

        assert requests[0].url.params["seed"] == "1234"

    def test_history_newest_first(self, ui_state, success_body, png_b64, test_config):
        def handler(request: httpx.Request) -> httpx.Response:
            body = dict(success_body, image=png_b64)
            body["parameters"] = dict(
                success_body["parameters"], prompt=request.url.params["prompt"]
            )
            return httpx.Response(200, json=body)

        state = initialize_ui_state(ui_state, BASE_URL)
        state.generator.client = JaguarAPIClient(
            BASE_URL, domain_suffix=".modal.run", transport=httpx.MockTransport(handler)
        )

        with patch("jaguar.ui.handlers.config", test_config):
            generate_image("first", 512, 512, 3.5, 4, None, state)
            *_, history, _, state = generate_image("second", 512, 512, 3.5, 4, None, state)

        assert [r.parameters.prompt for r in state.history] == ["second", "first"]
        assert history.index("second") < history.index("first")

    def test_validation_error(self, configured_state):
        state, requests = configured_state(json_body={})

        image, info, prompt, download, history, stats, state = generate_image(
            "", 512, 512, 3.5, 99, None, state
        )

        assert image is None
        assert "Validation Error" in info
        assert "Prompt is required and cannot be empty" in info
        assert "Steps must be between 1 and 50" in info
        assert requests == []
        assert state.last_error is not None

    def test_http_error(self, configured_state):
        state, _ = configured_state(status=500, json_body={"error": "model busy"})

        image, info, prompt, download, history, stats, state = generate_image(
            "cat", 512, 512, 3.5, 4, None, state
        )

        assert image is None
        assert "model busy" in info
        assert state.last_error == "model busy"
        assert state.history == []

    def test_undecodable_image_still_succeeds(self, configured_state, success_body, test_config):
        """A 200 whose payload cannot be previewed is still shown as a success."""
        state, _ = configured_state(json_body=success_body)

        with patch("jaguar.ui.handlers.config", test_config):
            image, info, prompt, download, history, stats, state = generate_image(
                "cat", 512, 512, 3.5, 4, None, state
            )

        assert image is None
        assert "Generation Complete" in info
        assert PREVIEW_UNAVAILABLE_MESSAGE in info
        assert "Error" not in info
        assert prompt == "cat"
        assert download is not None
        assert "**Images Generated:** 1" in stats
        assert len(state.history) == 1
        assert state.last_error is None
        assert isinstance(state.generator.state, Success)


class TestModelHandlers:
    """Tests for fetch_model_info and reload_model."""

    def test_model_info_not_configured(self, ui_state):
        assert NOT_CONFIGURED_MESSAGE in fetch_model_info(ui_state)

    def test_model_info(self, ui_state):
        state = initialize_ui_state(ui_state, "https://u--j")
        state.generator.client = MagicMock()
        state.generator.client.get_model_info.return_value = ModelInfo.model_validate(
            {
                "model": "shuttle-jaguar",
                "version": "1.0",
                "parameters": "8B",
                "format": "safetensors",
                "source": "volume",
                "capabilities": ["text-to-image"],
                "recommended_settings": {
                    "height": 1024,
                    "width": 1024,
                    "guidance_scale": 3.5,
                    "num_steps": 4,
                    "max_seq_length": 256,
                },
            }
        )

        assert "shuttle-jaguar" in fetch_model_info(state)

    def test_model_info_error(self, ui_state):
        state = initialize_ui_state(ui_state, "https://u--j")
        state.generator.client = MagicMock()
        state.generator.client.get_model_info.side_effect = HttpStatusError("HTTP 502", 502)

        text = fetch_model_info(state)

        assert "Model Info Unavailable" in text
        assert "HTTP 502" in text

    def test_reload(self, ui_state):
        state = initialize_ui_state(ui_state, "https://u--j")
        state.generator.client = MagicMock()
        state.generator.client.reload_model.return_value = {"message": "Model reloaded from volume"}

        assert reload_model(state) == "✅ Model reloaded from volume"

    def test_reload_error(self, ui_state):
        state = initialize_ui_state(ui_state, "https://u--j")
        state.generator.client = MagicMock()
        state.generator.client.reload_model.side_effect = HttpStatusError("nope", 500)

        assert "Reload Failed" in reload_model(state)
