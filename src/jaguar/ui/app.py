"""Gradio UI for Jaguar Image Generator."""

import logging

import gradio as gr

from jaguar.core.config import config
from jaguar.core.models import DEFAULT_OPTIONS, PARAMETER_LIMITS

from .formatting import EMPTY_HISTORY_HTML
from .handlers import (
    change_api_url,
    configure_api_url,
    fetch_model_info,
    generate_image,
    random_seed,
    reload_model,
)
from .models import (
    API_URL_PLACEHOLDER,
    DIMENSION_STEP,
    GUIDANCE_STEP,
    PROMPT_PLACEHOLDER,
    READY_MESSAGE,
    UIState,
)

logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .jaguar-history {
        max-height: 600px;
        overflow-y: auto;
    }
    .jaguar-history-card {
        border: 1px solid #374151;
        border-radius: 6px;
        padding: 8px;
        margin-bottom: 12px;
    }
    .jaguar-history-card img {
        width: 100%;
        height: 128px;
        object-fit: cover;
        border-radius: 4px;
    }
    """

    app = gr.Blocks(title="Jaguar AI Image Generator")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        gr.Markdown(
            """
            # Jaguar AI Image Generator
            ### Powered by the Shuttle-Jaguar 8B model
            """
        )

        # Configuration screen (shown until a base URL is entered)
        with gr.Group(visible=True) as config_group:
            api_url_input = gr.Textbox(
                label="Modal API Base URL",
                placeholder=API_URL_PLACEHOLDER,
                value=config.api_base_url,
                info="Enter your Modal deployment base URL (without the endpoint suffix)",
            )
            connect_btn = gr.Button("Start Generating Images", variant="primary")
            config_status = gr.Markdown(
                value=f"*Your Modal URL should look like:* `{API_URL_PLACEHOLDER}`"
            )

        # Generator screen
        with gr.Group(visible=False) as generator_group:
            generator_outputs = create_generation_tab(ui_state)
            change_url_btn = gr.Button("Change API URL", variant="secondary", size="sm")

        connect_btn.click(
            fn=configure_api_url,
            inputs=[api_url_input, ui_state],
            outputs=[config_group, generator_group, config_status, ui_state],
        )
        api_url_input.submit(
            fn=configure_api_url,
            inputs=[api_url_input, ui_state],
            outputs=[config_group, generator_group, config_status, ui_state],
        )
        change_url_btn.click(
            fn=change_api_url,
            inputs=[ui_state],
            outputs=[
                config_group,
                generator_group,
                api_url_input,
                generator_outputs["image"],
                generator_outputs["info"],
                generator_outputs["prompt"],
                generator_outputs["download"],
                generator_outputs["history"],
                generator_outputs["stats"],
                ui_state,
            ],
        )

    return app, custom_css


def create_generation_tab(ui_state) -> dict[str, gr.components.Component]:
    """Create the generation form, result panel and session history.

    Args:
        ui_state: UI state component

    Returns:
        Dictionary of components other event handlers need to update
    """
    height_limits = PARAMETER_LIMITS["height"]
    width_limits = PARAMETER_LIMITS["width"]
    guidance_limits = PARAMETER_LIMITS["guidance_scale"]
    steps_limits = PARAMETER_LIMITS["steps"]

    with gr.Row():
        with gr.Column(scale=2):
            gr.Markdown("### Generation Settings")

            prompt_input = gr.Textbox(
                label="Prompt",
                placeholder=PROMPT_PLACEHOLDER,
                lines=3,
            )

            with gr.Row():
                width_input = gr.Number(
                    label="Width",
                    value=DEFAULT_OPTIONS["width"],
                    minimum=width_limits["min"],
                    maximum=width_limits["max"],
                    step=DIMENSION_STEP,
                    precision=0,
                )
                height_input = gr.Number(
                    label="Height",
                    value=DEFAULT_OPTIONS["height"],
                    minimum=height_limits["min"],
                    maximum=height_limits["max"],
                    step=DIMENSION_STEP,
                    precision=0,
                )

            with gr.Row():
                guidance_input = gr.Number(
                    label="Guidance Scale",
                    value=DEFAULT_OPTIONS["guidance_scale"],
                    minimum=guidance_limits["min"],
                    maximum=guidance_limits["max"],
                    step=GUIDANCE_STEP,
                    info="Controls creativity (1.0-20.0)",
                )
                steps_input = gr.Number(
                    label="Steps",
                    value=DEFAULT_OPTIONS["steps"],
                    minimum=steps_limits["min"],
                    maximum=steps_limits["max"],
                    precision=0,
                    info="More steps = higher quality",
                )

            with gr.Row():
                seed_input = gr.Number(
                    label="Seed (optional)",
                    value=None,
                    precision=0,
                    info="Leave empty for a random seed; set one for reproducible results",
                )
                random_seed_btn = gr.Button("Random", variant="secondary")

            generate_btn = gr.Button("Generate Image", variant="primary")

            gr.Markdown("### Result")
            image_output = gr.Image(label="Generated Image", type="pil", interactive=False)
            info_output = gr.Markdown(value=READY_MESSAGE)
            prompt_output = gr.Textbox(
                label="Prompt Used",
                interactive=False,
                buttons=["copy"],
            )
            download_output = gr.File(label="Download Image", interactive=False)

            with gr.Accordion("Model", open=False):
                with gr.Row():
                    model_info_btn = gr.Button("Model Info", variant="secondary")
                    reload_model_btn = gr.Button("Reload Model", variant="secondary")
                model_output = gr.Markdown(value="")

        with gr.Column(scale=1):
            gr.Markdown("### Recent Generations")
            history_output = gr.HTML(value=EMPTY_HISTORY_HTML)
            stats_output = gr.Markdown(value="")

    random_seed_btn.click(fn=random_seed, inputs=[], outputs=[seed_input])

    # Disable the button while a request is in flight
    generate_btn.click(
        fn=lambda: gr.update(interactive=False, value="Generating..."),
        inputs=[],
        outputs=[generate_btn],
        queue=False,
    ).then(
        fn=generate_image,
        inputs=[
            prompt_input,
            width_input,
            height_input,
            guidance_input,
            steps_input,
            seed_input,
            ui_state,
        ],
        outputs=[
            image_output,
            info_output,
            prompt_output,
            download_output,
            history_output,
            stats_output,
            ui_state,
        ],
    ).then(
        fn=lambda: gr.update(interactive=True, value="Generate Image"),
        inputs=[],
        outputs=[generate_btn],
        queue=False,
    )

    model_info_btn.click(fn=fetch_model_info, inputs=[ui_state], outputs=[model_output])
    reload_model_btn.click(fn=reload_model, inputs=[ui_state], outputs=[model_output])

    return {
        "image": image_output,
        "info": info_output,
        "prompt": prompt_output,
        "download": download_output,
        "history": history_output,
        "stats": stats_output,
    }


def main():
    """Main entry point for the application."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Starting Jaguar Image Generator...")
    logger.info(f"Configuration: {config.model_dump()}")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
