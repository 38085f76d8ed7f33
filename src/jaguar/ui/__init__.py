"""Gradio front-end for Jaguar Image Generator."""
