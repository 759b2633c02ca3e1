"""Renderer factory and logging setup."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from tilerender.config import settings
from tilerender.engine.config import RenderConfig
from tilerender.engine.pipeline import RenderPipeline, create_pipeline


def configure_logging() -> None:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.tilerender_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_renderer() -> RenderPipeline:
    """Pipeline configured from the environment, with logging set up."""
    configure_logging()
    return create_pipeline(RenderConfig.from_settings())
