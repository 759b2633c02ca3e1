"""Tile rendering engine: classify tagged features, composite the tile."""

from tilerender.engine.registry import category, get_registry, CategoryRegistry, CategorySpec
from tilerender.engine.context import RenderContext
from tilerender.engine.classifier import Classifier
from tilerender.engine.pipeline import RenderPipeline, RenderResult, create_pipeline

__all__ = [
    "category",
    "get_registry",
    "CategoryRegistry",
    "CategorySpec",
    "RenderContext",
    "Classifier",
    "RenderPipeline",
    "RenderResult",
    "create_pipeline",
]
