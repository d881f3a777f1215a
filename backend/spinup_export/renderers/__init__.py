"""Per-artifact-type document renderers."""

from .base import ArtifactRenderer
from .registry import RendererRegistry, get_renderer_registry, resolve

__all__ = ["ArtifactRenderer", "RendererRegistry", "get_renderer_registry", "resolve"]
