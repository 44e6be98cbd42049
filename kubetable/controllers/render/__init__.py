"""Renderers: the boundary between fetched objects and table rows."""

from kubetable.controllers.render.base_renderer import Renderer
from kubetable.controllers.render.generic import GenericRenderer

__all__ = [
    "GenericRenderer",
    "Renderer",
]
