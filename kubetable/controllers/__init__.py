"""Controllers package for the kubetable engine."""

from kubetable.controllers.render import GenericRenderer, Renderer

__all__ = [
    "GenericRenderer",
    "Renderer",
]
