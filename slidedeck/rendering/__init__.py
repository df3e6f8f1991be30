"""Presentation rendering package."""
from slidedeck.rendering.engine import DeckRenderer, DocumentProperties
from slidedeck.rendering.result import RenderResult

__all__ = ["DeckRenderer", "DocumentProperties", "RenderResult"]
