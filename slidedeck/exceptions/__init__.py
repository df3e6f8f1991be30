"""Custom exceptions for the presentation registry and rendering pipeline.

All exceptions include detailed error messages designed for LLM processing,
enabling intelligent error recovery and decision-making.
"""

from slidedeck.exceptions.base import (
    ConfigurationError,
    PortUnavailableError,
    RenderError,
    ResourceNotFoundError,
    SlideDeckError,
    ValidationError,
)
from slidedeck.exceptions.session import DocumentNotFoundError, SlideNotFoundError

__all__ = [
    "SlideDeckError",
    "ValidationError",
    "ResourceNotFoundError",
    "RenderError",
    "ConfigurationError",
    "PortUnavailableError",
    "DocumentNotFoundError",
    "SlideNotFoundError",
]
