"""Validation module for the presentation tools.

Real validation happens via:
- Pydantic input models (one per tool, see ``slidedeck.validation.models``)
- Hex color checks shared by the models and the renderer
"""

from slidedeck.validation.color_validator import (
    ColorValidationError,
    normalize_hex_color,
    validate_hex_color,
)

__all__ = [
    "ColorValidationError",
    "normalize_hex_color",
    "validate_hex_color",
]
