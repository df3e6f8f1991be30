"""Color validation for slide elements.

Colors are six-digit hex codes, with or without a leading ``#``
(``"1F4E79"`` or ``"#1F4E79"``). Theme names and three-digit shorthand are
not accepted.
"""

import re
from typing import Optional

from slidedeck.exceptions import ValidationError

HEX_COLOR_PATTERN = r"^#?[0-9A-Fa-f]{6}$"

_HEX_COLOR_RE = re.compile(HEX_COLOR_PATTERN)


class ColorValidationError(ValidationError):
    """Raised when color validation fails."""

    def __init__(self, color: str) -> None:
        super().__init__(
            code="INVALID_COLOR",
            message=f"Invalid color: {color!r}. Use a six-digit hex code such as 'FF0000'.",
            details={"color": color},
        )


def validate_hex_color(color: Optional[str]) -> bool:
    """Validate a hex color code.

    Args:
        color: Color to check (``"FF0000"`` or ``"#FF0000"``)

    Returns:
        True if valid, False otherwise
    """
    if not color:
        return False
    return bool(_HEX_COLOR_RE.match(color.strip()))


def normalize_hex_color(color: str) -> str:
    """Return the color as six upper-case hex digits without ``#``.

    Raises:
        ColorValidationError: If color is not a valid hex code
    """
    if not validate_hex_color(color):
        raise ColorValidationError(color)
    return color.strip().lstrip("#").upper()
