"""Session-related exceptions."""

from typing import Any, Dict, Optional

from slidedeck.exceptions.base import ResourceNotFoundError


class DocumentNotFoundError(ResourceNotFoundError):
    """Raised when a presentation id is not (or no longer) registered."""

    def __init__(self, document_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="DOCUMENT_NOT_FOUND",
            message=f'PowerPoint presentation "{document_id}" not found, please create it first.',
            details=details or {},
        )
        self.document_id = document_id


class SlideNotFoundError(ResourceNotFoundError):
    """Raised when a slide id is not registered."""

    def __init__(self, slide_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="SLIDE_NOT_FOUND",
            message=f'Slide "{slide_id}" not found, please create it first.',
            details=details or {},
        )
        self.slide_id = slide_id
