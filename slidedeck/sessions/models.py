"""Registry entries for documents and slides."""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class DocumentHandle:
    """A presentation under construction.

    ``presentation`` is the python-pptx object; everything else is the
    metadata it was created with.
    """

    document_id: str
    title: str
    subject: str
    author: str
    company: str
    revision: str
    layout: str
    rtl: bool
    presentation: Any
    slide_ids: List[str] = field(default_factory=list)


@dataclass
class SlideHandle:
    """One slide, bound to the document it was added to."""

    slide_id: str
    document_id: str
    slide: Any
