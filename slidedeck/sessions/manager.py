"""Session registry for presentations under construction."""

import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from slidedeck.exceptions import DocumentNotFoundError, RenderError, SlideNotFoundError
from slidedeck.logger import Logger
from slidedeck.rendering import DeckRenderer, DocumentProperties
from slidedeck.sessions.models import DocumentHandle, SlideHandle


@dataclass
class DocumentMetadata:
    """Caller-supplied metadata for a new presentation."""

    title: str
    subject: str
    author: str
    company: str
    revision: str
    layout: str = "LAYOUT_16x9"
    rtl: bool = False


class SessionRegistry:
    """In-memory registry of live documents and slides.

    Documents and slides are kept in two independent keyspaces. A slide is
    recorded against the document it was added to, so finalizing a document
    retires exactly its own slides. Nothing is evicted otherwise: abandoned
    documents live for the lifetime of the process.
    """

    def __init__(self, renderer: DeckRenderer, logger: Logger) -> None:
        """
        Initialize the registry.

        Args:
            renderer: Rendering collaborator used to create and save presentations
            logger: Logger instance
        """
        self.renderer = renderer
        self.logger = logger
        self._documents: Dict[str, DocumentHandle] = {}
        self._slides: Dict[str, SlideHandle] = {}

    def create_document(self, metadata: DocumentMetadata) -> DocumentHandle:
        """
        Create a new presentation and register it under a fresh id.

        Args:
            metadata: Title, attribution, layout and text direction

        Returns:
            The registered DocumentHandle
        """
        presentation = self.renderer.new_presentation(
            DocumentProperties(
                title=metadata.title,
                subject=metadata.subject,
                author=metadata.author,
                company=metadata.company,
                revision=metadata.revision,
                layout=metadata.layout,
            )
        )
        document_id = str(uuid.uuid4())
        handle = DocumentHandle(
            document_id=document_id,
            title=metadata.title,
            subject=metadata.subject,
            author=metadata.author,
            company=metadata.company,
            revision=metadata.revision,
            layout=metadata.layout,
            rtl=metadata.rtl,
            presentation=presentation,
        )
        self._documents[document_id] = handle

        self.logger.info(
            "Created presentation", document_id=document_id, title=metadata.title, layout=metadata.layout
        )
        return handle

    def create_slide(self, document_id: str) -> SlideHandle:
        """
        Append a blank slide to a document.

        Raises:
            DocumentNotFoundError: If the document is not registered
            RenderError: If the rendering library refuses the slide
        """
        document = self.resolve_document(document_id)
        result = self.renderer.add_slide(document.presentation)
        if not result.ok:
            raise RenderError(
                f'Failed to add slide to presentation "{document_id}": {result.reason}',
                details={"document_id": document_id},
            )

        slide_id = str(uuid.uuid4())
        handle = SlideHandle(slide_id=slide_id, document_id=document_id, slide=result.value)
        self._slides[slide_id] = handle
        document.slide_ids.append(slide_id)

        self.logger.info(
            "Added slide",
            document_id=document_id,
            slide_id=slide_id,
            position=len(document.slide_ids) - 1,
        )
        return handle

    def resolve_document(self, document_id: str) -> DocumentHandle:
        """
        Raises:
            DocumentNotFoundError: If the document is not registered
        """
        document = self._documents.get(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return document

    def resolve_slide(self, slide_id: str) -> SlideHandle:
        """
        Raises:
            SlideNotFoundError: If the slide is not registered
        """
        slide = self._slides.get(slide_id)
        if slide is None:
            raise SlideNotFoundError(slide_id)
        return slide

    def finalize(self, document_id: str, path: Path) -> Path:
        """
        Write a document to ``path`` and retire it and its slides.

        The document stays registered when the write fails, so the caller can
        retry.

        Args:
            document_id: Document to finalize
            path: Destination file

        Returns:
            The written path

        Raises:
            DocumentNotFoundError: If the document is not registered
            RenderError: If the file could not be written
        """
        document = self.resolve_document(document_id)
        result = self.renderer.save(document.presentation, path)
        if not result.ok:
            raise RenderError(
                f'Error saving PowerPoint presentation "{document_id}": {result.reason}',
                details={"document_id": document_id, "path": str(path)},
            )

        del self._documents[document_id]
        for slide_id in document.slide_ids:
            self._slides.pop(slide_id, None)

        self.logger.info(
            "Finalized presentation",
            document_id=document_id,
            path=str(path),
            slides=len(document.slide_ids),
        )
        return path

    def has_document(self, document_id: str) -> bool:
        return document_id in self._documents

    def has_slide(self, slide_id: str) -> bool:
        return slide_id in self._slides

    def stats(self) -> Dict[str, int]:
        return {"documents": len(self._documents), "slides": len(self._slides)}
