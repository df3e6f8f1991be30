"""Pytest fixtures for session tests."""

import pytest

from slidedeck.rendering import RenderResult
from slidedeck.sessions import DocumentMetadata, SessionRegistry


class StubRenderer:
    """Renderer double that never touches python-pptx.

    ``save_failure`` makes every save fail with that reason.
    """

    def __init__(self, save_failure=None):
        self.save_failure = save_failure
        self.saved = []

    def new_presentation(self, properties):
        return {"properties": properties, "slides": []}

    def add_slide(self, presentation):
        slide = object()
        presentation["slides"].append(slide)
        return RenderResult.success(slide)

    def save(self, presentation, path):
        if self.save_failure:
            return RenderResult.failure(self.save_failure)
        self.saved.append(path)
        return RenderResult.success(path)


@pytest.fixture
def stub_renderer():
    return StubRenderer()


@pytest.fixture
def stub_registry(stub_renderer, logger):
    """SessionRegistry over the stub renderer, for bulk and failure tests."""
    return SessionRegistry(renderer=stub_renderer, logger=logger)


@pytest.fixture
def metadata():
    return DocumentMetadata(
        title="Quarterly Review",
        subject="Finance",
        author="Analyst",
        company="Acme",
        revision="1",
    )


@pytest.fixture
def failing_registry(logger):
    """SessionRegistry whose renderer fails every save with 'disk full'."""
    return SessionRegistry(renderer=StubRenderer(save_failure="disk full"), logger=logger)
