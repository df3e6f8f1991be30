"""Session registry package."""
from slidedeck.sessions.manager import DocumentMetadata, SessionRegistry
from slidedeck.sessions.models import DocumentHandle, SlideHandle

__all__ = ["DocumentHandle", "DocumentMetadata", "SessionRegistry", "SlideHandle"]
