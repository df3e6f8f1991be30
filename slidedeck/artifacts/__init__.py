"""Exposure of finished presentations: port discovery, file naming, HTTP serving."""
from slidedeck.artifacts.file_server import FileServer, create_file_app
from slidedeck.artifacts.ports import find_free_port, is_port_free
from slidedeck.artifacts.store import ArtifactStore

__all__ = ["ArtifactStore", "FileServer", "create_file_app", "find_free_port", "is_port_free"]
