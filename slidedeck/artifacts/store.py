"""Naming and addressing of finished presentation files."""

from pathlib import Path
from urllib.parse import quote

from pathvalidate import sanitize_filename

from slidedeck.sessions.models import DocumentHandle

FALLBACK_STEM = "presentation"
EXTENSION = ".pptx"
# Most filesystems cap a name at 255 bytes
MAX_FILENAME_BYTES = 255


class ArtifactStore:
    """Output directory plus the base URL it is served under.

    File names embed the document id, so two documents never share a file
    even when their titles are identical.
    """

    def __init__(self, output_dir: Path, host: str, port: int) -> None:
        self.output_dir = Path(output_dir)
        self.host = host
        self.port = port
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def filename_for(self, document: DocumentHandle) -> str:
        suffix = f"-{document.document_id}{EXTENSION}"
        max_len = MAX_FILENAME_BYTES - len(suffix.encode("utf-8"))
        stem = sanitize_filename(document.title, max_len=max_len).strip() or FALLBACK_STEM
        return f"{stem}{suffix}"

    def path_for(self, filename: str) -> Path:
        return self.output_dir / filename

    def url_for(self, filename: str) -> str:
        return f"{self.base_url}/{quote(filename)}"
