"""Static HTTP server for finished presentations.

The server runs uvicorn in a daemon thread next to the stdio MCP loop. It
never writes to stdout: uvicorn's own logging setup is disabled so its
records go through the process logging configuration on stderr, and access
logs are off.
"""

import threading
import time
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from slidedeck.exceptions import ConfigurationError
from slidedeck.logger import Logger


def create_file_app(directory: Path) -> FastAPI:
    """Build the FastAPI app serving ``directory`` at the root path."""
    app = FastAPI(title="slidedeck files", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/ping")
    async def ping():
        return {"status": "ok", "service": "slidedeck-files"}

    # Mounted last so /ping takes precedence over a file of the same name.
    app.mount("/", StaticFiles(directory=str(directory)), name="files")
    return app


class FileServer:
    """uvicorn server for the output directory, run in a background thread."""

    def __init__(self, directory: Path, host: str, port: int, logger: Logger) -> None:
        self.directory = Path(directory)
        self.host = host
        self.port = port
        self.logger = logger
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, timeout: float = 10.0) -> None:
        """
        Start serving and wait until the socket is bound.

        Raises:
            ConfigurationError: If the server did not come up within ``timeout``
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        config = uvicorn.Config(
            create_file_app(self.directory),
            host=self.host,
            port=self.port,
            log_config=None,
            access_log=False,
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run, name="slidedeck-file-server", daemon=True
        )
        self._thread.start()

        deadline = time.monotonic() + timeout
        while not self._server.started:
            if not self._thread.is_alive() or time.monotonic() > deadline:
                raise ConfigurationError(
                    code="FILE_SERVER_FAILED",
                    message=f"File server failed to start on {self.host}:{self.port}",
                    details={"host": self.host, "port": self.port},
                )
            time.sleep(0.05)

        self.logger.info(
            "File server started", host=self.host, port=self.port, directory=str(self.directory)
        )

    def stop(self, timeout: float = 5.0) -> None:
        if self._server is None or self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout)
        self.logger.info("File server stopped", host=self.host, port=self.port)
        self._server = None
        self._thread = None
