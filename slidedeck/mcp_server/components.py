"""Component initialization for the MCP server.

Tool handlers never reach for module globals: everything they touch is built
here once per process (or once per test) and passed in explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from slidedeck.artifacts import ArtifactStore
from slidedeck.logger import Logger
from slidedeck.rendering import DeckRenderer
from slidedeck.sessions import SessionRegistry


@dataclass
class ServerComponents:
    registry: SessionRegistry
    renderer: DeckRenderer
    artifacts: ArtifactStore
    logger: Logger


def initialize_components(
    *,
    output_dir: Path,
    host: str,
    port: int,
    logger: Logger,
) -> ServerComponents:
    """Initialize all server components.

    Args:
            output_dir: Directory finished presentations are written to and served from
            host: Host advertised in download URLs
            port: Port the file server listens on
            logger: Logger
    """
    renderer = DeckRenderer(logger=logger)
    registry = SessionRegistry(renderer=renderer, logger=logger)
    artifacts = ArtifactStore(output_dir=output_dir, host=host, port=port)

    logger.info("Server components initialized", output_dir=str(output_dir), base_url=artifacts.base_url)
    return ServerComponents(
        registry=registry,
        renderer=renderer,
        artifacts=artifacts,
        logger=logger,
    )
