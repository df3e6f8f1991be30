import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from slidedeck.artifacts import FileServer, find_free_port
from slidedeck.config import Config
from slidedeck.config_docs import VALID_LOG_LEVELS, get_config_summary, validate_configuration
from slidedeck.exceptions import ConfigurationError, PortUnavailableError
from slidedeck.logger import ConsoleLogger, Logger, session_logger

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="slidedeck MCP Server - PowerPoint presentations via Model Context Protocol (stdio)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host for the download file server (default: localhost, or SLIDEDECK_HOST env var)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory presentations are written to and served from "
        "(default: <temp>/slidedeck-mcp, or SLIDEDECK_OUTPUT_DIR env var)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging verbosity (default: INFO, or SLIDEDECK_LOG_LEVEL env var)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    # Command line wins over the environment
    if args.host:
        Config.set_host(args.host)
    if args.output_dir:
        Config.set_output_dir(Path(args.output_dir))
    if args.log_level:
        Config.set_log_level(args.log_level)

    # stdout is the MCP channel: third-party loggers go to stderr as well
    logging.basicConfig(stream=sys.stderr, level=Config.get_log_level_value())
    startup_logger: ConsoleLogger = session_logger
    startup_logger.set_level(Config.get_log_level_value())

    is_valid, errors = validate_configuration()
    if not is_valid:
        for error in errors:
            startup_logger.error("FATAL: Invalid configuration", error=error)
        sys.exit(1)
    startup_logger.info("Configuration loaded", **get_config_summary())

    host = Config.get_host()
    output_dir = Config.get_output_dir()
    try:
        port = find_free_port(host, Config.get_port_base(), Config.get_port_max())
        file_server = FileServer(directory=output_dir, host=host, port=port, logger=startup_logger)
        file_server.start()
    except PortUnavailableError as e:
        startup_logger.error("FATAL: No port available for file server", error=str(e), **e.details)
        sys.exit(1)
    except ConfigurationError as e:
        startup_logger.error("FATAL: File server did not start", error=str(e), **e.details)
        sys.exit(1)

    from slidedeck.mcp_server import initialize_components, run_stdio

    components = initialize_components(
        output_dir=output_dir, host=host, port=port, logger=startup_logger
    )

    try:
        startup_logger.info("Starting MCP server", transport="stdio", file_server_port=port)
        asyncio.run(run_stdio(components))
        startup_logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        startup_logger.info("Shutdown complete")
        sys.exit(0)
    except Exception as e:
        startup_logger.error("Failed to run server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)
    finally:
        file_server.stop()


if __name__ == "__main__":
    main()
