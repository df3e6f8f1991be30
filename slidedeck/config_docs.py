"""Centralized configuration documentation and defaults for the slidedeck service.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Output
# ------
# SLIDEDECK_OUTPUT_DIR: Directory finished presentations are written to and
#   served from (default: <system temp>/slidedeck-mcp). Created if absent,
#   never cleaned up by the service.
#
# File server
# -----------
# SLIDEDECK_HOST: Host the file server binds to and advertises in download
#   URLs (default: localhost)
# SLIDEDECK_PORT_BASE: First port probed for the file server (default: 8000)
# SLIDEDECK_PORT_MAX: Last port probed for the file server (default: 65535)
#
# Development & Testing
# ---------------------
# SLIDEDECK_TEST_MODE: Set by the test framework via Config.set_test_mode
# SLIDEDECK_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_OUTPUT_DIRNAME = "slidedeck-mcp"
DEFAULT_HOST = "localhost"
DEFAULT_PORT_BASE = 8000
DEFAULT_PORT_MAX = 65535
DEFAULT_LOG_LEVEL = "INFO"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Returns:
        Dictionary with current configuration values
    """
    from slidedeck.config import Config

    return {
        "output_dir": str(Config.get_output_dir()),
        "host": Config.get_host(),
        "port_base": Config.get_port_base(),
        "port_max": Config.get_port_max(),
        "log_level": Config.get_log_level(),
        "test_mode": Config.is_test_mode(),
    }


def validate_configuration() -> tuple[bool, list[str]]:
    """Validate current configuration for completeness and consistency.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    import os

    from slidedeck.config import Config

    errors = []

    output_dir = Config.get_output_dir()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        if not os.access(output_dir, os.W_OK):
            errors.append(f"Output directory not writable: {output_dir}")
    except OSError as e:
        errors.append(f"Cannot create output directory {output_dir}: {e}")

    for port_var, default in [
        ("SLIDEDECK_PORT_BASE", DEFAULT_PORT_BASE),
        ("SLIDEDECK_PORT_MAX", DEFAULT_PORT_MAX),
    ]:
        port_str = os.getenv(port_var, str(default))
        try:
            port = int(port_str)
            if not (1 <= port <= 65535):
                errors.append(f"{port_var}={port} out of valid range (1-65535)")
        except ValueError:
            errors.append(f"{port_var}='{port_str}' is not a valid integer")

    if not errors and Config.get_port_base() > Config.get_port_max():
        errors.append("SLIDEDECK_PORT_BASE must not be greater than SLIDEDECK_PORT_MAX")

    level = os.getenv("SLIDEDECK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in VALID_LOG_LEVELS:
        errors.append(f"SLIDEDECK_LOG_LEVEL='{level}' is not one of {', '.join(VALID_LOG_LEVELS)}")

    return len(errors) == 0, errors
