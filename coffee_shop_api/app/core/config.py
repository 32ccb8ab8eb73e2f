"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration at all.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Coffee Shop API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the routers are mounted.  Empty by default so the
    # routes are served at ``/menu``, ``/order`` and ``/loyalty`` as the
    # existing clients expect.  Set to e.g. ``/api/v1`` to version them.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Seed the ledgers with the bundled mock data when the application is
    # created without an explicit initial state.
    load_mock_data: bool = _env_flag("LOAD_MOCK_DATA", "true")

    # Credit the order total to the customer's loyalty account when an
    # order is placed.  Older deployments did this; it is off by default.
    loyalty_accrual: bool = _env_flag("LOYALTY_ACCRUAL", "false")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
