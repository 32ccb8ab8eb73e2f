"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (menu, orders, loyalty) has its own schema
module, service and router defined in ``api/v1/endpoints``.  The
in‑memory state shared by the services lives in ``core.state``.
"""

from .main import app, create_app  # noqa: F401
