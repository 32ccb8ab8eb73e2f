"""
Top‑level package for the Coffee Shop API.

This file makes ``coffee_shop_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``coffee_shop_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
