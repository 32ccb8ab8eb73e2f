"""
Service layer abstraction.

Each service encapsulates business logic for a domain and owns the
in‑memory data for it.  The services for one application instance are
grouped in ``core.state.ShopState``; API handlers never touch the
underlying dictionaries directly.
"""
