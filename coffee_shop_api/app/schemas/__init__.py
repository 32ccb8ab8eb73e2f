"""
Pydantic schema definitions for API payloads.

Each domain (menu, orders, loyalty) defines its own models for request
and response bodies.  Field names are snake_case in Python and
camelCase on the wire (``loyaltyNumber``, ``totalPrice``), which the
models express through aliases.
"""
