"""
Cross‑cutting pieces: settings, logging, errors, validation and the
in‑memory application state.
"""
