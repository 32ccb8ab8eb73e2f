"""
Version 1 of the API: menu, order and loyalty endpoints.
"""
