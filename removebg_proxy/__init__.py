"""
Background-removal proxy package.

Accepts image uploads, forwards them to the remove.bg API and returns the
cut-out as a PNG data URI through a small FastAPI application.
"""
