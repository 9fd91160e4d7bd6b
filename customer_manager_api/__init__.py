"""
Top-level package for the Customer Manager API.

All functionality lives in submodules under ``app``: services returning
``Result`` values, MongoDB repositories, and the FastAPI application
that exposes them.
"""

__all__ = []
