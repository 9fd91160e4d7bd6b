"""
Application package initializer.

The project is organised into layers: ``core`` (settings, logging,
errors, results, security, database client), ``schemas`` (documents and
payloads), ``repositories`` (storage), ``services`` (business logic) and
``api`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
