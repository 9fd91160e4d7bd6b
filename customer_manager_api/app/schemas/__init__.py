"""
Pydantic schema definitions for documents and API payloads.

Each domain (customers, users, authentication) defines its own models.
Stored documents share the ``Document`` base, which only adds the
string identifier assigned by the store.
"""
