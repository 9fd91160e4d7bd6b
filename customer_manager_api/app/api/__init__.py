"""
API package containing versioned routes.

``deps`` builds services for each request and ``responses`` turns their
``Result`` values into HTTP responses.  Each version subpackage (``v1``)
exposes a top-level ``router`` that includes its endpoints.
"""
