"""
Projection of service ``Result`` values onto HTTP responses.

The status code is used as-is.  Failures (4xx/5xx) are raised as
``HTTPException`` with the error message as ``detail``; ``204`` responses
carry no body; other successes serialise the value as JSON.
"""

from http import HTTPStatus
from typing import Any, Callable, Optional

from fastapi import HTTPException, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..core.result import Result


def to_response(result: Result[Any], transform: Optional[Callable[[Any], Any]] = None) -> Response:
    """Turn ``result`` into a response, applying ``transform`` to its value."""
    status_code = int(result.status_code)
    if status_code >= HTTPStatus.BAD_REQUEST:
        detail = result.error.message if result.error is not None else result.status_code.phrase
        raise HTTPException(status_code=status_code, detail=detail)
    if result.status_code == HTTPStatus.NO_CONTENT:
        return Response(status_code=status_code)

    value = result.value
    if transform is not None and value is not None:
        value = transform(value)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(value))
