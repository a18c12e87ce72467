"""Response Envelope — uniform {message, body, options} JSON responses.

Invariants:
    - Status code defaults to 200
    - options key present only when the handler supplies it
    - Pydantic bodies dumped in JSON mode with camelCase aliases
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def _serialize(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    if isinstance(body, (list, tuple)):
        return [_serialize(item) for item in body]
    return jsonable_encoder(body)


def endpoint_response(
    message: str,
    body: Any = None,
    code: int = 200,
    options: dict | None = None,
) -> JSONResponse:
    """Build the envelope response for a route handler."""
    content: dict[str, Any] = {"message": message, "body": _serialize(body)}
    if options is not None:
        content["options"] = options
    return JSONResponse(status_code=code, content=content)
