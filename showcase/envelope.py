# showcase/envelope.py
"""Uniform response shapes shared by every API endpoint.

Success: ``{"ok": true, "data": ..., ["meta": {...}], ["message": "..."]}``
Failure: ``{"ok": false, "error": "<code>", ["need": [...]]}``
"""

from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse

NOT_FOUND = "not_found"
MISSING_FIELDS = "missing_fields"


def success(
    data: Any,
    meta: Optional[Dict[str, Any]] = None,
    message: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"ok": True}
    if message is not None:
        body["message"] = message
    if meta is not None:
        body["meta"] = meta
    body["data"] = data
    body.update(extra)
    return body


def failure(error: str, status_code: int, need: Optional[List[str]] = None) -> JSONResponse:
    body: Dict[str, Any] = {"ok": False, "error": error}
    if need is not None:
        body["need"] = list(need)
    return JSONResponse(status_code=status_code, content=body)
