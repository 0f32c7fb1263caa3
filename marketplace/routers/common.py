"""Helpers shared by the JSON routers."""

from __future__ import annotations

import json

from fastapi import Request
from fastapi.responses import JSONResponse


class InvalidBodyError(Exception):
    def __init__(self, message: str = "Invalid JSON body"):
        super().__init__(message)
        self.message = message
        self.status_code = 400


def get_state_service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if svc is None:
        raise RuntimeError(f"{name} is not configured")
    return svc


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _reject_constant(token: str):
    # NaN and Infinity cannot be rendered back by JSONResponse
    raise InvalidBodyError()


async def json_body(request: Request) -> dict:
    """Request body as a dict; an empty body counts as ``{}``."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise InvalidBodyError()
    if not isinstance(data, dict):
        raise InvalidBodyError()
    return data
