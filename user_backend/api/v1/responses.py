# Standard library imports
from typing import Any, Optional

# External package imports
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(status_code: int, message: str, payload: Optional[Any] = None) -> JSONResponse:
    """
    Build the ``{statusCode, message, payload}`` envelope used by every route

    Args:
        status_code: HTTP status code of the response
        message: Human readable summary
        payload: Optional response data; pydantic models are dumped by alias

    Returns:
        JSONResponse with the envelope
    """
    content = {"statusCode": status_code, "message": message}
    if payload is not None:
        content["payload"] = jsonable_encoder(payload, by_alias=True)
    return JSONResponse(status_code=status_code, content=content)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{statusCode, message}`` error envelope"""
    return JSONResponse(
        status_code=status_code,
        content={"statusCode": status_code, "message": message},
    )
