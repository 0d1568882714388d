# Standard library imports
from typing import Optional

# External package imports
from fastapi import Form, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest
from ...application.dto.user_dto import UserUpdateRequest
from ...domain.models.user import UploadedImage


def registration_form(
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    password: str = Form(""),
    address: str = Form(""),
) -> UserRegistrationRequest:
    """
    FastAPI dependency that validates multipart registration fields

    Raises:
        RequestValidationError: If any field fails validation (rendered as 422)
    """
    try:
        return UserRegistrationRequest(
            name=name,
            email=email,
            phone=phone,
            password=password,
            address=address,
        )
    except ValidationError as exception:
        raise RequestValidationError(exception.errors())


def update_form(
    name: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
) -> UserUpdateRequest:
    """
    FastAPI dependency for partial profile updates.

    Only whitelisted fields are declared; anything else in the form
    (email, isAdmin, ...) never reaches the use case.
    """
    try:
        return UserUpdateRequest(
            name=name,
            password=password,
            phone=phone,
            address=address,
        )
    except ValidationError as exception:
        raise RequestValidationError(exception.errors())


async def read_upload(upload: Optional[UploadFile]) -> Optional[UploadedImage]:
    """Read an optional multipart file into an UploadedImage (None if absent)"""
    if upload is None or not upload.filename:
        return None

    contents = await upload.read()
    return UploadedImage(
        filename=upload.filename,
        content_type=(upload.content_type or "").strip().lower(),
        content=contents,
    )
