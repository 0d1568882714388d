# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, VerifyAccountRequest
from ...application.dto.user_dto import UserUpdateRequest
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.verify_user_account import VerifyUserAccountUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.container import get_container
from .dependencies import read_upload, registration_form, update_form
from .responses import success_response


router = APIRouter(tags=["users"])


@router.get("/")
async def list_users(
    search: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
) -> JSONResponse:
    """
    List non-admin users matching a search term, page by page

    Args:
        search: Free-text term matched against name, email and phone
        page: 1-based page number (default 1)
        limit: Page size (default 5)

    Returns:
        Envelope with users and pagination links
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)

    result = await list_users_use_case.execute(search=search, page=page, limit=limit)
    return success_response(
        status.HTTP_200_OK,
        "Users were returned successfully",
        result,
    )


@router.post("/process-register")
async def process_register(
    registration: UserRegistrationRequest = Depends(registration_form),
    image: Optional[UploadFile] = File(None),
) -> JSONResponse:
    """
    Submit a registration and email an activation link

    No user is created until the link's token is verified.
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    uploaded_image = await read_upload(image)
    result = await register_use_case.execute(registration, uploaded_image)
    return success_response(
        status.HTTP_200_OK,
        result.message,
        {"name": result.name},
    )


@router.post("/verify")
async def verify_user_account(request: Optional[VerifyAccountRequest] = None) -> JSONResponse:
    """
    Redeem an activation token and create the user

    Args:
        request: Body with the activation token

    Returns:
        Envelope with the created user (201)
    """
    container = get_container()
    verify_use_case = container.get(VerifyUserAccountUseCase)

    user = await verify_use_case.execute(request.token if request else None)
    return success_response(
        status.HTTP_201_CREATED,
        "User registered successfully",
        {"user": user},
    )


@router.get("/{user_id}")
async def get_user(user_id: str) -> JSONResponse:
    """
    Get a user by ID

    Args:
        user_id: ID of the user

    Returns:
        Envelope with the user (password omitted)
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)

    user = await get_user_use_case.execute(user_id)
    return success_response(
        status.HTTP_200_OK,
        "User was returned successfully",
        {"user": user},
    )


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    updates: UserUpdateRequest = Depends(update_form),
    image: Optional[UploadFile] = File(None),
) -> JSONResponse:
    """
    Update a user's name, password, phone, address and/or image

    Returns:
        Envelope with the updated user (password and image omitted)
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)

    uploaded_image = await read_upload(image)
    updated_user = await update_user_use_case.execute(
        user_id,
        updates.model_dump(exclude_none=True),
        uploaded_image,
    )
    return success_response(
        status.HTTP_200_OK,
        "User was updated successfully",
        {"updatedUser": updated_user.model_dump(by_alias=True, exclude={"image"})},
    )


@router.delete("/{user_id}")
async def delete_user(user_id: str) -> JSONResponse:
    """
    Delete a user and, best-effort, their stored image
    """
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)

    await delete_user_use_case.execute(user_id)
    return success_response(
        status.HTTP_200_OK,
        "User was deleted successfully",
    )
