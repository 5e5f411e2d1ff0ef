# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, UploadFile, status

# Local application imports
from ...application.dto.user_dto import (
    ImageUploadResponse,
    MessageResponse,
    UserCreateRequest,
    UserDeleteRequest,
    UserEditRequest,
    UserMutationResponse,
    UserSummary,
)
from ...application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    EditUserUseCase,
    ListUsersUseCase,
    UploadUserImageUseCase,
)
from ...di.base_container import BaseContainer
from .dependencies import get_container
from .error_handlers import internal_errors_as


router = APIRouter(tags=["users"])


@router.post("/create", response_model=UserMutationResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    container: BaseContainer = Depends(get_container),
) -> UserMutationResponse:
    """
    Create a new user

    Returns 400 with a field-keyed `errors` map when validation fails and 409
    when the email is already registered.
    """
    create_use_case = container.get(CreateUserUseCase)

    with internal_errors_as("Error creating user"):
        user = await create_use_case.execute(request)

    return UserMutationResponse(message="User created successfully", user=user)


@router.put("/edit", response_model=UserMutationResponse)
async def edit_user(
    request: UserEditRequest,
    container: BaseContainer = Depends(get_container),
) -> UserMutationResponse:
    """Change full name and/or password of the user selected by email"""
    edit_use_case = container.get(EditUserUseCase)

    with internal_errors_as("Error updating user"):
        user = await edit_use_case.execute(request)

    return UserMutationResponse(message="User updated successfully", user=user)


@router.delete("/delete", response_model=MessageResponse)
async def delete_user(
    request: UserDeleteRequest,
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    delete_use_case = container.get(DeleteUserUseCase)

    with internal_errors_as("Error deleting user"):
        await delete_use_case.execute(request)

    return MessageResponse(message="User deleted successfully")


@router.get("/getAll", response_model=List[UserSummary])
async def get_all_users(
    container: BaseContainer = Depends(get_container),
) -> List[UserSummary]:
    """List all users as {fullName, email}; passwords and image paths are never included"""
    list_use_case = container.get(ListUsersUseCase)

    with internal_errors_as("Error retrieving users"):
        return await list_use_case.execute()


@router.post("/uploadImage", response_model=ImageUploadResponse)
async def upload_image(
    email: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    container: BaseContainer = Depends(get_container),
) -> ImageUploadResponse:
    """
    Upload the single profile image of a user (multipart: `email` + `image`).

    Accepts image/jpeg, image/png and image/gif up to the configured size limit.
    A user can upload only once; later attempts return 409.
    """
    upload_use_case = container.get(UploadUserImageUseCase)

    with internal_errors_as("Error uploading image"):
        file_path = await upload_use_case.execute(
            email=email,
            filename=image.filename if image else None,
            content_type=image.content_type if image else None,
            read_chunk=image.read if image else None,
            size=image.size if image else None,
        )

    return ImageUploadResponse(message="Image uploaded successfully", file_path=file_path)
