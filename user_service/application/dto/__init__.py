from .user_dto import (
    ImageUploadResponse,
    MessageResponse,
    UserCreateRequest,
    UserDeleteRequest,
    UserEditRequest,
    UserMutationResponse,
    UserReference,
    UserSummary,
)

__all__ = [
    "ImageUploadResponse",
    "MessageResponse",
    "UserCreateRequest",
    "UserDeleteRequest",
    "UserEditRequest",
    "UserMutationResponse",
    "UserReference",
    "UserSummary",
]
