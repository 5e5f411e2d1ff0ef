from .create_user import CreateUserUseCase
from .edit_user import EditUserUseCase
from .delete_user import DeleteUserUseCase
from .list_users import ListUsersUseCase
from .upload_user_image import UploadUserImageUseCase

__all__ = [
    "CreateUserUseCase",
    "EditUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "UploadUserImageUseCase",
]
