from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """DTO for user creation request

    Fields are optional here; format rules are applied by the validator so that
    every failing field is reported together.
    """
    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(default=None, alias="fullName")
    email: Optional[str] = None
    password: Optional[str] = None


class UserEditRequest(BaseModel):
    """DTO for user edit request (email selects the user)"""
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullName")
    password: Optional[str] = None


class UserDeleteRequest(BaseModel):
    """DTO for user delete request"""
    email: Optional[str] = None


class UserReference(BaseModel):
    """DTO identifying a stored user (no password)"""
    id: str
    email: str


class UserSummary(BaseModel):
    """DTO for listing entries: name and email only"""
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(alias="fullName")
    email: str


class MessageResponse(BaseModel):
    message: str


class UserMutationResponse(MessageResponse):
    """DTO returned by create and edit"""
    user: UserReference


class ImageUploadResponse(MessageResponse):
    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(alias="filePath")
