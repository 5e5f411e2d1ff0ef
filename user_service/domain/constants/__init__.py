"""Constants for domain model field names"""

from .user_fields import UserFields
from .media_constants import (
    ALLOWED_IMAGE_MIME,
    EMAIL_FORM_FIELD,
    IMAGE_FORM_FIELD,
    UPLOAD_CHUNK_SIZE,
)

__all__ = [
    "UserFields",
    "ALLOWED_IMAGE_MIME",
    "EMAIL_FORM_FIELD",
    "IMAGE_FORM_FIELD",
    "UPLOAD_CHUNK_SIZE",
]
