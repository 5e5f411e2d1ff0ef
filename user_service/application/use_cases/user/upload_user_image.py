# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.constants import ALLOWED_IMAGE_MIME, EMAIL_FORM_FIELD, IMAGE_FORM_FIELD
from ....domain.exceptions import (
    ImageAlreadyUploadedError,
    ImageTooLargeError,
    InputValidationError,
    UnsupportedImageFormatError,
    UserNotFoundError,
)
from ....domain.repositories.user_repository import UserRepository
from ....infrastructure.storage.local_image_storage import ChunkReader, LocalImageStorage

logger = logging.getLogger(__name__)


class UploadUserImageUseCase:
    """Use case for attaching a single profile image to a user"""

    def __init__(self, user_repository: UserRepository, image_storage: LocalImageStorage) -> None:
        self.user_repository = user_repository
        self.image_storage = image_storage

    async def execute(
        self,
        email: Optional[str],
        filename: Optional[str],
        content_type: Optional[str],
        read_chunk: Optional[ChunkReader],
        size: Optional[int] = None,
    ) -> str:
        """
        Store an image for the user and record its path

        The file filter (type, declared size) runs before any database access.
        The path is written with a conditional update, so a concurrent upload
        that already set imagePath wins and this call's file is removed.

        Args:
            email: Email of the user the image belongs to
            filename: Client-supplied original filename
            content_type: Client-declared MIME type
            read_chunk: Async reader over the file body
            size: Declared size in bytes, if known

        Returns:
            Path of the stored image

        Raises:
            UnsupportedImageFormatError: If the MIME type is not jpeg, png or gif
            ImageTooLargeError: If the file exceeds the size limit
            InputValidationError: If the email or file is missing
            UserNotFoundError: If no user has this email
            ImageAlreadyUploadedError: If the user already has an image
        """
        if read_chunk is None:
            raise InputValidationError({IMAGE_FORM_FIELD: "Image file is required"})

        normalized_type = (content_type or "").split(";")[0].strip().lower()
        if normalized_type not in ALLOWED_IMAGE_MIME:
            logger.warning("Rejected upload with content type %r", content_type)
            raise UnsupportedImageFormatError()

        if size is not None and size > self.image_storage.max_bytes:
            raise ImageTooLargeError(
                f"File too large. Max {self.image_storage.max_bytes // (1024 * 1024)} MB."
            )

        if not email:
            raise InputValidationError({EMAIL_FORM_FIELD: "Email is required"})

        user = await self.user_repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError()
        if user.has_image:
            raise ImageAlreadyUploadedError()

        file_path = await self.image_storage.save(filename or "", read_chunk)

        try:
            updated = await self.user_repository.set_image_path(email, file_path)
        except Exception:
            self.image_storage.remove(file_path)
            raise

        if not updated:
            # Another upload set imagePath (or the user was deleted) in the meantime
            self.image_storage.remove(file_path)
            if await self.user_repository.find_by_email(email) is None:
                raise UserNotFoundError()
            raise ImageAlreadyUploadedError()

        logger.info("Stored image for %s at %s", email, file_path)
        return file_path
