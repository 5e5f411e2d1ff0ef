from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.storage.local_image_storage import LocalImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """Registers the local image storage configured from settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)
        container.register_singleton(
            LocalImageStorage,
            LocalImageStorage(
                upload_dir=settings.image_upload_dir,
                max_bytes=settings.image_upload_max_bytes,
            )
        )
