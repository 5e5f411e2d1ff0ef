from .local_image_storage import LocalImageStorage, safe_file_name

__all__ = ["LocalImageStorage", "safe_file_name"]
