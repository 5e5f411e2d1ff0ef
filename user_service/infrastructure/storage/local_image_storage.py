"""
Local-disk storage for profile images.

Files land in one flat upload directory. Each name starts with a random UUID so
two uploads never collide, whatever their timing or original filename.
"""

# Standard library imports
import logging
import uuid
from pathlib import Path
from typing import Awaitable, Callable

# Local application imports
from ...domain.constants import UPLOAD_CHUNK_SIZE
from ...domain.exceptions import ImageTooLargeError, StorageError

logger = logging.getLogger(__name__)

ChunkReader = Callable[[int], Awaitable[bytes]]


def safe_file_name(name: str) -> str:
    """Return a filesystem-safe name: alphanumerics, dots, hyphens and underscores only."""
    base = Path(name or "").name
    s = "".join(c if c.isalnum() or c in ".-_" else "_" for c in base.strip())
    return s.strip("._")[:100] or "image"


class LocalImageStorage:
    """Writes uploaded images to a configured directory with a size cap"""

    def __init__(self, upload_dir: str, max_bytes: int) -> None:
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def ensure_directory(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    def build_file_name(self, original_name: str) -> str:
        return f"{uuid.uuid4().hex}-{safe_file_name(original_name)}"

    async def save(self, original_name: str, read_chunk: ChunkReader) -> str:
        """
        Stream an upload to disk

        Args:
            original_name: Client-supplied filename, kept (sanitised) as a suffix
            read_chunk: Async callable returning up to n bytes, b"" at end of stream

        Returns:
            Path of the stored file

        Raises:
            ImageTooLargeError: If the stream exceeds max_bytes (partial file is removed)
            StorageError: If the file cannot be written
        """
        final_path = self.ensure_directory() / self.build_file_name(original_name)

        size = 0
        try:
            with open(final_path, "wb") as f:
                while True:
                    chunk = await read_chunk(UPLOAD_CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise ImageTooLargeError(
                            f"File too large. Max {self.max_bytes // (1024 * 1024)} MB."
                        )
                    f.write(chunk)
        except ImageTooLargeError:
            final_path.unlink(missing_ok=True)
            raise
        except OSError as e:
            final_path.unlink(missing_ok=True)
            raise StorageError(f"Error writing image: {str(e)}")

        logger.debug("Stored image %s (%d bytes)", final_path, size)
        return str(final_path)

    def remove(self, path: str) -> None:
        """Delete a stored file; failures are logged, not raised."""
        try:
            Path(path).unlink(missing_ok=True)
        except OSError:
            logger.exception("Could not remove image file %s", path)
