"""
Unit tests for LocalImageStorage (filesystem side of image uploads).
"""
from pathlib import Path

import pytest

from user_service.domain.exceptions import ImageTooLargeError
from user_service.infrastructure.storage.local_image_storage import LocalImageStorage, safe_file_name


def _reader(data: bytes, chunk_size: int = 4):
    buffer = bytearray(data)

    async def read(size: int = -1) -> bytes:
        n = min(size, chunk_size) if size > 0 else len(buffer)
        chunk = bytes(buffer[:n])
        del buffer[:n]
        return chunk

    return read


class TestSafeFileName:

    def test_strips_directories(self):
        assert safe_file_name("../../etc/passwd") == "passwd"

    def test_replaces_unsafe_characters(self):
        assert safe_file_name("my photo (1).jpg") == "my_photo__1_.jpg"

    def test_empty_falls_back(self):
        assert safe_file_name("") == "image"


class TestLocalImageStorage:

    @pytest.mark.asyncio
    async def test_save_writes_bytes(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path / "images"), max_bytes=1024)

        path = await storage.save("face.png", _reader(b"\x89PNG-data"))

        stored = Path(path)
        assert stored.parent == tmp_path / "images"
        assert stored.name.endswith("-face.png")
        assert stored.read_bytes() == b"\x89PNG-data"

    @pytest.mark.asyncio
    async def test_same_original_name_never_collides(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path), max_bytes=1024)
        first = await storage.save("a.jpg", _reader(b"one"))
        second = await storage.save("a.jpg", _reader(b"two"))
        assert first != second
        assert Path(first).read_bytes() == b"one"

    @pytest.mark.asyncio
    async def test_oversized_stream_is_rejected_and_removed(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path), max_bytes=8)

        with pytest.raises(ImageTooLargeError):
            await storage.save("big.jpg", _reader(b"x" * 20))

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_exact_limit_is_accepted(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path), max_bytes=8)
        path = await storage.save("ok.jpg", _reader(b"x" * 8))
        assert Path(path).stat().st_size == 8

    def test_remove_missing_file_is_quiet(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path), max_bytes=8)
        storage.remove(str(tmp_path / "does-not-exist.jpg"))
