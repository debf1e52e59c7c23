"""Tests for the featured-image asset stores."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from blogcms.configs import settings
from blogcms.services.storage import CloudinaryStorage, LocalStorage, get_asset_store


class TestLocalStorage:
    """Tests for LocalStorage."""

    @pytest.fixture
    def storage(self, tmp_path: Path) -> LocalStorage:
        return LocalStorage(
            uploads_dir=tmp_path,
            folder="blog",
            base_url="/uploads/",
            public_base_url="https://api.example.com/",
        )

    @pytest.mark.asyncio
    async def test_writes_file_and_returns_url(
        self,
        storage: LocalStorage,
        tmp_path: Path,
        valid_png_bytes: bytes,
    ) -> None:
        url = await storage.upload("post-12345678901.png", valid_png_bytes, "image/png")

        assert url == "https://api.example.com/uploads/blog/post-12345678901.png"
        assert (tmp_path / "blog" / "post-12345678901.png").read_bytes() == valid_png_bytes

    @pytest.mark.asyncio
    async def test_same_key_replaces_file(self, storage: LocalStorage, tmp_path: Path) -> None:
        await storage.upload("post-abc.png", b"first", "image/png")
        await storage.upload("post-abc.png", b"second", "image/png")

        assert (tmp_path / "blog" / "post-abc.png").read_bytes() == b"second"

    @pytest.mark.asyncio
    async def test_key_cannot_escape_folder(self, storage: LocalStorage, tmp_path: Path) -> None:
        url = await storage.upload("../../evil.png", b"data", "image/png")

        assert url == "https://api.example.com/uploads/blog/evil.png"
        assert (tmp_path / "blog" / "evil.png").exists()

    @pytest.mark.asyncio
    async def test_url_uses_configured_origin(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "PUBLIC_BASE_URL", "https://blog.example.org")
        monkeypatch.setattr(settings, "UPLOADS_BASE_URL", "/uploads")

        url = await LocalStorage(uploads_dir=tmp_path, folder="blog").upload("cover.png", b"data", "image/png")

        assert url == "https://blog.example.org/uploads/blog/cover.png"


class TestCloudinaryStorage:
    """Tests for CloudinaryStorage with the SDK patched out."""

    @pytest.fixture
    def storage(self) -> CloudinaryStorage:
        with patch("blogcms.services.storage.cloudinary_storage.config"):
            return CloudinaryStorage(folder="blog")

    @patch("blogcms.services.storage.cloudinary_storage.upload")
    @patch("blogcms.services.storage.cloudinary_storage.get_event_loop")
    @pytest.mark.asyncio
    async def test_upload(
        self,
        mock_get_loop: MagicMock,
        mock_upload: MagicMock,
        storage: CloudinaryStorage,
    ) -> None:
        # Run the executor callable inline
        mock_loop = MagicMock()
        mock_get_loop.return_value = mock_loop

        async def mock_run(executor: object, func: Callable[[], object]) -> object:
            return func()

        mock_loop.run_in_executor = mock_run
        mock_upload.return_value = {"secure_url": "https://res.cloudinary.com/demo/blog/post-1.jpg"}

        url = await storage.upload("post-1.jpeg", b"fake data", "image/jpeg")

        assert url == "https://res.cloudinary.com/demo/blog/post-1.jpg"
        args, kwargs = mock_upload.call_args
        assert args == (b"fake data",)
        assert kwargs["public_id"] == "blog/post-1"
        assert kwargs["overwrite"] is True
        assert kwargs["transformation"] == [{"quality": "auto:good"}, {"fetch_format": "auto"}]

    @patch("blogcms.services.storage.cloudinary_storage.upload")
    @patch("blogcms.services.storage.cloudinary_storage.get_event_loop")
    @pytest.mark.asyncio
    async def test_upload_error_propagates(
        self,
        mock_get_loop: MagicMock,
        mock_upload: MagicMock,
        storage: CloudinaryStorage,
    ) -> None:
        mock_loop = MagicMock()
        mock_get_loop.return_value = mock_loop

        async def mock_run(executor: object, func: Callable[[], object]) -> object:
            return func()

        mock_loop.run_in_executor = mock_run
        mock_upload.side_effect = RuntimeError("Invalid image file")

        with pytest.raises(RuntimeError, match="Invalid image file"):
            await storage.upload("post-1.png", b"junk", "image/png")


class TestGetAssetStore:
    """Tests for provider selection."""

    def test_local_by_default(self) -> None:
        assert isinstance(get_asset_store(), LocalStorage)

    def test_cloudinary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "STORAGE_PROVIDER", "cloudinary")

        with patch("blogcms.services.storage.cloudinary_storage.config"):
            assert isinstance(get_asset_store(), CloudinaryStorage)
