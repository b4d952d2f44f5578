"""Tests for local and remote image acquisition."""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
from PIL import Image

from image_reformat.algo.acquirer import acquire, decode_bytes, fetch_bytes, read_local_bytes
from image_reformat.common.config import ReformatConfig
from image_reformat.common.errors import DecodeFailure, ErrorKind, SourceUnreachable
from image_reformat.common.schemas import LocalPath, RemoteUrl
from image_reformat.utils.media_types import ColorModel

REMOTE_BASE = "https://images.example.com"

# ============================================================================
# Decode
# ============================================================================


class TestDecodeBytes:
    def test_png(self, png_bytes: bytes) -> None:
        img = decode_bytes(png_bytes, "memory")

        assert img.size == (800, 600)
        assert img.color_model == ColorModel.RGB8
        assert img.source == "memory"

    @pytest.mark.parametrize("fmt", ["JPEG", "GIF", "BMP", "TIFF", "WEBP"])
    def test_other_formats(
        self,
        fmt: str,
        make_image: Callable[..., Image.Image],
        encode_image: Callable[..., bytes],
    ) -> None:
        img = decode_bytes(encode_image(make_image(64, 32), fmt))

        assert img.size == (64, 32)

    def test_html_is_decode_failure(self) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            _ = decode_bytes(b"<!DOCTYPE html><html><body>500</body></html>", "page")

        assert exc_info.value.kind == ErrorKind.DECODE_FAILURE

    def test_empty_is_decode_failure(self) -> None:
        with pytest.raises(DecodeFailure):
            _ = decode_bytes(b"")

    def test_truncated_image_is_decode_failure(self, png_bytes: bytes) -> None:
        with pytest.raises(DecodeFailure):
            _ = decode_bytes(png_bytes[: len(png_bytes) // 2], "truncated")

    def test_grayscale_16bit(self, encode_image: Callable[..., bytes]) -> None:
        img = decode_bytes(encode_image(Image.new("I;16", (20, 10), color=40000)))

        assert img.color_model == ColorModel.L16


# ============================================================================
# Local
# ============================================================================


class TestLocal:
    @pytest.mark.asyncio
    async def test_read_local_bytes(self, rgb_image_path: Path) -> None:
        data = await read_local_bytes(rgb_image_path)
        assert data == rgb_image_path.read_bytes()

    @pytest.mark.asyncio
    async def test_acquire_local(self, rgb_image_path: Path) -> None:
        img = await acquire(LocalPath(path=rgb_image_path))

        assert img.size == (800, 600)
        assert img.source == str(rgb_image_path)

    @pytest.mark.asyncio
    async def test_format_sniffed_from_content_not_extension(self, jpeg_image_path: Path, tmp_path: Path) -> None:
        misnamed = tmp_path / "really_a_jpeg.png"
        _ = misnamed.write_bytes(jpeg_image_path.read_bytes())

        img = await acquire(LocalPath(path=misnamed))

        assert img.size == (1000, 500)

    @pytest.mark.asyncio
    async def test_non_image_file(self, text_file_path: Path) -> None:
        with pytest.raises(DecodeFailure):
            _ = await acquire(LocalPath(path=text_file_path))

    @pytest.mark.asyncio
    async def test_file_deleted_after_validation(self, rgb_image_path: Path) -> None:
        locator = LocalPath(path=rgb_image_path)
        rgb_image_path.unlink()

        with pytest.raises(SourceUnreachable) as exc_info:
            _ = await acquire(locator)

        assert exc_info.value.kind == ErrorKind.SOURCE_UNREACHABLE


# ============================================================================
# Remote
# ============================================================================


class TestRemote:
    @pytest.mark.asyncio
    async def test_fetch_bytes(self, mock_client: httpx.AsyncClient, png_bytes: bytes) -> None:
        data = await fetch_bytes(f"{REMOTE_BASE}/photo.png", client=mock_client)
        assert data == png_bytes

    @pytest.mark.asyncio
    async def test_acquire_remote(
        self, mock_client: httpx.AsyncClient, request_log: list[httpx.Request]
    ) -> None:
        img = await acquire(
            RemoteUrl(url=f"{REMOTE_BASE}/photo.png"),
            config=ReformatConfig(user_agent="tests/1.0"),
            client=mock_client,
        )

        assert img.size == (800, 600)
        assert request_log[0].headers["user-agent"] == "tests/1.0"

    @pytest.mark.asyncio
    async def test_connection_refused_is_unreachable(
        self, mock_client: httpx.AsyncClient, request_log: list[httpx.Request]
    ) -> None:
        with pytest.raises(SourceUnreachable) as exc_info:
            _ = await acquire(RemoteUrl(url=f"{REMOTE_BASE}/refused.png"), client=mock_client)

        assert not isinstance(exc_info.value, DecodeFailure)
        assert "ConnectError" in exc_info.value.reason
        # single attempt, no retry
        assert len(request_log) == 1

    @pytest.mark.asyncio
    async def test_timeout_is_unreachable(self, mock_client: httpx.AsyncClient) -> None:
        with pytest.raises(SourceUnreachable):
            _ = await acquire(RemoteUrl(url=f"{REMOTE_BASE}/slow.png"), client=mock_client)

    @pytest.mark.asyncio
    async def test_http_error_status_is_unreachable(self, mock_client: httpx.AsyncClient) -> None:
        with pytest.raises(SourceUnreachable, match="HTTP 404"):
            _ = await acquire(RemoteUrl(url=f"{REMOTE_BASE}/missing.png"), client=mock_client)

    @pytest.mark.asyncio
    async def test_html_page_is_decode_failure(self, mock_client: httpx.AsyncClient) -> None:
        with pytest.raises(DecodeFailure):
            _ = await acquire(RemoteUrl(url=f"{REMOTE_BASE}/error.html"), client=mock_client)
