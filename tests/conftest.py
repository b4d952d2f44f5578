"""Test configuration and fixtures for image_reformat.

This module provides:
- Synthetic images generated with Pillow (no checked-in media)
- Config fixtures pointing the file sink at a temp directory
- A mock HTTP transport serving images, HTML and failures for remote sources
"""

from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import httpx
import pytest
from PIL import Image, ImageDraw

from image_reformat.common.config import ReformatConfig

REMOTE_BASE = "https://images.example.com"


# ============================================================================
# Image helpers
# ============================================================================


def encode(img: Image.Image, fmt: str = "PNG") -> bytes:
    out = BytesIO()
    img.save(out, format=fmt)
    return out.getvalue()


def make_rgb_image(width: int = 800, height: int = 600) -> Image.Image:
    """RGB image with a grid and a circle, so resampling has detail to pick from."""
    img = Image.new("RGB", (width, height), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width * 3 // 8, height // 3, width * 5 // 8, height * 2 // 3],
        fill=(200, 100, 100),
    )
    return img


# ============================================================================
# Function-Scoped Fixtures
# ============================================================================


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def config(temp_output_dir: Path) -> ReformatConfig:
    return ReformatConfig(output_dir=temp_output_dir)


@pytest.fixture
def rgb_image_path(tmp_path: Path) -> Path:
    """800x600 RGB PNG on disk."""
    path = tmp_path / "photo.png"
    make_rgb_image().save(path, "PNG")
    return path


@pytest.fixture
def jpeg_image_path(tmp_path: Path) -> Path:
    """1000x500 RGB JPEG on disk."""
    path = tmp_path / "wide.jpg"
    make_rgb_image(1000, 500).save(path, "JPEG", quality=90)
    return path


@pytest.fixture
def rgba_image_path(tmp_path: Path) -> Path:
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (100, 80), color=(255, 0, 0, 128)).save(path, "PNG")
    return path


@pytest.fixture
def text_file_path(tmp_path: Path) -> Path:
    """A file with an image extension that is not an image."""
    path = tmp_path / "fake.png"
    path.write_text("<html><body>Not found</body></html>\n")
    return path


@pytest.fixture
def png_bytes() -> bytes:
    return encode(make_rgb_image(), "PNG")


@pytest.fixture
def remote_routes(png_bytes: bytes) -> dict[str, Callable[[httpx.Request], httpx.Response]]:
    """Path -> handler table served by ``mock_client``."""

    def image(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=png_bytes, headers={"content-type": "image/png"})

    def html_page(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=b"<!DOCTYPE html><html><head><title>Oops</title></head><body>error</body></html>",
            headers={"content-type": "text/html"},
        )

    def missing(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, content=b"not found")

    def refused(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    return {
        "/photo.png": image,
        "/error.html": html_page,
        "/missing.png": missing,
        "/refused.png": refused,
        "/slow.png": slow,
    }


@pytest.fixture
def request_log() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_transport(
    remote_routes: dict[str, Callable[[httpx.Request], httpx.Response]],
    request_log: list[httpx.Request],
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        request_log.append(request)
        route = remote_routes.get(request.url.path)
        if route is None:
            return httpx.Response(404)
        return route(request)

    return httpx.MockTransport(handler)


@pytest.fixture
def mock_client(mock_transport: httpx.MockTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=mock_transport, follow_redirects=True)


@pytest.fixture
def make_image() -> Callable[..., Image.Image]:
    """Factory for the synthetic RGB test image."""
    return make_rgb_image


@pytest.fixture
def encode_image() -> Callable[..., bytes]:
    """Encode a PIL image to bytes (PNG by default)."""
    return encode
