"""Acquire a decoded image from a local file or a remote URL.

Both variants end in the same place: the raw bytes are held fully in memory,
the encoding is sniffed from the content and the image is decoded in one go.
A buffer is only returned when decoding completed.
"""

from io import BytesIO
from pathlib import Path

import aiofiles
import httpx
from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..common.config import ReformatConfig
from ..common.errors import DecodeFailure, SourceUnreachable
from ..common.schemas import ImageBuffer, LocalPath, RemoteUrl, SourceLocator
from ..utils.media_types import MediaType, determine_mime
from ..utils.profiling import timed_stage


async def read_local_bytes(path: Path) -> bytes:
    """Read a whole local file.

    Raises:
        SourceUnreachable: If the file cannot be opened or read.
    """
    try:
        async with aiofiles.open(path, "rb") as f:
            return await f.read()
    except OSError as exc:
        logger.error(f"Failed to read {path}: {exc}")
        raise SourceUnreachable(str(path), exc.strerror or str(exc)) from exc


async def fetch_bytes(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    user_agent: str | None = None,
) -> bytes:
    """GET ``url`` once and return the full response body.

    No retry is attempted. A caller-supplied ``client`` is used as is and is
    not closed here.

    Raises:
        SourceUnreachable: On transport failure or a non-success status.
    """
    headers = {"User-Agent": user_agent} if user_agent else None
    logger.info(f"Fetching {url}")

    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as own_client:
                response = await own_client.get(url, headers=headers)
        else:
            response = await client.get(url, headers=headers)
    except httpx.HTTPError as exc:
        logger.error(f"Failed to fetch {url}: {exc!r}")
        raise SourceUnreachable(url, f"{type(exc).__name__}: {exc}") from exc

    if not response.is_success:
        logger.error(f"Fetching {url} returned HTTP {response.status_code}")
        raise SourceUnreachable(url, f"HTTP {response.status_code} {response.reason_phrase}")

    return response.content


def decode_bytes(data: bytes, source: str = "") -> ImageBuffer:
    """Sniff and fully decode an encoded image held in memory.

    Raises:
        DecodeFailure: If the bytes are not a supported, complete image.
    """
    if not data:
        raise DecodeFailure(source, "no data")

    mime = determine_mime(data)
    if MediaType.from_mime(mime) != MediaType.IMAGE:
        raise DecodeFailure(source, f"content is {mime}")

    try:
        with Image.open(BytesIO(data)) as img:
            img.load()
            logger.debug(f"Detected {img.format} ({mime}) in {source}")
            decoded = img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeFailure(source, str(exc)) from exc
    except (OSError, SyntaxError, ValueError) as exc:
        # Pillow reports truncated and corrupt streams as OSError/SyntaxError
        raise DecodeFailure(source, str(exc)) from exc

    buffer = ImageBuffer(image=decoded, source=source)
    logger.info(f"size: {buffer.width}x{buffer.height}")
    return buffer


@timed_stage("acquire")
async def acquire(
    locator: SourceLocator,
    *,
    config: ReformatConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> ImageBuffer:
    """Produce a decoded image for a validated locator.

    Raises:
        SourceUnreachable: If the source cannot be opened or fetched.
        DecodeFailure: If the source was read but is not a decodable image.
    """
    match locator:
        case LocalPath(path=path):
            data = await read_local_bytes(path)
        case RemoteUrl(url=url):
            user_agent = config.user_agent if config is not None else None
            data = await fetch_bytes(url, client=client, user_agent=user_agent)

    return decode_bytes(data, locator.display)
