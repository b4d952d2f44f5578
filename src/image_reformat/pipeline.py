"""The reformat pipeline: validate -> acquire -> transform -> select encoding -> sink.

One parameterized pipeline serves both the CLI (file sink) and the HTTP
surface (buffer sink). Each run is self-contained; nothing is shared between
runs except the read-only config.
"""

from pathlib import Path

import httpx
from loguru import logger

from .algo.acquirer import acquire
from .algo.format_selector import parse_format, prepare_for_encoding, select_encoding
from .algo.sink import FileSink, write_to_buffer, write_to_file
from .algo.transformer import transform
from .algo.validator import check_output_path, check_quality, classify
from .common.config import ReformatConfig
from .common.errors import ImageToolError
from .common.schemas import (
    Encoding,
    OutputDescriptor,
    ReformatOutput,
    ReformatParams,
    ResizeTarget,
    SinkKind,
    SourceLocator,
)
from .utils.output_path import source_filename


class ReformatPipeline:
    """Runs :class:`ReformatParams` against a fixed :class:`ReformatConfig`.

    Example:
        config = ReformatConfig(output_dir=Path("./output"))
        pipeline = ReformatPipeline(config)

        result = await pipeline.run(ReformatParams(source="photo.png", quality=50))
        print(result.output_path)
    """

    def __init__(
        self,
        config: ReformatConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Args:
            config: Output directory, naming and default format settings
            client: Optional shared HTTP client for remote sources
        """
        self.config: ReformatConfig = config if config is not None else ReformatConfig()
        self.client: httpx.AsyncClient | None = client
        self.file_sink: FileSink = FileSink(self.config)

    def validate(self, params: ReformatParams) -> tuple[SourceLocator, int | None, Path | None]:
        """Run every input check before any I/O.

        Returns:
            (locator, quality, output path). The output path is None for the
            buffer sink, and provisional when it is derived from the source
            (its extension is settled once the encoding is known).
        """
        locator = classify(params.source)
        quality = check_quality(params.quality)

        output_path: Path | None = None
        if params.sink == SinkKind.FILE:
            if params.output_path is not None:
                output_path = check_output_path(params.output_path)
            else:
                output_path = check_output_path(self.file_sink.output_path_for(params.source))

        return locator, quality, output_path

    def _final_output_path(self, params: ReformatParams, validated: Path, encoding: Encoding) -> Path:
        if params.output_path is not None:
            return validated

        source_ext = Path(source_filename(params.source)).suffix
        if parse_format(source_ext) == encoding:
            return validated
        return self.file_sink.output_path_for(params.source, extension=encoding.extension)

    async def run(self, params: ReformatParams) -> ReformatOutput:
        """Execute one pipeline run.

        Raises:
            InputValidationError: Bad source, quality or output path (raised before any I/O)
            ImageRuntimeError: Unreachable source, decode/write failure, degenerate size
        """
        locator, quality, output_path = self.validate(params)
        logger.info(f"Reformatting {locator.display}")

        img = await acquire(locator, config=self.config, client=self.client)

        img = transform(
            img,
            ResizeTarget(width=params.width, height=params.height),
            quality,
        )

        requested_format = params.target_format or self.config.format
        encoding = select_encoding(img, requested_format)
        img = prepare_for_encoding(img, encoding)

        if params.sink == SinkKind.BUFFER:
            descriptor = OutputDescriptor(sink=SinkKind.BUFFER, encoding=encoding)
            data = write_to_buffer(img, descriptor.encoding)
            return ReformatOutput(
                width=img.width,
                height=img.height,
                encoding=encoding,
                media_type=encoding.media_type,
                data=data,
            )

        assert output_path is not None
        descriptor = OutputDescriptor(
            sink=SinkKind.FILE,
            encoding=encoding,
            path=self._final_output_path(params, output_path, encoding),
        )
        assert descriptor.path is not None
        written = write_to_file(img, descriptor.encoding, descriptor.path)

        return ReformatOutput(
            width=img.width,
            height=img.height,
            encoding=encoding,
            media_type=encoding.media_type,
            output_path=str(written),
        )


async def run_pipeline(
    params: ReformatParams,
    config: ReformatConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> ReformatOutput:
    """Run a single pipeline invocation; errors are logged and re-raised."""
    try:
        return await ReformatPipeline(config, client).run(params)
    except ImageToolError as exc:
        logger.error(f"[{exc.category}] {exc}")
        raise
